from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field
from typing import Iterable
from xml.etree.ElementTree import Element, tostring

from sitemap_hub.canonical.v1.url import SitemapURLV1
from sitemap_hub.canonical.v1.video_url import VideoSitemapURLV1
from sitemap_hub.core.config import settings
from sitemap_hub.services.feeds.video_xml import VIDEO_PREFIX

log = logging.getLogger(__name__)

# Not enforced; crawlers drop video entries without these.
_EXPECTED_VIDEO_FIELDS = ("thumbnail_loc", "title", "description")


@dataclass
class SitemapBuildWarning:
    loc: str
    code: str
    message: str


@dataclass(frozen=True)
class SitemapBuildOutput:
    bytes: bytes
    url_count: int
    content_hash: str
    warnings: list[SitemapBuildWarning] = field(default_factory=list)


def _video_warnings(url: VideoSitemapURLV1) -> list[SitemapBuildWarning]:
    loc = str(url.loc)
    if url.video is None:
        return []
    if not url.has_video:
        return [SitemapBuildWarning(loc, "VIDEO_WITHOUT_LOCATION", "Video attributes set but no content_loc/player_loc; block omitted")]
    return [
        SitemapBuildWarning(loc, f"MISSING_{name.upper()}", f"Video entry has no {name}")
        for name in _EXPECTED_VIDEO_FIELDS
        if not url.video.has_value(name)
    ]


def generate_sitemap_xml(urls: Iterable[SitemapURLV1]) -> SitemapBuildOutput:
    """
    Assemble a <urlset> document. The video prefix is always declared so
    entries with and without video blocks can share one document.
    """
    root = Element("urlset", {
        "xmlns": settings.sitemap_namespace,
        f"xmlns:{VIDEO_PREFIX}": settings.video_namespace,
    })
    warnings: list[SitemapBuildWarning] = []

    count = 0
    for url in urls:
        count += 1
        if count > settings.max_urls_per_sitemap:
            raise ValueError(f"A sitemap holds at most {settings.max_urls_per_sitemap} URLs")

        root.append(url.as_elt())
        if isinstance(url, VideoSitemapURLV1):
            warnings.extend(_video_warnings(url))

    data = tostring(root, encoding="utf-8", xml_declaration=True)
    h = hashlib.sha256(data).hexdigest()
    log.info("Built sitemap: urls=%d bytes=%d warnings=%d", count, len(data), len(warnings))
    return SitemapBuildOutput(bytes=data, url_count=count, content_hash=h, warnings=warnings)
