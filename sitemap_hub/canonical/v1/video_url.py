from __future__ import annotations

from typing import Any
from xml.etree.ElementTree import Element, SubElement

from pydantic import field_validator, model_validator

from sitemap_hub.canonical.v1.url import SitemapURLV1
from sitemap_hub.canonical.v1.video import VIDEO_FIELDS, VideoV1
from sitemap_hub.services.feeds.video_xml import VIDEO_PREFIX, build_video_elts

_VIDEO_KEYS = VIDEO_FIELDS | {"field_order"}


class VideoSitemapURLV1(SitemapURLV1):
    """
    Sitemap URL carrying a <video:video> block.

    Video attributes may be given nested or flat:

        VideoSitemapURLV1(loc=..., video={"content_loc": ...})
        VideoSitemapURLV1(loc=..., content_loc=..., player_loc=...)
    """
    video: VideoV1 | None = None

    @model_validator(mode="before")
    @classmethod
    def fold_flat_video_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        flat = {k: v for k, v in data.items() if k in _VIDEO_KEYS}
        if not flat:
            return data

        rest = {k: v for k, v in data.items() if k not in _VIDEO_KEYS}
        nested = rest.get("video")
        if isinstance(nested, VideoV1):
            nested = nested.model_dump(exclude_unset=True)
        rest["video"] = {**(nested or {}), **flat}
        return rest

    @field_validator("video", mode="before")
    @classmethod
    def own_video_store(cls, v: Any) -> Any:
        # A store passed in is copied so no two URLs share one.
        if isinstance(v, VideoV1):
            return v.model_copy(deep=True)
        return v

    @property
    def has_video(self) -> bool:
        return self.video is not None and self.video.has_video

    def set_video_attr(self, name: str, value: Any) -> None:
        if name not in _VIDEO_KEYS:
            raise KeyError(f"Unknown video field: {name}")
        if self.video is not None:
            setattr(self.video, name, value)
            return
        # Attach the new store only once the value is accepted.
        video = VideoV1()
        setattr(video, name, value)
        self.video = video

    def as_elt(self) -> Element:
        elt = super().as_elt()
        if not self.has_video:
            return elt

        container = SubElement(elt, f"{VIDEO_PREFIX}:video")
        container.extend(build_video_elts(self.video))
        return elt
