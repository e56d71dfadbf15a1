from __future__ import annotations

import logging
from xml.etree.ElementTree import Element

from sitemap_hub.canonical.v1.video import VIDEO_FIELDS, VideoV1
from sitemap_hub.services.feeds.video_fields import default_field_transform, get_field_transform
from sitemap_hub.services.xml_nodes import as_text_node, wrap_in

log = logging.getLogger(__name__)

VIDEO_PREFIX = "video"


def build_video_elts(video: VideoV1) -> list[Element]:
    """
    Render the <video:*> children for one URL, in `video.field_order`.

    - unset fields and unknown names produce nothing
    - list values (tag, category) produce one element per entry, in order
    - only None or an empty list suppresses a set field; "" and 0 are emitted

    Reads the store only; repeated calls give identical output.
    """
    elements: list[Element] = []

    for f in video.field_order:
        if f not in VIDEO_FIELDS:
            log.debug("Ignoring unknown video field %r in field_order", f)
            continue
        if not video.has_value(f):
            continue

        transform = get_field_transform(f) or default_field_transform
        val = transform(getattr(video, f))

        # A transform may decline to render (e.g. missing prerequisite).
        if val is None or (isinstance(val, list) and not val):
            continue

        values = val if isinstance(val, list) else [val]
        for v in values:
            elements.append(wrap_in(as_text_node(v), f"{VIDEO_PREFIX}:{f}"))

    return elements
