from typing import Type
from pydantic import BaseModel

from sitemap_hub.canonical.v1.url import SitemapURLV1
from sitemap_hub.canonical.v1.video_url import VideoSitemapURLV1

# Schema IDs name the kind of <url> entry a payload describes.
# A new optional field bumps the minor version; anything that changes emitted XML bumps major.
_CANONICAL_REGISTRY: dict[tuple[str, str], Type[BaseModel]] = {
    ("sitemap.url", "1.0"): SitemapURLV1,
    ("sitemap.url.video", "1.0"): VideoSitemapURLV1,
}

def resolve_schema(schema: str, version: str) -> Type[BaseModel]:
    """
    Resolve (schema, version) to a Pydantic model.
    """
    key = (schema, version)
    if key not in _CANONICAL_REGISTRY:
        raise KeyError(f"Unknown schema/version: {schema}@{version}")
    return _CANONICAL_REGISTRY[key]

def supported_schemas() -> list[dict]:
    return [{"schema": s, "version": v} for (s, v) in sorted(_CANONICAL_REGISTRY.keys())]
