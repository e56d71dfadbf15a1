from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from sitemap_hub.canonical.registry import resolve_schema, supported_schemas
from sitemap_hub.core.config import settings
from sitemap_hub.schemas.sitemap import SchemaRef, SitemapPreviewRequest
from sitemap_hub.services.canonical_validate import validate_url_payload
from sitemap_hub.services.feed_generator import generate_sitemap_xml
from sitemap_hub.services.feed_stats import summarize_warnings

router = APIRouter()


def _etag_value(content_hash: str) -> str:
    # Strong ETag
    return f"\"{content_hash}\""


@router.get("/sitemaps/schemas", response_model=list[SchemaRef], response_model_by_alias=True)
async def list_sitemap_schemas():
    return [SchemaRef(schema_name=s["schema"], version=s["version"]) for s in supported_schemas()]


@router.post("/sitemaps/preview")
async def preview_sitemap(body: SitemapPreviewRequest):
    try:
        resolve_schema(body.schema_name, body.schema_version)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))

    if len(body.urls) > settings.preview_max_urls:
        raise HTTPException(
            status_code=413,
            detail=f"Preview accepts at most {settings.preview_max_urls} URLs",
        )

    models = []
    errors = []
    for i, payload in enumerate(body.urls):
        res = validate_url_payload(
            schema=body.schema_name,
            schema_version=body.schema_version,
            payload=payload,
        )
        if not res.ok:
            errors.append({"index": i, "errors": res.errors})
            continue
        models.append(res.model)

    if errors:
        raise HTTPException(status_code=422, detail=errors)

    out = generate_sitemap_xml(models)
    counts = summarize_warnings(out.warnings)

    headers = {
        "ETag": _etag_value(out.content_hash),
        "X-Url-Count": str(out.url_count),
        "X-Warnings-Count": str(len(out.warnings)),
    }
    if counts:
        headers["X-Warnings"] = ",".join(f"{code}={n}" for code, n in sorted(counts.items()))

    return Response(content=out.bytes, media_type="application/xml", headers=headers)
