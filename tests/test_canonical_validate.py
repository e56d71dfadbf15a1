import pytest

from sitemap_hub.canonical.registry import resolve_schema, supported_schemas
from sitemap_hub.canonical.v1.video_url import VideoSitemapURLV1
from sitemap_hub.services.canonical_validate import validate_url_payload


def test_resolve_schema():
    assert resolve_schema("sitemap.url.video", "1.0") is VideoSitemapURLV1
    with pytest.raises(KeyError):
        resolve_schema("sitemap.url.video", "2.0")
    assert {"schema": "sitemap.url", "version": "1.0"} in supported_schemas()


def test_valid_payload():
    res = validate_url_payload(
        schema="sitemap.url.video",
        schema_version="1.0",
        payload={"loc": "http://example.com/w", "player_loc": "http://example.com/p.swf"},
    )
    assert res.ok
    assert res.errors == []
    assert res.model.has_video


def test_unknown_schema_is_reported():
    res = validate_url_payload(schema="sitemap.image", schema_version="1.0", payload={})
    assert not res.ok
    assert res.model is None
    assert res.errors[0]["type"] == "schema_not_supported"


def test_validation_errors_are_returned():
    res = validate_url_payload(
        schema="sitemap.url.video",
        schema_version="1.0",
        payload={"loc": "nope", "video": {"duration": "long"}},
    )
    assert not res.ok
    assert {e["loc"] for e in res.errors} == {("loc",), ("video", "duration")}
