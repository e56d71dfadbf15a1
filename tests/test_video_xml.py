import re
from xml.etree.ElementTree import tostring

from sitemap_hub.canonical.v1.video import DEFAULT_FIELD_ORDER, VideoV1
from sitemap_hub.services.feeds.video_xml import build_video_elts


def _tags(elts):
    return [e.tag for e in elts]


def test_locations_only():
    v = VideoV1(
        content_loc="http://example.com/video.flv",
        player_loc="http://example.com/player.swf",
    )
    elts = build_video_elts(v)

    # family_friendly defaults to true, so it is always rendered
    assert _tags(elts) == ["video:player_loc", "video:content_loc", "video:family_friendly"]
    assert elts[0].text == "http://example.com/player.swf"
    assert elts[1].text == "http://example.com/video.flv"
    assert elts[2].text == "Yes"


def test_all_fields_in_default_order(full_video):
    elts = build_video_elts(VideoV1(**full_video))

    expected = []
    for f in DEFAULT_FIELD_ORDER:
        n = len(full_video[f]) if isinstance(full_video[f], list) else 1
        expected.extend([f"video:{f}"] * n)
    assert _tags(elts) == expected


def test_unset_fields_are_omitted():
    v = VideoV1(content_loc="http://example.com/video.flv", title="T")
    assert _tags(build_video_elts(v)) == ["video:content_loc", "video:title", "video:family_friendly"]


def test_tag_list_expands_in_order():
    v = VideoV1(content_loc="http://example.com/video.flv", tag=["b", "a", "c", "a"])
    tags = [e.text for e in build_video_elts(v) if e.tag == "video:tag"]
    assert tags == ["b", "a", "c", "a"]


def test_empty_list_emits_nothing():
    v = VideoV1(content_loc="http://example.com/video.flv", category=[])
    assert "video:category" not in _tags(build_video_elts(v))


def test_empty_string_and_zero_are_emitted():
    v = VideoV1(content_loc="http://example.com/video.flv", title="", duration=0, view_count=0)
    by_tag = {e.tag: e.text for e in build_video_elts(v)}
    assert by_tag["video:title"] == ""
    assert by_tag["video:duration"] == "0"
    assert by_tag["video:view_count"] == "0"


def test_family_friendly_false():
    v = VideoV1(content_loc="http://example.com/video.flv", family_friendly=False)
    assert build_video_elts(v)[-1].text == "No"


def test_expiration_date_format(full_video):
    v = VideoV1(**full_video)
    (exp,) = [e for e in build_video_elts(v) if e.tag == "video:expiration_date"]
    assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\+0000$", exp.text)
    assert exp.text == "2030-11-05T19:20:30+0000"


def test_custom_field_order():
    v = VideoV1(
        content_loc="http://example.com/video.flv",
        title="T",
        field_order=["title", "content_loc"],
    )
    assert _tags(build_video_elts(v)) == ["video:title", "video:content_loc"]


def test_unknown_names_in_field_order_are_ignored():
    v = VideoV1(
        content_loc="http://example.com/video.flv",
        field_order=["nope", "content_loc", "loc", "field_order"],
    )
    assert _tags(build_video_elts(v)) == ["video:content_loc"]


def test_location_escaped_once():
    v = VideoV1(player_loc="http://example.com/player.swf?id=1&autoplay=0")
    raw = tostring(build_video_elts(v)[0], encoding="unicode")
    assert raw == "<video:player_loc>http://example.com/player.swf?id=1&amp;autoplay=0</video:player_loc>"


def test_default_text_is_escaped():
    v = VideoV1(content_loc="http://example.com/video.flv", title="Salt & <pepper>")
    (title,) = [e for e in build_video_elts(v) if e.tag == "video:title"]
    assert tostring(title, encoding="unicode") == "<video:title>Salt &amp; &lt;pepper&gt;</video:title>"


def test_builder_is_idempotent(full_video):
    v = VideoV1(**full_video)
    before = v.model_dump()

    first = [tostring(e) for e in build_video_elts(v)]
    second = [tostring(e) for e in build_video_elts(v)]

    assert first == second
    assert v.model_dump() == before


def test_builds_without_location():
    # The gate lives on the URL entity; the builder renders whatever is set.
    v = VideoV1(title="T")
    assert _tags(build_video_elts(v)) == ["video:title", "video:family_friendly"]
