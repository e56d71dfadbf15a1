from __future__ import annotations

from datetime import datetime
from typing import Any, Callable

from pydantic import HttpUrl

from sitemap_hub.core.dates import format_w3c_datetime
from sitemap_hub.services.xml_nodes import TextNode


FieldTransform = Callable[[Any], Any]


def _loc_as_elt(value: HttpUrl | None) -> TextNode | None:
    if value is None:
        return None
    return TextNode.escaped(str(value))


def _date_as_elt(value: datetime | None) -> str | None:
    if value is None:
        return None
    return format_w3c_datetime(value)


def _family_friendly_as_elt(value: bool) -> str:
    return "Yes" if value else "No"


# Fields without an entry here are rendered by default_field_transform.
_FIELD_TRANSFORMS: dict[str, FieldTransform] = {
    "content_loc": _loc_as_elt,
    "player_loc": _loc_as_elt,
    "expiration_date": _date_as_elt,
    "publication_date": _date_as_elt,
    "family_friendly": _family_friendly_as_elt,
}


def default_field_transform(value: Any) -> Any:
    """
    Stored value is used as-is; the XML layer escapes it as element text.
    """
    return value


def get_field_transform(field: str) -> FieldTransform | None:
    return _FIELD_TRANSFORMS.get(field)


def supported_field_transforms() -> list[str]:
    return sorted(_FIELD_TRANSFORMS.keys())
