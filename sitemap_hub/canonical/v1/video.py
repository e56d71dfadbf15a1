from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, HttpUrl


# Order of <video:*> children; follows the element sequence of the video sitemap schema.
DEFAULT_FIELD_ORDER: tuple[str, ...] = (
    "player_loc",
    "content_loc",
    "thumbnail_loc",
    "title",
    "description",
    "expiration_date",
    "duration",
    "rating",
    "view_count",
    "publication_date",
    "tag",
    "category",
    "family_friendly",
)

VIDEO_FIELDS: frozenset[str] = frozenset(DEFAULT_FIELD_ORDER)


class VideoV1(BaseModel):
    """
    Video metadata attached to a sitemap URL.

    Every attribute is optional and presence is tracked apart from the value:
    an attribute counts as set once it has been assigned a non-None value,
    until `clear()` is called. `family_friendly` has a default and so is
    always present.

    Assignments are validated. Putting a list into a scalar field, or a bare
    string into `tag`/`category`, is rejected instead of coerced.
    """
    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    player_loc: HttpUrl | None = None
    content_loc: HttpUrl | None = None
    thumbnail_loc: HttpUrl | None = None

    title: str | None = None
    description: str | None = None

    expiration_date: datetime | None = None
    publication_date: datetime | None = None

    duration: int | None = Field(default=None, ge=0, description="Seconds.")
    view_count: int | None = Field(default=None, ge=0)
    rating: float | None = Field(default=None, ge=0.0, le=5.0)

    tag: list[str] | None = None
    category: list[str] | None = None

    family_friendly: bool = True

    field_order: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FIELD_ORDER),
        description="Fields to emit, in emission order. Unknown names are ignored.",
    )

    def has_value(self, name: str) -> bool:
        if name not in VIDEO_FIELDS:
            return False
        if name in self.model_fields_set:
            return getattr(self, name) is not None
        return type(self).model_fields[name].default is not None

    def clear(self, name: str) -> None:
        if name not in VIDEO_FIELDS:
            raise KeyError(f"Unknown video field: {name}")
        default = type(self).model_fields[name].get_default(call_default_factory=True)
        setattr(self, name, default)
        self.model_fields_set.discard(name)

    @property
    def has_video(self) -> bool:
        # The video extension requires at least one of these two locations.
        return self.has_value("content_loc") or self.has_value("player_loc")
