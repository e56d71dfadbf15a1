from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SitemapPreviewRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_name: str = Field(default="sitemap.url.video", alias="schema")
    schema_version: str = "1.0"
    urls: list[dict[str, Any]] = Field(min_length=1)


class SchemaRef(BaseModel):
    schema_name: str = Field(serialization_alias="schema")
    version: str
