from __future__ import annotations

from datetime import datetime
from typing import Literal
from xml.etree.ElementTree import Element, SubElement

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from sitemap_hub.core.dates import format_w3c_datetime


ChangeFreq = Literal["always", "hourly", "daily", "weekly", "monthly", "yearly", "never"]


class SitemapURLV1(BaseModel):
    """
    One <url> entry of a sitemaps.org urlset.
    """
    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    loc: HttpUrl
    lastmod: datetime | None = None
    changefreq: ChangeFreq | None = None
    priority: float | None = Field(default=None, ge=0.0, le=1.0)

    def as_elt(self) -> Element:
        elt = Element("url")
        SubElement(elt, "loc").text = str(self.loc)
        if self.lastmod is not None:
            SubElement(elt, "lastmod").text = format_w3c_datetime(self.lastmod)
        if self.changefreq is not None:
            SubElement(elt, "changefreq").text = self.changefreq
        if self.priority is not None:
            SubElement(elt, "priority").text = f"{self.priority:.1f}"
        return elt
