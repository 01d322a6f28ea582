"""Build JSON, XML or CSV sitemaps from validated page records."""

from sitemap_builder.exceptions import SitemapError
from sitemap_builder.models.page import ChangeFrequency, PageRecord
from sitemap_builder.services.sitemap import Sitemap, SitemapCollection, SitemapFormat, make

__all__ = [
    "ChangeFrequency",
    "PageRecord",
    "Sitemap",
    "SitemapCollection",
    "SitemapError",
    "SitemapFormat",
    "make",
]
