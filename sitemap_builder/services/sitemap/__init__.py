"""Sitemap generation.

Structure:
- collection.py: validated, ordered url list bound to an output path
- base.py: Sitemap contract (render + generate)
- json_sitemap.py, xml_sitemap.py, csv_sitemap.py: output formats
- factory.py: format token -> Sitemap class, and make()
- runner.py: tiny CLI entrypoint for manual runs
"""

from .base import Sitemap
from .collection import ALLOWED_KEYS, SitemapCollection
from .csv_sitemap import CSVSitemap
from .factory import SITEMAP_TYPES, SitemapFormat, make, resolve_format
from .json_sitemap import JsonSitemap
from .xml_sitemap import XMLSitemap

__all__ = [
    "ALLOWED_KEYS",
    "CSVSitemap",
    "JsonSitemap",
    "SITEMAP_TYPES",
    "Sitemap",
    "SitemapCollection",
    "SitemapFormat",
    "XMLSitemap",
    "make",
    "resolve_format",
]
