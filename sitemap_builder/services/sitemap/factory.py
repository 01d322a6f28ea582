from __future__ import annotations

import os
from enum import Enum
from typing import Dict, Iterable, Optional, Type, Union

from sitemap_builder import config
from sitemap_builder.exceptions import UnsupportedFormatError

from .base import Sitemap
from .collection import RawEntry, SitemapCollection
from .csv_sitemap import CSVSitemap
from .json_sitemap import JsonSitemap
from .xml_sitemap import XMLSitemap


class SitemapFormat(str, Enum):
    JSON = "json"
    XML = "xml"
    CSV = "csv"

    def to_string(self) -> str:
        return self.value


SITEMAP_TYPES: Dict[SitemapFormat, Type[Sitemap]] = {
    SitemapFormat.JSON: JsonSitemap,
    SitemapFormat.XML: XMLSitemap,
    SitemapFormat.CSV: CSVSitemap,
}


def resolve_format(fmt: Union[str, SitemapFormat]) -> Type[Sitemap]:
    if isinstance(fmt, SitemapFormat):
        return SITEMAP_TYPES[fmt]
    if isinstance(fmt, str):
        try:
            return SITEMAP_TYPES[SitemapFormat(fmt)]
        except ValueError:
            pass
    raise UnsupportedFormatError(fmt, supported=[f.value for f in SitemapFormat])


def make(
    urls: Iterable[RawEntry],
    path: Union[str, os.PathLike],
    fmt: Optional[Union[str, SitemapFormat]] = None,
) -> Sitemap:
    """Build the sitemap writer for ``fmt`` over the given urls.

    The format is checked before the destination is touched, so an
    unsupported format leaves the filesystem alone. ``fmt`` defaults to
    SITEMAP_DEFAULT_FORMAT.
    """
    sitemap_cls = resolve_format(fmt if fmt is not None else config.default_format())
    collection = SitemapCollection(urls, path)
    return sitemap_cls(collection)
