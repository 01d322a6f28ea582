from __future__ import annotations

import csv
import io
from typing import List

from .base import Sitemap

COLUMNS: List[str] = ["loc", "lastmod", "changefreq", "priority"]


class CSVSitemap(Sitemap):
    """Header row followed by one row per url, in insertion order."""

    name = "csv"
    extension = ".csv"

    def render(self) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(COLUMNS)
        for item in self.items():
            writer.writerow([item[col] for col in COLUMNS])
        return buf.getvalue()
