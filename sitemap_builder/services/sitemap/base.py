from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from sitemap_builder.models.page import PageRecord

from .collection import SitemapCollection

logger = logging.getLogger(__name__)


class Sitemap:
    """Output format contract.

    Subclasses implement render() to turn the collection into the document
    text. generate() writes it to the collection's path and reports whether
    the file was written; I/O errors are logged rather than raised.
    """

    name: str = "base"
    extension: str = ""

    def __init__(self, collection: SitemapCollection) -> None:
        self.collection = collection

    @property
    def path(self) -> Path:
        return self.collection.path

    def get_urls(self) -> Tuple[PageRecord, ...]:
        return self.collection.urls

    def items(self) -> List[Dict[str, Any]]:
        return [url.to_dict() for url in self.get_urls()]

    def render(self) -> str:
        raise NotImplementedError

    def generate(self) -> bool:
        content = self.render()
        return self.save_file(content)

    def save_file(self, content: str) -> bool:
        try:
            with open(self.path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError:
            logger.exception("Failed to write %s sitemap to %s", self.name, self.path)
            return False
        logger.info("Wrote %s sitemap with %d urls to %s", self.name, len(self.collection), self.path)
        return True
