from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Mapping, Tuple, Union

from sitemap_builder.exceptions import (
    DirectoryCreationError,
    InvalidEntryError,
    InvalidKeysError,
    WritePermissionError,
)
from sitemap_builder.models.page import PageRecord

logger = logging.getLogger(__name__)

ALLOWED_KEYS: Tuple[str, ...] = ("url", "lastMod", "priority", "frequency")

RawEntry = Union[PageRecord, Mapping[str, Any]]


def prepare_destination(path: Union[str, os.PathLike]) -> Path:
    """Make sure ``path`` can be written.

    Creates missing parent directories and an empty file if none exists.
    Raises DirectoryCreationError or WritePermissionError.
    """
    dest = Path(path)
    parent = dest.parent
    if not parent.is_dir():
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreationError(str(parent)) from exc
    if not dest.exists():
        try:
            dest.touch()
        except OSError as exc:
            raise WritePermissionError(str(dest)) from exc
    if dest.is_dir() or not os.access(dest, os.W_OK):
        raise WritePermissionError(str(dest))
    return dest


def check_entry_keys(entry: Mapping[str, Any]) -> None:
    keys = set(entry.keys())
    unexpected = keys - set(ALLOWED_KEYS)
    missing = set(ALLOWED_KEYS) - keys
    if unexpected or missing:
        raise InvalidKeysError(unexpected=unexpected, missing=missing, allowed=ALLOWED_KEYS)


class SitemapCollection:
    """Ordered, append-only set of page records bound to one output path."""

    def __init__(self, entries: Iterable[RawEntry], path: Union[str, os.PathLike]) -> None:
        self._urls: List[PageRecord] = []
        self._path = prepare_destination(path)
        self.add_urls(entries)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def urls(self) -> Tuple[PageRecord, ...]:
        return tuple(self._urls)

    def add_urls(self, entries: Iterable[RawEntry]) -> "SitemapCollection":
        for entry in entries:
            self.add_url(entry)
        return self

    def add_url(self, entry: RawEntry) -> "SitemapCollection":
        if isinstance(entry, PageRecord):
            record = entry
        elif isinstance(entry, Mapping):
            check_entry_keys(entry)
            record = PageRecord.from_mapping(entry)
        else:
            raise InvalidEntryError(entry)
        self._urls.append(record)
        logger.debug("Added %s to sitemap %s", record.url, self._path)
        return self

    def __len__(self) -> int:
        return len(self._urls)

    def __iter__(self) -> Iterator[PageRecord]:
        return iter(self.urls)
