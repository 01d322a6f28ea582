"""Error types raised while building sitemaps.

Everything here derives from ``SitemapError`` and also from the closest
built-in exception, so callers can catch either.
"""

from __future__ import annotations

from typing import Any, Iterable, List


class SitemapError(Exception):
    """Base class for all sitemap builder errors."""


class RecordValidationError(SitemapError, ValueError):
    """A page record field failed validation."""

    def __init__(self, field: str, value: Any = None, reason: str = "") -> None:
        self.field = field
        self.value = value
        self.reason = reason
        message = f"Invalid initial argument: {field}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidKeysError(SitemapError, ValueError):
    def __init__(
        self,
        unexpected: Iterable[Any] = (),
        missing: Iterable[Any] = (),
        allowed: Iterable[str] = (),
    ) -> None:
        self.unexpected: List[str] = sorted(map(str, unexpected))
        self.missing: List[str] = sorted(map(str, missing))
        self.allowed: List[str] = list(allowed)
        parts = []
        if self.unexpected:
            parts.append(f"Invalid key: {', '.join(self.unexpected)}.")
        if self.missing:
            parts.append(f"Missing key: {', '.join(self.missing)}.")
        parts.append(f"Allowed values: {', '.join(self.allowed)}.")
        super().__init__("Invalid initial value in initial data. " + " ".join(parts))

    @property
    def offending_keys(self) -> List[str]:
        return self.unexpected + self.missing


class InvalidEntryError(SitemapError, TypeError):
    def __init__(self, entry: Any) -> None:
        self.entry = entry
        super().__init__(f"Unsupported entry type: {type(entry)}")


class DirectoryCreationError(SitemapError, OSError):
    def __init__(self, directory: str) -> None:
        self.directory = directory
        super().__init__(f"Unable to create directory: {directory}")


class WritePermissionError(SitemapError, PermissionError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Not enough rights to write: {path}")


class UnsupportedFormatError(SitemapError, ValueError):
    def __init__(self, fmt: Any, supported: Iterable[str] = ()) -> None:
        self.format = fmt
        self.supported = list(supported)
        super().__init__(
            f"Unsupported sitemap format {fmt!r}; expected one of: {', '.join(self.supported)}"
        )
