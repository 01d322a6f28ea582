"""Runtime settings.

Configuration via environment variables:
- SITEMAP_DEFAULT_FORMAT: format used when none is given (json | xml | csv)
- SITEMAP_LOG_LEVEL: logging level for the command-line runner
"""

from __future__ import annotations

import os

DEFAULT_FORMAT = "json"
DEFAULT_LOG_LEVEL = "INFO"


def default_format() -> str:
    return (os.getenv("SITEMAP_DEFAULT_FORMAT") or DEFAULT_FORMAT).strip().lower()


def log_level() -> str:
    return (os.getenv("SITEMAP_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
