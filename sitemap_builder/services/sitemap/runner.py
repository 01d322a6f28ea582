from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from sitemap_builder import config
from sitemap_builder.exceptions import SitemapError

from .factory import SitemapFormat, make

logger = logging.getLogger(__name__)

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def run(input_path: str, output_path: str, *, fmt: str) -> bool:
    """Read a JSON array of url mappings and write the sitemap."""
    with open(input_path, "r", encoding="utf-8") as f:
        entries = json.load(f)
    if not isinstance(entries, list):
        raise ValueError(f"Expected a JSON array of urls in {input_path}")
    logger.debug("Loaded %d urls from %s", len(entries), input_path)
    sitemap = make(entries, output_path, fmt)
    return sitemap.generate()


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a sitemap file from a JSON list of urls")
    parser.add_argument("input", help="JSON file: [{url, lastMod, priority, frequency}, ...]")
    parser.add_argument("output", help="Destination file (parent directories are created)")
    parser.add_argument(
        "--format",
        dest="fmt",
        default=config.default_format(),
        choices=[f.value for f in SitemapFormat],
        help="Output format",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level(),
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
    )

    args = parser.parse_args(argv)
    # Defaults skip the choices check
    if args.log_level not in LOG_LEVELS:
        print(f"error: unknown log level {args.log_level!r}", file=sys.stderr)
        return 2
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s | %(asctime)s | %(name)s | %(message)s",
    )

    try:
        ok = run(args.input, args.output, fmt=args.fmt)
    except (SitemapError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if not ok:
        return 1
    print(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
