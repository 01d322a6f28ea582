import os
import tempfile

import pytest

from sitemap_builder.exceptions import UnsupportedFormatError
from sitemap_builder.services.sitemap import (
    CSVSitemap,
    JsonSitemap,
    SitemapFormat,
    XMLSitemap,
    make,
    resolve_format,
)

ENTRY = {"url": "https://example.com/", "lastMod": "2024-01-15", "priority": 0.8, "frequency": "daily"}


def test_make_by_token_and_enum():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "out")
        assert isinstance(make([ENTRY], path, "json"), JsonSitemap)
        assert isinstance(make([ENTRY], path, "xml"), XMLSitemap)
        assert isinstance(make([ENTRY], path, "csv"), CSVSitemap)
        assert isinstance(make([ENTRY], path, SitemapFormat.XML), XMLSitemap)
        assert isinstance(make([ENTRY], path, SitemapFormat.CSV), CSVSitemap)


def test_format_to_string():
    assert [f.to_string() for f in SitemapFormat] == ["json", "xml", "csv"]


def test_unsupported_format_creates_no_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "nested", "sitemap.yaml")
        with pytest.raises(UnsupportedFormatError) as ei:
            make([ENTRY], path, "yaml")
        assert ei.value.format == "yaml"
        assert ei.value.supported == ["json", "xml", "csv"]
        assert not os.path.exists(path)
        assert not os.path.exists(os.path.join(tmpdir, "nested"))


def test_format_tokens_are_exact():
    for token in ("JSON", " xml", "", None, 1):
        with pytest.raises(UnsupportedFormatError):
            resolve_format(token)


def test_default_format_from_environment(monkeypatch):
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "sitemap")
        monkeypatch.delenv("SITEMAP_DEFAULT_FORMAT", raising=False)
        assert isinstance(make([ENTRY], path), JsonSitemap)
        monkeypatch.setenv("SITEMAP_DEFAULT_FORMAT", "CSV")
        assert isinstance(make([ENTRY], path), CSVSitemap)


def test_make_end_to_end():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "public", "sitemap.csv")
        sitemap = make([ENTRY], path, "csv")
        assert sitemap.generate()
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
        assert lines == [
            "loc,lastmod,changefreq,priority",
            "https://example.com/,2024-01-15T00:00:00+00:00,daily,0.8",
        ]
