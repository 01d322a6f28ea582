from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Dict

from .base import Sitemap

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
SCHEMA_LOCATION = f"{SITEMAP_NS} {SITEMAP_NS}/sitemap.xsd"

# Written verbatim and in this order on <urlset>
URLSET_ATTRIBUTES: Dict[str, str] = {
    "xmlns:xsi": XSI_NS,
    "xmlns": SITEMAP_NS,
    "xsi:schemaLocation": SCHEMA_LOCATION,
}


class XMLSitemap(Sitemap):
    """sitemaps.org 0.9 urlset.

    Each <url> holds loc, lastmod, changefreq and priority in that order;
    search engines expect this shape.
    """

    name = "xml"
    extension = ".xml"

    def build_tree(self) -> ET.Element:
        urlset = ET.Element("urlset")
        for key, value in URLSET_ATTRIBUTES.items():
            urlset.set(key, value)

        for url in self.get_urls():
            url_el = ET.SubElement(urlset, "url")
            ET.SubElement(url_el, "loc").text = url.url
            ET.SubElement(url_el, "lastmod").text = url.last_mod
            ET.SubElement(url_el, "changefreq").text = url.frequency.value
            ET.SubElement(url_el, "priority").text = str(url.priority)
        return urlset

    def render(self) -> str:
        body = ET.tostring(self.build_tree(), encoding="unicode")
        return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"
