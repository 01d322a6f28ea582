from __future__ import annotations

import json

from .base import Sitemap


class JsonSitemap(Sitemap):
    name = "json"
    extension = ".json"

    def render(self) -> str:
        return json.dumps(self.items(), ensure_ascii=False)
