"""Yandex Maps URL builder.

Yandex expects coordinates as `lon,lat` (the reverse of every other
provider); `coordinate_order` carries that rule.
"""

from __future__ import annotations

from typing import Dict, Optional

import geo_bounds as gb  # type: ignore
import urls  # type: ignore
from provider_base import MapProvider, Mode, text_or_none  # type: ignore

BASE_URL = "https://yandex.com/maps/"
WIDGET_URL = "https://yandex.com/map-widget/v1/"

LAYER_CODES = {"map": None, "satellite": "sat", "hybrid": "sat,skl"}
ROUTE_TYPES = {"auto": "auto", "masstransit": "mt", "pedestrian": "pd", "bicycle": "bc"}


class YandexMaps(MapProvider):
    name = "yandex"
    map_types = tuple(LAYER_CODES)
    default_map_type = "map"
    coordinate_order = urls.COORDINATE_ORDER["yandex"]

    def _reset(self) -> None:
        self.query: Optional[str] = None
        self.origin: Optional[str] = None
        self.destination: Optional[str] = None
        self.route_type = "auto"
        self.lang = "en"

    def search(self, query: str) -> "YandexMaps":
        self.query = text_or_none(query)
        return self

    def from_(self, origin: str) -> "YandexMaps":
        self.origin = text_or_none(origin)
        return self

    def to(self, destination: str) -> "YandexMaps":
        self.destination = text_or_none(destination)
        return self

    def travel_mode(self, mode: str) -> "YandexMaps":
        self.route_type = gb.choose(mode, ROUTE_TYPES, "auto")
        return self

    def language(self, lang: str) -> "YandexMaps":
        self.lang = text_or_none(lang) or "en"
        return self

    def layer(self, value: str) -> "YandexMaps":
        return self.map_type(value)

    def resolve_mode(self) -> Optional[Mode]:
        if self.query:
            return Mode.SEARCH
        if self.origin or self.destination:
            return Mode.DIRECTIONS
        if self.has_location():
            return Mode.MAP
        return None

    def _render(self, mode: Mode) -> str:
        params: Dict[str, object] = {"lang": self.lang}
        if mode is Mode.SEARCH:
            params["text"] = self.query
            if self.has_location():
                params["ll"] = self.point()
                params["z"] = self.zoom_level
        elif mode is Mode.DIRECTIONS:
            params["rtext"] = f"{self.origin or ''}~{self.destination or ''}"
            params["rtt"] = ROUTE_TYPES[self.route_type]
            params["z"] = self.zoom_level
        else:
            params["ll"] = self.point()
            params["z"] = self.zoom_level
        params["l"] = LAYER_CODES[self.basemap]
        return urls.with_query(BASE_URL, params)

    def get_embed_url(self) -> Optional[str]:
        """Same view through the map widget endpoint, or None."""
        url = self.get_url()
        if not url:
            return None
        return url.replace(BASE_URL, WIDGET_URL, 1)
