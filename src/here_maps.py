"""HERE WeGo URL builder.

HERE encodes most of the state in the path:
    search/<query>?map=lat,lon,zoom,scheme
    directions/<mode>/<origin>/<destination>
    ?map=lat,lon,zoom,scheme
"""

from __future__ import annotations

from typing import Optional

import geo_bounds as gb  # type: ignore
import urls  # type: ignore
from provider_base import MapProvider, Mode, text_or_none  # type: ignore

BASE_URL = "https://wego.here.com/"

SCHEMES = ("normal", "satellite", "terrain", "traffic")
TRANSPORT_MODES = ("drive", "walk", "publicTransport", "bicycle")


class HereMaps(MapProvider):
    name = "here"
    map_types = SCHEMES
    default_map_type = "normal"

    def _reset(self) -> None:
        self.query: Optional[str] = None
        self.origin: Optional[str] = None
        self.destination: Optional[str] = None
        self.transport = "drive"

    def search(self, query: str) -> "HereMaps":
        self.query = text_or_none(query)
        return self

    def from_(self, origin: str) -> "HereMaps":
        self.origin = text_or_none(origin)
        return self

    def to(self, destination: str) -> "HereMaps":
        self.destination = text_or_none(destination)
        return self

    def transport_mode(self, mode: str) -> "HereMaps":
        self.transport = gb.choose(mode, TRANSPORT_MODES, "drive")
        return self

    def resolve_mode(self) -> Optional[Mode]:
        if self.query:
            return Mode.SEARCH
        # the route needs an end point; origin alone is not enough
        if self.destination:
            return Mode.DIRECTIONS
        if self.has_location():
            return Mode.MAP
        return None

    def _map_value(self) -> str:
        return f"{self.point()},{self.zoom_level},{self.basemap}"

    def _render(self, mode: Mode) -> str:
        if mode is Mode.SEARCH:
            base = f"{BASE_URL}search/{urls.quote_segment(self.query)}"
            if not self.has_location():
                return base
            return urls.with_query(base, {"map": self._map_value()})
        if mode is Mode.DIRECTIONS:
            segments = [self.transport]
            if self.origin:
                segments.append(urls.quote_segment(self.origin))
            segments.append(urls.quote_segment(self.destination))
            return f"{BASE_URL}directions/" + "/".join(segments)
        return urls.with_query(BASE_URL, {"map": self._map_value()})
