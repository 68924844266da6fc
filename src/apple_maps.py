"""Apple Maps URL builder.

References:
- Map Links: https://developer.apple.com/library/archive/featuredarticles/iPhoneURLScheme_Reference/MapLinks/MapLinks.html

Directions only need a destination; `saddr` is left out when no origin is
set (Apple then routes from the current location). Directions parameters
are key-sorted before encoding.
"""

from __future__ import annotations

from typing import Dict, Optional

import geo_bounds as gb  # type: ignore
import urls  # type: ignore
from provider_base import MapProvider, Mode, text_or_none  # type: ignore

BASE_URL = "https://maps.apple.com/"

DISPLAY_CODES = {"standard": "m", "satellite": "k", "hybrid": "h", "transit": "r"}
TRANSPORT_FLAGS = {"automobile": "d", "walking": "w", "transit": "r"}


class AppleMaps(MapProvider):
    name = "apple"
    max_zoom = 21
    map_types = tuple(DISPLAY_CODES)
    default_map_type = "standard"

    def _reset(self) -> None:
        self.query: Optional[str] = None
        self.near_latitude: Optional[float] = None
        self.near_longitude: Optional[float] = None
        self.origin: Optional[str] = None
        self.destination: Optional[str] = None
        self.transport = "automobile"
        self.address_text: Optional[str] = None

    def search(self, query: str) -> "AppleMaps":
        self.query = text_or_none(query)
        return self

    def near(self, latitude: float, longitude: float) -> "AppleMaps":
        """Search hint location (`sll`); defaults to the map coordinates."""
        self.near_latitude = gb.clamp_latitude(latitude)
        self.near_longitude = gb.clamp_longitude(longitude)
        return self

    def from_(self, origin: str) -> "AppleMaps":
        self.origin = text_or_none(origin)
        return self

    def to(self, destination: str) -> "AppleMaps":
        self.destination = text_or_none(destination)
        return self

    def transport_type(self, value: str) -> "AppleMaps":
        self.transport = gb.choose(value, TRANSPORT_FLAGS, "automobile")
        return self

    def display_mode(self, value: str) -> "AppleMaps":
        return self.map_type(value)

    def address(self, text: str) -> "AppleMaps":
        self.address_text = text_or_none(text)
        return self

    def resolve_mode(self) -> Optional[Mode]:
        if self.query:
            return Mode.SEARCH
        if self.destination:
            return Mode.DIRECTIONS
        if self.has_location():
            return Mode.MAP
        return None

    def _render(self, mode: Mode) -> str:
        t = DISPLAY_CODES[self.basemap]
        if mode is Mode.SEARCH:
            params: Dict[str, object] = {"q": self.query}
            if self.near_latitude is not None and self.near_longitude is not None:
                params["sll"] = urls.format_point(self.near_latitude, self.near_longitude)
            elif self.has_location():
                params["sll"] = self.point()
            if params.get("sll"):
                params["z"] = self.zoom_level
            params["t"] = t
            return urls.with_query(BASE_URL, params)

        if mode is Mode.DIRECTIONS:
            params = {
                "daddr": self.destination,
                "dirflg": TRANSPORT_FLAGS[self.transport],
                "saddr": self.origin,
                "t": t,
            }
            return urls.with_query(BASE_URL, params, sort=True)

        params = {
            "ll": self.point(),
            "z": self.zoom_level,
            "t": t,
            "address": self.address_text,
        }
        return urls.with_query(BASE_URL, params)
