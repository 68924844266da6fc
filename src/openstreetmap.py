"""OpenStreetMap URL builder (map view, search, directions, embed, editor)."""

from __future__ import annotations

from typing import Dict, Optional

import geo_bounds as gb  # type: ignore
import urls  # type: ignore
from provider_base import MapProvider, Mode, text_or_none  # type: ignore

BASE_URL = "https://www.openstreetmap.org/"

LAYER_CODES = {"standard": "M", "cycle": "C", "transport": "T", "humanitarian": "H"}
EMBED_LAYERS = {
    "standard": "mapnik",
    "cycle": "cyclemap",
    "transport": "transportmap",
    "humanitarian": "hot",
}
ROUTING_ENGINES = {
    "car": "fossgis_osrm_car",
    "bicycle": "fossgis_osrm_bike",
    "foot": "fossgis_osrm_foot",
}


def _coord(value: float) -> str:
    return urls.format_number(round(value, 6))


class OpenStreetMap(MapProvider):
    name = "osm"
    max_zoom = 19
    map_types = tuple(LAYER_CODES)
    default_map_type = "standard"

    def _reset(self) -> None:
        self.marker_visible = True
        self.query: Optional[str] = None
        self.origin: Optional[str] = None
        self.destination: Optional[str] = None
        self.routing = "car"

    def layer(self, value: str) -> "OpenStreetMap":
        return self.map_type(value)

    def show_marker(self, show: bool = True) -> "OpenStreetMap":
        self.marker_visible = bool(show)
        return self

    def search(self, query: str) -> "OpenStreetMap":
        self.query = text_or_none(query)
        return self

    def from_(self, origin: str) -> "OpenStreetMap":
        self.origin = text_or_none(origin)
        return self

    def to(self, destination: str) -> "OpenStreetMap":
        self.destination = text_or_none(destination)
        return self

    def travel_mode(self, mode: str) -> "OpenStreetMap":
        self.routing = gb.choose(mode, ROUTING_ENGINES, "car")
        return self

    def resolve_mode(self) -> Optional[Mode]:
        if self.query:
            return Mode.SEARCH
        if self.origin or self.destination:
            return Mode.DIRECTIONS
        if self.has_location():
            return Mode.MAP
        return None

    def _location_params(self) -> Dict[str, object]:
        params: Dict[str, object] = {}
        if self.marker_visible:
            params["mlat"] = self.latitude
            params["mlon"] = self.longitude
        params["zoom"] = self.zoom_level
        params["lat"] = self.latitude
        params["lon"] = self.longitude
        return params

    def _render(self, mode: Mode) -> str:
        if mode is Mode.SEARCH:
            return urls.with_query(f"{BASE_URL}search", {"query": self.query})
        if mode is Mode.DIRECTIONS:
            params = {
                "engine": ROUTING_ENGINES[self.routing],
                "from": self.origin,
                "to": self.destination,
            }
            return urls.with_query(f"{BASE_URL}directions", params)
        params = self._location_params()
        if self.basemap != "standard":
            params["layers"] = LAYER_CODES[self.basemap]
        return urls.with_query(BASE_URL, params)

    def _bbox(self) -> str:
        """Bounding box (min_lon,min_lat,max_lon,max_lat) for the current zoom."""
        half_lon = 180.0 / (2 ** self.zoom_level)
        half_lat = half_lon / 2
        min_lon = gb.clamp_longitude(self.longitude - half_lon)
        max_lon = gb.clamp_longitude(self.longitude + half_lon)
        min_lat = gb.clamp_latitude(self.latitude - half_lat)
        max_lat = gb.clamp_latitude(self.latitude + half_lat)
        return ",".join(_coord(v) for v in (min_lon, min_lat, max_lon, max_lat))

    def get_share_url(self) -> Optional[str]:
        """Embeddable `export/embed.html` URL, or None without coordinates."""
        if not self.has_location():
            return None
        params: Dict[str, object] = {
            "bbox": self._bbox(),
            "layer": EMBED_LAYERS[self.basemap],
        }
        if self.marker_visible:
            params["marker"] = self.point()
        return urls.with_query(f"{BASE_URL}export/embed.html", params)

    def get_embed_url(self) -> Optional[str]:
        return self.get_share_url()

    def get_edit_url(self) -> Optional[str]:
        """iD editor URL at the current view, or None without coordinates."""
        if not self.has_location():
            return None
        params: Dict[str, object] = {"editor": "id"}
        params.update(self._location_params())
        return urls.with_query(f"{BASE_URL}edit", params)
