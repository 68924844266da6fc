"""Google Maps URL builder.

Produces universal Maps URLs (`api=1`) for search, directions, map view
and Street View, plus keyless `output=embed` URLs for iframes.

References:
- Maps URLs: https://developers.google.com/maps/documentation/urls/get-started

Mode precedence:
  1) Street View: panorama id set, OR street-view flag set with coordinates
  2) Search: query set
  3) Directions: origin or destination set
  4) Map: coordinates set
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import geo_bounds as gb  # type: ignore
import urls  # type: ignore
from provider_base import MapProvider, Mode, text_or_none  # type: ignore

BASE_URL = "https://www.google.com/maps"
EMBED_URL = "https://maps.google.com/maps"

TRAVEL_MODES = ("driving", "walking", "bicycling", "transit", "two-wheeler")
LAYERS = ("none", "transit", "traffic", "bicycling", "terrain")
AVOID_FEATURES = ("tolls", "highways", "ferries")
MAX_WAYPOINTS = 9

# Legacy embed `t=` codes per basemap
_EMBED_TYPE_CODES = {"roadmap": "m", "satellite": "k", "terrain": "p"}


class GoogleMaps(MapProvider):
    name = "google"
    map_types = ("roadmap", "satellite", "terrain")
    default_map_type = "roadmap"

    def _reset(self) -> None:
        self.query: Optional[str] = None
        self.query_place_id: Optional[str] = None
        self.origin: Optional[str] = None
        self.origin_place_id: Optional[str] = None
        self.destination: Optional[str] = None
        self.destination_place_id: Optional[str] = None
        self.travelmode = "driving"
        self.navigate_on_open = False
        self.waypoint_list: List[str] = []
        self.waypoint_place_ids: List[str] = []
        self.avoid_list: List[str] = []
        self.layer_name = "none"
        self.street_view_enabled = False
        self.pano_id: Optional[str] = None
        self.heading_deg: Optional[float] = None
        self.pitch_deg: Optional[float] = None
        self.fov_deg: Optional[float] = None

    # ------------------------------
    # Setters
    # ------------------------------

    def search(self, query: str, place_id: Optional[str] = None) -> "GoogleMaps":
        self.query = text_or_none(query)
        self.query_place_id = text_or_none(place_id)
        return self

    def from_(self, origin: str, place_id: Optional[str] = None) -> "GoogleMaps":
        self.origin = text_or_none(origin)
        self.origin_place_id = text_or_none(place_id)
        return self

    def to(self, destination: str, place_id: Optional[str] = None) -> "GoogleMaps":
        self.destination = text_or_none(destination)
        self.destination_place_id = text_or_none(place_id)
        return self

    def travel_mode(self, mode: str) -> "GoogleMaps":
        self.travelmode = gb.choose(mode, TRAVEL_MODES, "driving")
        return self

    def navigate(self, enabled: bool = True) -> "GoogleMaps":
        """Ask the app to start turn-by-turn navigation when opened."""
        self.navigate_on_open = bool(enabled)
        return self

    def waypoints(
        self, points: Sequence[str], place_ids: Optional[Sequence[str]] = None
    ) -> "GoogleMaps":
        """Set ordered stops; place ids are cut or padded with empty slots to match."""
        self.waypoint_list = gb.truncate([str(p) for p in points], MAX_WAYPOINTS)
        ids = gb.truncate([str(i) for i in place_ids or []], len(self.waypoint_list))
        if ids:
            ids += [""] * (len(self.waypoint_list) - len(ids))
        self.waypoint_place_ids = ids
        return self

    def avoid(self, features: Sequence[str]) -> "GoogleMaps":
        self.avoid_list = gb.keep_allowed(features, AVOID_FEATURES)
        return self

    def layer(self, value: str) -> "GoogleMaps":
        self.layer_name = gb.choose(value, LAYERS, "none")
        return self

    def street_view(self, enabled: bool = True) -> "GoogleMaps":
        self.street_view_enabled = bool(enabled)
        return self

    def panorama(self, pano_id: str) -> "GoogleMaps":
        self.pano_id = text_or_none(pano_id)
        return self

    def heading(self, degrees: float) -> "GoogleMaps":
        self.heading_deg = gb.clamp_heading(degrees)
        return self

    def pitch(self, degrees: float) -> "GoogleMaps":
        self.pitch_deg = gb.clamp_pitch(degrees)
        return self

    def fov(self, degrees: float) -> "GoogleMaps":
        self.fov_deg = gb.clamp_fov(degrees)
        return self

    # ------------------------------
    # Output
    # ------------------------------

    def resolve_mode(self) -> Optional[Mode]:
        if self.pano_id or (self.street_view_enabled and self.has_location()):
            return Mode.STREET_VIEW
        if self.query:
            return Mode.SEARCH
        if self.origin or self.destination:
            return Mode.DIRECTIONS
        if self.has_location():
            return Mode.MAP
        return None

    def get_url(self) -> Optional[str]:
        if self.embed_enabled:
            return self.get_embed_url()
        return super().get_url()

    def _render(self, mode: Mode) -> str:
        if mode is Mode.STREET_VIEW:
            return self._street_view_url()
        if mode is Mode.SEARCH:
            return self._search_url()
        if mode is Mode.DIRECTIONS:
            return self._directions_url()
        return self._map_url()

    def _search_url(self) -> str:
        params = {
            "api": "1",
            "query": self.query,
            "query_place_id": self.query_place_id,
        }
        return urls.with_query(f"{BASE_URL}/search/", params)

    def _directions_url(self) -> str:
        params: Dict[str, object] = {
            "api": "1",
            "origin": self.origin,
            "origin_place_id": self.origin_place_id,
            "destination": self.destination,
            "destination_place_id": self.destination_place_id,
            "travelmode": self.travelmode,
        }
        if self.navigate_on_open:
            params["dir_action"] = "navigate"
        if self.waypoint_list:
            params["waypoints"] = "|".join(self.waypoint_list)
            if self.waypoint_place_ids:
                params["waypoint_place_ids"] = "|".join(self.waypoint_place_ids)
        if self.avoid_list:
            params["avoid"] = "|".join(self.avoid_list)
        return urls.with_query(f"{BASE_URL}/dir/", params)

    def _map_url(self) -> str:
        if self.layer_name == "terrain":
            return f"{BASE_URL}/@{self.point()},{self.zoom_level}z/data=!5m1!1e4"
        params: Dict[str, object] = {
            "api": "1",
            "map_action": "map",
            "center": self.point(),
            "zoom": self.zoom_level,
            "basemap": self.basemap,
        }
        if self.layer_name != "none":
            params["layer"] = self.layer_name
        return urls.with_query(f"{BASE_URL}/@", params)

    def _street_view_url(self) -> str:
        params: Dict[str, object] = {"api": "1", "map_action": "pano"}
        if self.pano_id:
            params["pano"] = self.pano_id
        else:
            params["viewpoint"] = self.point()
        params["heading"] = self.heading_deg
        params["pitch"] = self.pitch_deg
        params["fov"] = self.fov_deg
        return urls.with_query(f"{BASE_URL}/@", params)

    def get_embed_url(self) -> Optional[str]:
        """Keyless `output=embed` URL for the resolved mode, or None."""
        mode = self.resolve_mode()
        if mode is None:
            return None
        if mode is Mode.STREET_VIEW:
            params: Dict[str, object] = {
                "layer": "c",
                "panoid": self.pano_id,
                "cbll": self.point(),
                "output": "svembed",
            }
            return urls.with_query(EMBED_URL, params)

        params = {}
        if mode is Mode.SEARCH:
            params["q"] = self.query
        elif mode is Mode.DIRECTIONS:
            params["saddr"] = self.origin
            params["daddr"] = self.destination
        else:
            params["q"] = self.point()
        params["z"] = self.zoom_level
        params["t"] = _EMBED_TYPE_CODES.get(self.basemap, "m")
        params["output"] = "embed"
        return urls.with_query(EMBED_URL, params)
