"""Bing Maps URL builder.

Modes (first match wins):
  1) Bird's-eye view: scene id set, OR bird's-eye flag set with coordinates
  2) Search: plain (`q`) or business (`ss=<query>~sst.<sort>~pg.<page>`)
  3) Directions: origin or destination set (`rtp=adr.A~adr.B`)
  4) Collection: one or more points (`sp=point.lat_lon_title_notes_url_photo~...`)
  5) Map: coordinates set (`cp=lat~lon`)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import geo_bounds as gb  # type: ignore
import urls  # type: ignore
from provider_base import MapProvider, Mode, text_or_none  # type: ignore

BASE_URL = "https://www.bing.com/maps"
EMBED_URL = "https://www.bing.com/maps/embed"

STYLE_CODES = {
    "road": "r",
    "aerial": "a",
    "hybrid": "h",
    "birdseye": "o",
    "birdseye_labels": "b",
}
TRAVEL_MODE_CODES = {"driving": "D", "walking": "W", "transit": "T"}
SORT_TYPES = (0, 1, 2)  # relevance, distance, rating
MAX_WAYPOINTS = 23


def _field(text: Optional[str]) -> str:
    # '_' and '~' delimit collection fields and points
    return (text or "").replace("_", " ").replace("~", " ").strip()


def _link_field(text: Optional[str]) -> str:
    return (text or "").strip().replace("_", "%5F").replace("~", "%7E")


@dataclass(frozen=True)
class CollectionPoint:
    latitude: float
    longitude: float
    title: str = ""
    notes: str = ""
    url: str = ""
    photo: str = ""

    def serialize(self) -> str:
        parts = [
            urls.format_number(self.latitude),
            urls.format_number(self.longitude),
            _field(self.title),
            _field(self.notes),
            _link_field(self.url),
            _link_field(self.photo),
        ]
        return ("point." + "_".join(parts)).rstrip("_")


class BingMaps(MapProvider):
    name = "bing"
    map_types = tuple(STYLE_CODES)
    default_map_type = "road"

    def _reset(self) -> None:
        self.query: Optional[str] = None
        self.business = False
        self.sort_type = 0
        self.page = 1
        self.origin: Optional[str] = None
        self.destination: Optional[str] = None
        self.waypoint_list: List[str] = []
        self.route_mode = "driving"
        self.traffic_enabled = False
        self.birds_eye_enabled = False
        self.scene_id: Optional[str] = None
        self.heading_deg: Optional[float] = None
        self.pitch_deg: Optional[float] = None
        self.points: List[CollectionPoint] = []

    # ------------------------------
    # Setters
    # ------------------------------

    def search(self, query: str) -> "BingMaps":
        self.query = text_or_none(query)
        self.business = False
        return self

    def business_search(self, query: str, sort_type: int = 0, page: int = 1) -> "BingMaps":
        self.query = text_or_none(query)
        self.business = True
        self.sort_type = gb.choose(sort_type, SORT_TYPES, 0)
        self.page = max(1, int(page))
        return self

    def from_(self, origin: str) -> "BingMaps":
        self.origin = text_or_none(origin)
        return self

    def to(self, destination: str) -> "BingMaps":
        self.destination = text_or_none(destination)
        return self

    def waypoints(self, points: Sequence[str]) -> "BingMaps":
        self.waypoint_list = gb.truncate([str(p) for p in points], MAX_WAYPOINTS)
        return self

    def travel_mode(self, mode: str) -> "BingMaps":
        self.route_mode = gb.choose(mode, TRAVEL_MODE_CODES, "driving")
        return self

    def style(self, value: str) -> "BingMaps":
        return self.map_type(value)

    def traffic(self, enabled: bool = True) -> "BingMaps":
        self.traffic_enabled = bool(enabled)
        return self

    def birds_eye(self, enabled: bool = True) -> "BingMaps":
        self.birds_eye_enabled = bool(enabled)
        return self

    def scene(self, scene_id: str) -> "BingMaps":
        self.scene_id = text_or_none(scene_id)
        return self

    def heading(self, degrees: float) -> "BingMaps":
        self.heading_deg = gb.clamp_heading(degrees)
        return self

    def pitch(self, degrees: float) -> "BingMaps":
        self.pitch_deg = gb.clamp_pitch(degrees)
        return self

    def add_point(
        self,
        latitude: float,
        longitude: float,
        title: str = "",
        notes: str = "",
        url: str = "",
        photo: str = "",
    ) -> "BingMaps":
        self.points.append(
            CollectionPoint(
                latitude=gb.clamp_latitude(latitude),
                longitude=gb.clamp_longitude(longitude),
                title=title,
                notes=notes,
                url=url,
                photo=photo,
            )
        )
        return self

    # ------------------------------
    # Output
    # ------------------------------

    def resolve_mode(self) -> Optional[Mode]:
        if self.scene_id or (self.birds_eye_enabled and self.has_location()):
            return Mode.STREET_VIEW
        if self.query:
            return Mode.SEARCH
        if self.origin or self.destination:
            return Mode.DIRECTIONS
        if self.points:
            return Mode.COLLECTION
        if self.has_location():
            return Mode.MAP
        return None

    def _style_code(self) -> str:
        return STYLE_CODES.get(self.basemap, "r")

    def _view_params(self) -> Dict[str, object]:
        """`cp`/`lvl` when coordinates are known."""
        if not self.has_location():
            return {}
        return {"cp": self.point(sep="~"), "lvl": self.zoom_level}

    def _render(self, mode: Mode) -> str:
        if mode is Mode.STREET_VIEW:
            return self._birds_eye_url()
        if mode is Mode.SEARCH:
            return self._search_url()
        if mode is Mode.DIRECTIONS:
            return self._directions_url()
        if mode is Mode.COLLECTION:
            return self._collection_url()
        return self._map_url()

    def _birds_eye_url(self) -> str:
        params = self._view_params()
        params["style"] = "b" if self.basemap == "birdseye_labels" else "o"
        params["scene"] = self.scene_id
        params["dir"] = self.heading_deg
        params["pi"] = self.pitch_deg
        return urls.with_query(BASE_URL, params)

    def _search_url(self) -> str:
        if self.business:
            params: Dict[str, object] = {
                "ss": f"{self.query}~sst.{self.sort_type}~pg.{self.page}"
            }
            params.update(self._view_params())
            return urls.with_query(BASE_URL, params)
        params = {"q": self.query}
        params.update(self._view_params())
        params["style"] = self._style_code()
        return urls.with_query(f"{BASE_URL}/search", params)

    def _directions_url(self) -> str:
        stops = [f"adr.{self.origin}" if self.origin else ""]
        stops.extend(f"adr.{w}" for w in self.waypoint_list)
        stops.append(f"adr.{self.destination}" if self.destination else "")
        params = {
            "rtp": "~".join(stops),
            "mode": TRAVEL_MODE_CODES[self.route_mode],
            "style": self._style_code(),
        }
        return urls.with_query(f"{BASE_URL}/directions", params)

    def _collection_url(self) -> str:
        params: Dict[str, object] = {"sp": "~".join(p.serialize() for p in self.points)}
        params.update(self._view_params())
        params["style"] = self._style_code()
        return urls.with_query(BASE_URL, params)

    def _map_url(self) -> str:
        params = self._view_params()
        params["style"] = self._style_code()
        if self.traffic_enabled:
            params["trfc"] = "1"
        return urls.with_query(BASE_URL, params)

    def get_embed_url(self) -> Optional[str]:
        """Embeddable map centred on the coordinates, or None."""
        if not self.has_location():
            return None
        params = {
            "h": self.embed_height,
            "w": self.embed_width,
            "cp": self.point(sep="~"),
            "lvl": self.zoom_level,
            "typ": "d",
            "sty": self._style_code(),
            "src": "SHELL",
            "FORM": "MBEDV8",
        }
        return urls.with_query(EMBED_URL, params)
