"""Base map-provider URL builder.

A provider builder is a single-owner value object: callers chain setters
and finish with `get_url()` (or `get_embed()` where supported). The URL
mode is never stored; it is resolved at output time from whichever
optional fields are populated, following a fixed precedence chain:

    STREET_VIEW -> SEARCH -> DIRECTIONS -> COLLECTION -> MAP -> None

Each provider implements the subset of branches its linking scheme has.
Setters never raise: numbers are clamped, unknown option values fall
back to the provider default, and missing inputs yield None.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

import geo_bounds as gb  # type: ignore
import urls  # type: ignore


class Mode(str, Enum):
    STREET_VIEW = "street_view"
    SEARCH = "search"
    DIRECTIONS = "directions"
    COLLECTION = "collection"
    MAP = "map"


def text_or_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


class MapProvider:
    name = ""
    min_zoom = 1
    max_zoom = 20
    default_zoom = 12
    map_types: Sequence[str] = ("roadmap",)
    default_map_type = "roadmap"
    coordinate_order = "latlon"
    default_embed_size = (600, 450)

    def __init__(self) -> None:
        self.reset()

    # ------------------------------
    # Shared state
    # ------------------------------

    def reset(self) -> "MapProvider":
        """Restore every field to its default."""
        self.latitude: Optional[float] = None
        self.longitude: Optional[float] = None
        self.zoom_level: int = gb.clamp_zoom(
            self.default_zoom, self.min_zoom, self.max_zoom
        )
        self.basemap: str = self.default_map_type
        self.embed_enabled = False
        self.embed_width, self.embed_height = self.default_embed_size
        self._reset()
        return self

    def _reset(self) -> None:
        """Provider-specific defaults."""

    def coordinates(self, latitude: float, longitude: float) -> "MapProvider":
        self.latitude = gb.clamp_latitude(latitude)
        self.longitude = gb.clamp_longitude(longitude)
        return self

    def zoom(self, level: int) -> "MapProvider":
        self.zoom_level = gb.clamp_zoom(level, self.min_zoom, self.max_zoom)
        return self

    def map_type(self, value: str) -> "MapProvider":
        self.basemap = gb.choose(value, self.map_types, self.default_map_type)
        return self

    def as_embed(self, width: int = 600, height: int = 450) -> "MapProvider":
        self.embed_enabled = True
        self.embed_width = gb.floor_at_zero(width)
        self.embed_height = gb.floor_at_zero(height)
        return self

    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def point(self, sep: str = ",") -> Optional[str]:
        if not self.has_location():
            return None
        return urls.format_point(
            self.latitude, self.longitude, order=self.coordinate_order, sep=sep
        )

    # ------------------------------
    # Output
    # ------------------------------

    def resolve_mode(self) -> Optional[Mode]:
        return Mode.MAP if self.has_location() else None

    def _render(self, mode: Mode) -> str:
        raise NotImplementedError

    def get_url(self) -> Optional[str]:
        """Return the URL for the resolved mode, or None if nothing is set."""
        mode = self.resolve_mode()
        if mode is None:
            return None
        return self._render(mode)

    def get_embed_url(self) -> Optional[str]:
        return None

    def get_embed(self) -> Optional[str]:
        """Return an iframe snippet for the embed URL, or None."""
        return urls.iframe(self.get_embed_url(), self.embed_width, self.embed_height)
