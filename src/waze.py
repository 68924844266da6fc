"""Waze deep-link builder.

App links (`/ul`) open the Waze app when installed; web links open the
live map. Waze has no route origin: it always navigates from the
device's current position.
"""

from __future__ import annotations

from typing import Dict, Optional

import urls  # type: ignore
from provider_base import MapProvider, Mode, text_or_none  # type: ignore

APP_URL = "https://www.waze.com/ul"
WEB_URL = "https://www.waze.com/live-map/directions"


class Waze(MapProvider):
    name = "waze"
    min_zoom = 3
    max_zoom = 17
    map_types = ("default",)
    default_map_type = "default"

    def _reset(self) -> None:
        self.query: Optional[str] = None
        self.destination: Optional[str] = None
        self.navigate_flag = "yes"

    def search(self, query: str) -> "Waze":
        self.query = text_or_none(query)
        return self

    def to(self, destination: str) -> "Waze":
        self.destination = text_or_none(destination)
        return self

    def auto_navigate(self, enabled: bool = True) -> "Waze":
        self.navigate_flag = "yes" if enabled else "no"
        return self

    def resolve_mode(self) -> Optional[Mode]:
        if self.query:
            return Mode.SEARCH
        if self.destination:
            return Mode.DIRECTIONS
        if self.has_location():
            return Mode.MAP
        return None

    def get_url(self, use_app: bool = True) -> Optional[str]:
        mode = self.resolve_mode()
        if mode is None:
            return None
        return self._render(mode, use_app=use_app)

    def _render(self, mode: Mode, use_app: bool = True) -> str:
        params: Dict[str, object]
        if mode is Mode.SEARCH:
            if not use_app:
                return urls.with_query(WEB_URL, {"q": self.query})
            return urls.with_query(APP_URL, {"q": self.query, "navigate": "no"})

        if mode is Mode.DIRECTIONS:
            if not use_app:
                return urls.with_query(WEB_URL, {"q": self.destination})
            params = {"q": self.destination, "navigate": self.navigate_flag}
            return urls.with_query(APP_URL, params)

        if not use_app:
            return urls.with_query(WEB_URL, {"to": f"ll.{self.point()}"})
        params = {
            "ll": self.point(),
            "navigate": self.navigate_flag,
            "zoom": self.zoom_level,
        }
        return urls.with_query(APP_URL, params)
