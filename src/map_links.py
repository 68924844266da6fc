"""Single entry point for every map-provider URL builder."""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Type

from apple_maps import AppleMaps  # type: ignore
from bing_maps import BingMaps  # type: ignore
from google_maps import GoogleMaps  # type: ignore
from here_maps import HereMaps  # type: ignore
from openstreetmap import OpenStreetMap  # type: ignore
from provider_base import MapProvider  # type: ignore
from waze import Waze  # type: ignore
from yandex_maps import YandexMaps  # type: ignore

# Registry order is the key order of all_urls()
PROVIDERS: Dict[str, Type[MapProvider]] = {
    "google": GoogleMaps,
    "apple": AppleMaps,
    "bing": BingMaps,
    "osm": OpenStreetMap,
    "waze": Waze,
    "yandex": YandexMaps,
    "here": HereMaps,
}


class MapLinks:
    def __init__(self, providers: Optional[Sequence[str]] = None) -> None:
        if providers is None:
            self.providers = list(PROVIDERS)
        else:
            unknown = [p for p in providers if p not in PROVIDERS]
            if unknown:
                raise ValueError(
                    f"Unknown map provider(s): {', '.join(unknown)}. "
                    f"Known: {', '.join(PROVIDERS)}"
                )
            self.providers = [p for p in PROVIDERS if p in providers]

    def service(self, name: str) -> MapProvider:
        """Return a fresh, default-initialized builder for `name`."""
        try:
            cls = PROVIDERS[name]
        except KeyError:
            raise ValueError(
                f"Unknown map provider: {name!r}. Known: {', '.join(PROVIDERS)}"
            ) from None
        return cls()

    def google(self) -> GoogleMaps:
        return GoogleMaps()

    def apple(self) -> AppleMaps:
        return AppleMaps()

    def bing(self) -> BingMaps:
        return BingMaps()

    def open_street_map(self) -> OpenStreetMap:
        return OpenStreetMap()

    def waze(self) -> Waze:
        return Waze()

    def yandex(self) -> YandexMaps:
        return YandexMaps()

    def here(self) -> HereMaps:
        return HereMaps()

    def all_urls(self, latitude: float, longitude: float, zoom: int = 12) -> Dict[str, str]:
        """Plain map-view URL for each provider; providers yielding None are omitted."""
        out: Dict[str, str] = {}
        for name in self.providers:
            url = self.service(name).coordinates(latitude, longitude).zoom(zoom).get_url()
            if url:
                out[name] = url
        return out
