import pathlib
import sys

import pytest

# Ensure src/ is importable
REPO_ROOT = pathlib.Path(__file__).resolve().parents[2]
SRC_DIR = REPO_ROOT / "src"
sys.path.append(str(SRC_DIR))

import map_links as ml  # type: ignore
from google_maps import GoogleMaps  # type: ignore
from provider_base import MapProvider  # type: ignore


class NoLinkProvider(MapProvider):
    name = "nolink"

    def resolve_mode(self):
        return None


def test_all_urls_covers_every_provider():
    urls = ml.MapLinks().all_urls(40.7484, -73.9857, 15)
    assert list(urls) == ["google", "apple", "bing", "osm", "waze", "yandex", "here"]
    assert all(isinstance(u, str) and u for u in urls.values())
    assert "center=40.7484,-73.9857" in urls["google"]
    assert "zoom=15" in urls["google"]
    assert "ll=40.7484,-73.9857&z=15" in urls["apple"]
    assert "cp=40.7484~-73.9857&lvl=15" in urls["bing"]
    assert "ll=-73.9857,40.7484&z=15" in urls["yandex"]
    assert "zoom=15" in urls["waze"]


def test_all_urls_default_zoom_and_subset():
    urls = ml.MapLinks(providers=["bing", "google"]).all_urls(1.5, 2.5)
    assert list(urls) == ["google", "bing"]
    assert "zoom=12" in urls["google"]


def test_all_urls_omits_providers_without_url(monkeypatch):
    monkeypatch.setitem(ml.PROVIDERS, "nolink", NoLinkProvider)
    urls = ml.MapLinks(providers=["google", "nolink"]).all_urls(1.5, 2.5)
    assert list(urls) == ["google"]


def test_service_returns_fresh_builders():
    links = ml.MapLinks()
    a = links.service("google")
    b = links.service("google")
    assert isinstance(a, GoogleMaps)
    assert a is not b
    a.coordinates(1, 2)
    assert b.get_url() is None
    assert links.google().get_url() is None
    assert links.open_street_map().name == "osm"
    assert links.here().name == "here"


def test_unknown_provider_rejected():
    with pytest.raises(ValueError):
        ml.MapLinks().service("mapquest")
    with pytest.raises(ValueError):
        ml.MapLinks(providers=["google", "mapquest"])


def test_all_urls_deterministic():
    first = ml.MapLinks().all_urls(48.8584, 2.2945, 17)
    second = ml.MapLinks().all_urls(48.8584, 2.2945, 17)
    assert first == second
