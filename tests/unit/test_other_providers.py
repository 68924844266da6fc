import pathlib
import sys

# Ensure src/ is importable
REPO_ROOT = pathlib.Path(__file__).resolve().parents[2]
SRC_DIR = REPO_ROOT / "src"
sys.path.append(str(SRC_DIR))

import here_maps as hm  # type: ignore
import openstreetmap as om  # type: ignore
import waze as wz  # type: ignore
import yandex_maps as ym  # type: ignore


# ------------------------------
# OpenStreetMap
# ------------------------------


def test_osm_map_view_marker_and_layer():
    o = om.OpenStreetMap().coordinates(51.5074, -0.1278).zoom(15)
    assert o.get_url() == (
        "https://www.openstreetmap.org/?mlat=51.5074&mlon=-0.1278"
        "&zoom=15&lat=51.5074&lon=-0.1278"
    )
    o.layer("cycle").show_marker(False)
    assert o.get_url() == (
        "https://www.openstreetmap.org/?zoom=15&lat=51.5074&lon=-0.1278&layers=C"
    )
    assert o.layer("lava").basemap == "standard"
    assert o.zoom(25).zoom_level == 19


def test_osm_search_and_directions():
    assert om.OpenStreetMap().search("Big Ben").get_url() == (
        "https://www.openstreetmap.org/search?query=Big+Ben"
    )
    url = om.OpenStreetMap().from_("London").to("Oxford").travel_mode("bicycle").get_url()
    assert url == (
        "https://www.openstreetmap.org/directions"
        "?engine=fossgis_osrm_bike&from=London&to=Oxford"
    )
    assert "engine=fossgis_osrm_car" in om.OpenStreetMap().to("Oxford").travel_mode("x").get_url()


def test_osm_share_and_edit_urls():
    o = om.OpenStreetMap().coordinates(0, 0).zoom(10)
    share = o.get_share_url()
    assert share.startswith("https://www.openstreetmap.org/export/embed.html?bbox=")
    assert share.endswith("&layer=mapnik&marker=0,0")
    bbox = share.split("bbox=")[1].split("&")[0].split(",")
    min_lon, min_lat, max_lon, max_lat = (float(v) for v in bbox)
    assert min_lon < 0 < max_lon
    assert min_lat < 0 < max_lat
    assert abs(max_lon - 0.175781) < 1e-5

    edit = o.get_edit_url()
    assert edit.startswith("https://www.openstreetmap.org/edit?editor=id&mlat=0")
    assert o.get_embed().startswith('<iframe width="600" height="450"')

    empty = om.OpenStreetMap()
    assert empty.get_url() is None
    assert empty.get_share_url() is None
    assert empty.get_edit_url() is None


# ------------------------------
# Waze
# ------------------------------


def test_waze_location_app_and_web():
    w = wz.Waze().coordinates(40.7484, -73.9857)
    assert w.get_url() == "https://www.waze.com/ul?ll=40.7484,-73.9857&navigate=yes&zoom=12"
    assert w.get_url(use_app=False) == (
        "https://www.waze.com/live-map/directions?to=ll.40.7484,-73.9857"
    )
    assert "navigate=no" in w.auto_navigate(False).get_url()


def test_waze_destination_and_search():
    w = wz.Waze().to("Central Park")
    assert w.get_url() == "https://www.waze.com/ul?q=Central+Park&navigate=yes"
    assert w.get_url(use_app=False) == "https://www.waze.com/live-map/directions?q=Central+Park"
    assert wz.Waze().search("gas").get_url() == "https://www.waze.com/ul?q=gas&navigate=no"


def test_waze_zoom_bounds():
    assert wz.Waze().zoom(1).zoom_level == 3
    assert wz.Waze().zoom(20).zoom_level == 17
    assert wz.Waze().get_url() is None


# ------------------------------
# Yandex
# ------------------------------


def test_yandex_uses_lon_lat_order():
    y = ym.YandexMaps().coordinates(55.7558, 37.6173).zoom(10)
    assert y.get_url() == "https://yandex.com/maps/?lang=en&ll=37.6173,55.7558&z=10"
    assert y.point() == "37.6173,55.7558"
    assert y.layer("hybrid").get_url().endswith("&z=10&l=sat,skl")


def test_yandex_directions_and_search():
    url = ym.YandexMaps().from_("Moscow").to("Tver").travel_mode("pedestrian").get_url()
    assert url == "https://yandex.com/maps/?lang=en&rtext=Moscow~Tver&rtt=pd&z=12"
    assert "rtext=~Tver&rtt=auto" in ym.YandexMaps().to("Tver").travel_mode("rocket").get_url()
    assert ym.YandexMaps().language("ru").search("cafe").get_url() == (
        "https://yandex.com/maps/?lang=ru&text=cafe"
    )
    assert ym.YandexMaps().language("").lang == "en"


def test_yandex_embed_widget():
    y = ym.YandexMaps().coordinates(55.7558, 37.6173).zoom(10)
    assert y.get_embed_url() == "https://yandex.com/map-widget/v1/?lang=en&ll=37.6173,55.7558&z=10"
    assert 'src="https://yandex.com/map-widget/v1/?lang=en&amp;ll=' in y.get_embed()
    assert ym.YandexMaps().get_embed_url() is None


# ------------------------------
# HERE
# ------------------------------


def test_here_map_view():
    h = hm.HereMaps().coordinates(52.52, 13.405).zoom(14)
    assert h.get_url() == "https://wego.here.com/?map=52.52,13.405,14,normal"
    assert h.map_type("satellite").get_url().endswith(",14,satellite")
    assert h.map_type("sepia").basemap == "normal"


def test_here_search_and_directions():
    assert hm.HereMaps().search("Brandenburg Gate").get_url() == (
        "https://wego.here.com/search/Brandenburg%20Gate"
    )
    with_map = hm.HereMaps().coordinates(52.52, 13.405).search("Brandenburg Gate").get_url()
    assert with_map == "https://wego.here.com/search/Brandenburg%20Gate?map=52.52,13.405,12,normal"

    url = hm.HereMaps().from_("Berlin").to("Potsdam").transport_mode("walk").get_url()
    assert url == "https://wego.here.com/directions/walk/Berlin/Potsdam"
    assert hm.HereMaps().to("A/B").transport_mode("warp").get_url() == (
        "https://wego.here.com/directions/drive/A%2FB"
    )
    # origin alone does not make a route
    assert hm.HereMaps().from_("Berlin").get_url() is None
