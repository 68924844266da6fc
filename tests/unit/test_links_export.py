import csv
import json
import pathlib
import sys

import pytest

# Ensure src/ is importable
REPO_ROOT = pathlib.Path(__file__).resolve().parents[2]
SRC_DIR = REPO_ROOT / "src"
sys.path.append(str(SRC_DIR))

import links_export as le  # type: ignore


def write_csv(path, headers, rows):
    with open(path, "w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=headers)
        w.writeheader()
        for r in rows:
            w.writerow(r)


def read_rows(path):
    with open(path, "r", encoding="utf-8", newline="") as f:
        return list(csv.DictReader(f))


def test_export_with_repo_config(tmp_path):
    inp = tmp_path / "coords.csv"
    write_csv(
        inp,
        ["input_id", "lat", "lng"],
        [
            {"input_id": "esb", "lat": "40.7484", "lng": "-73.9857"},
            {"input_id": "bad", "lat": "north", "lng": ""},
            {"input_id": "nanrow", "lat": "nan", "lng": "inf"},
        ],
    )
    out = tmp_path / "out" / "links.csv"
    log = tmp_path / "logs" / "export.jsonl"

    n = le.run_links_export(
        input_csv_path=str(inp),
        output_csv_path=str(out),
        config_path=str(REPO_ROOT / "config" / "config.yml"),
        log_path=str(log),
    )
    assert n == 3

    rows = read_rows(out)
    assert [r["input_id"] for r in rows] == ["esb", "bad", "nanrow"]
    assert list(rows[0]) == [
        "input_id",
        "google_url",
        "apple_url",
        "bing_url",
        "osm_url",
        "waze_url",
        "yandex_url",
        "here_url",
    ]
    assert "center=40.7484,-73.9857" in rows[0]["google_url"]
    assert rows[0]["waze_url"].startswith("https://www.waze.com/ul?")
    for row in rows[1:]:
        assert all(v == "" for k, v in row.items() if k != "input_id")

    with open(log, "r", encoding="utf-8") as f:
        records = [json.loads(line) for line in f if line.strip()]
    assert [r["status"] for r in records] == ["OK", "INVALID_COORDINATES", "INVALID_COORDINATES"]
    assert records[0]["providers"][0] == "google"
    assert records[1]["providers"] == []
    assert records[2]["providers"] == []


def test_export_options_zoom_embed_and_waze_web(tmp_path):
    cfg = tmp_path / "config.yml"
    cfg.write_text(
        "project: {name: t, version: 0.0.1}\n"
        "defaults: {zoom: 9, embed_width: 320, embed_height: 200}\n"
        "providers: {enabled: [waze, google]}\n"
        "export: {waze_use_app: false, include_embeds: true}\n",
        encoding="utf-8",
    )
    inp = tmp_path / "coords.csv"
    write_csv(
        inp,
        ["input_id", "lat", "lng", "zoom"],
        [
            {"input_id": "a", "lat": "1.5", "lng": "2.5", "zoom": "16"},
            {"input_id": "b", "lat": "3", "lng": "4", "zoom": ""},
        ],
    )
    out = tmp_path / "links.csv"

    le.run_links_export(str(inp), str(out), str(cfg))
    rows = read_rows(out)

    assert list(rows[0]) == ["input_id", "waze_url", "google_url", "google_embed"]
    assert rows[0]["waze_url"] == "https://www.waze.com/live-map/directions?to=ll.1.5,2.5"
    assert "zoom=16" in rows[0]["google_url"]
    assert "zoom=9" in rows[1]["google_url"]
    assert rows[0]["google_embed"].startswith('<iframe width="320" height="200"')
    assert "z=16" in rows[0]["google_embed"]


def test_export_requires_columns(tmp_path):
    inp = tmp_path / "coords.csv"
    write_csv(inp, ["input_id", "latitude"], [{"input_id": "x", "latitude": "1"}])
    with pytest.raises(ValueError):
        le.run_links_export(
            str(inp), str(tmp_path / "o.csv"), str(REPO_ROOT / "config" / "config.yml")
        )


def test_non_finite_zoom_falls_back_to_default(tmp_path):
    cfg = tmp_path / "config.yml"
    cfg.write_text(
        "project: {name: t, version: 0.0.1}\n"
        "defaults: {zoom: 7}\n"
        "providers: {enabled: [google]}\n",
        encoding="utf-8",
    )
    inp = tmp_path / "coords.csv"
    write_csv(
        inp,
        ["input_id", "lat", "lng", "zoom"],
        [
            {"input_id": "a", "lat": "1.5", "lng": "2.5", "zoom": "inf"},
            {"input_id": "b", "lat": "3", "lng": "4", "zoom": "nan"},
        ],
    )
    out = tmp_path / "links.csv"
    log = tmp_path / "export.jsonl"

    n = le.run_links_export(str(inp), str(out), str(cfg), log_path=str(log))
    assert n == 2

    rows = read_rows(out)
    assert all("zoom=7" in r["google_url"] for r in rows)
    with open(log, "r", encoding="utf-8") as f:
        records = [json.loads(line) for line in f if line.strip()]
    assert [r["status"] for r in records] == ["OK", "OK"]
