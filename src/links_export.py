"""Batch map-link export.

- Reads a CSV of coordinates (input_id, lat, lng[, zoom])
- Builds a map-view URL per enabled provider (config `providers.enabled`)
- Writes:
    * links CSV: input_id, <provider>_url... [, google_embed]
    * optional JSONL log (one record per input row)
- Deterministic: preserves input order; no timestamps in CSV output

Rows whose coordinates cannot be parsed keep their input_id with empty URL
cells and are logged as INVALID_COORDINATES.

CLI:
    python src/links_export.py \
      --input data/coords.csv \
      --output data/links.csv \
      --config config/config.yml \
      --log data/logs/links_export_log.jsonl
"""

from __future__ import annotations

import argparse
import csv
import datetime as dt
import json
import math
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import config_loader  # type: ignore
from google_maps import GoogleMaps  # type: ignore
from map_links import MapLinks  # type: ignore

REQUIRED_COLUMNS = ("input_id", "lat", "lng")


class JsonlLogger:
    def __init__(self, path: Optional[str]) -> None:
        self.path = path
        if path:
            Path(os.path.dirname(path) or ".").mkdir(parents=True, exist_ok=True)

    def write(self, rec: Dict[str, Any]) -> None:
        if not self.path:
            return
        line = json.dumps(rec, ensure_ascii=False)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")


def _parse_float(s: Optional[str]) -> Optional[float]:
    s = (s or "").strip()
    if not s:
        return None
    try:
        v = float(s)
    except ValueError:
        return None
    # nan and inf cells count as unparsable
    return v if math.isfinite(v) else None


def _parse_zoom(s: Optional[str], default: int) -> int:
    z = _parse_float(s)
    return int(z) if z is not None else default


def output_columns(cfg: config_loader.Config) -> List[str]:
    cols = ["input_id"] + [f"{p}_url" for p in cfg.providers.enabled]
    if cfg.export.include_embeds and "google" in cfg.providers.enabled:
        cols.append("google_embed")
    return cols


def build_row_links(
    links: MapLinks,
    cfg: config_loader.Config,
    lat: float,
    lng: float,
    zoom: int,
) -> Dict[str, str]:
    """Return {column: value} for one coordinate pair."""
    urls_by_provider = links.all_urls(lat, lng, zoom)
    if "waze" in urls_by_provider and not cfg.export.waze_use_app:
        urls_by_provider["waze"] = links.waze().coordinates(lat, lng).get_url(use_app=False)

    out = {f"{name}_url": url for name, url in urls_by_provider.items()}
    if cfg.export.include_embeds and "google" in cfg.providers.enabled:
        embed = (
            GoogleMaps()
            .coordinates(lat, lng)
            .zoom(zoom)
            .as_embed(cfg.defaults.embed_width, cfg.defaults.embed_height)
            .get_embed()
        )
        out["google_embed"] = embed or ""
    return out


def run_links_export(
    input_csv_path: str,
    output_csv_path: str,
    config_path: str,
    log_path: Optional[str] = None,
) -> int:
    """Read coordinates and write the per-provider links CSV.

    Returns number of rows.
    """
    cfg = config_loader.load_config(config_path)
    links = MapLinks(providers=cfg.providers.enabled)
    logger = JsonlLogger(log_path)

    with open(input_csv_path, "r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        fieldnames = reader.fieldnames or []
        missing = [c for c in REQUIRED_COLUMNS if c not in fieldnames]
        if missing:
            raise ValueError(
                f"Input CSV is missing required column(s): {', '.join(missing)}"
            )
        rows = list(reader)

    columns = output_columns(cfg)
    Path(os.path.dirname(output_csv_path) or ".").mkdir(parents=True, exist_ok=True)

    with open(output_csv_path, "w", encoding="utf-8", newline="") as f_out:
        writer = csv.DictWriter(f_out, fieldnames=columns, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            input_id = row.get("input_id", "")
            lat = _parse_float(row.get("lat"))
            lng = _parse_float(row.get("lng"))
            record: Dict[str, str] = {c: "" for c in columns}
            record["input_id"] = input_id

            if lat is None or lng is None:
                status = "INVALID_COORDINATES"
                built: Dict[str, str] = {}
            else:
                zoom = _parse_zoom(row.get("zoom"), cfg.defaults.zoom)
                built = build_row_links(links, cfg, lat, lng, zoom)
                record.update(built)
                status = "OK"

            writer.writerow(record)
            logger.write(
                {
                    "ts": dt.datetime.now(dt.timezone.utc).isoformat(),
                    "input_id": input_id,
                    "status": status,
                    "providers": [k[: -len("_url")] for k in built if k.endswith("_url")],
                }
            )

    return len(rows)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Export map-view links for every configured provider."
    )
    parser.add_argument("--input", required=True, help="Path to coordinates CSV")
    parser.add_argument("--output", required=True, help="Path to write links CSV")
    parser.add_argument("--config", required=True, help="Path to config/config.yml")
    parser.add_argument(
        "--log",
        required=False,
        default=None,
        help="Optional path to JSONL export log",
    )
    args = parser.parse_args()

    count = run_links_export(
        input_csv_path=args.input,
        output_csv_path=args.output,
        config_path=args.config,
        log_path=args.log,
    )
    print(f"Exported links for {count} rows -> {args.output}")


if __name__ == "__main__":
    main()
