"""YAML configuration loader.

Notes:
- The URL builders themselves take no configuration; this file drives the
  batch export (default zoom, enabled providers, embed sizing).
- No API keys are read or stored: every generated link is keyless.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

import yaml

KNOWN_PROVIDERS = ("google", "apple", "bing", "osm", "waze", "yandex", "here")


@dataclass(frozen=True)
class Defaults:
    zoom: int
    embed_width: int
    embed_height: int


@dataclass(frozen=True)
class Providers:
    enabled: Tuple[str, ...]


@dataclass(frozen=True)
class ExportOptions:
    waze_use_app: bool
    include_embeds: bool


@dataclass(frozen=True)
class Config:
    project_name: str
    project_version: str
    defaults: Defaults
    providers: Providers
    export: ExportOptions

    def validate(self) -> None:
        if not 1 <= self.defaults.zoom <= 21:
            raise ValueError(
                f"defaults.zoom={self.defaults.zoom} must be between 1 and 21."
            )
        if self.defaults.embed_width < 0 or self.defaults.embed_height < 0:
            raise ValueError("defaults.embed_width/embed_height must be >= 0.")
        if not self.providers.enabled:
            raise ValueError("providers.enabled must list at least one provider.")
        unknown = [p for p in self.providers.enabled if p not in KNOWN_PROVIDERS]
        if unknown:
            raise ValueError(
                f"providers.enabled has unknown provider(s): {', '.join(unknown)}"
            )


def _require_key(d: Dict[str, Any], key: str) -> Any:
    if key not in d:
        raise KeyError(f"Missing required configuration key: {key}")
    return d[key]


def load_config(path: str) -> Config:
    """Load and validate YAML configuration from `path`."""
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    project = raw.get("project", {})
    defaults_raw = raw.get("defaults", {})
    providers_raw = raw.get("providers", {})
    export_raw = raw.get("export", {})

    cfg = Config(
        project_name=_require_key(project, "name"),
        project_version=str(_require_key(project, "version")),
        defaults=Defaults(
            zoom=int(_require_key(defaults_raw, "zoom")),
            embed_width=int(defaults_raw.get("embed_width", 600)),
            embed_height=int(defaults_raw.get("embed_height", 450)),
        ),
        providers=Providers(
            enabled=tuple(_require_key(providers_raw, "enabled") or ()),
        ),
        export=ExportOptions(
            waze_use_app=bool(export_raw.get("waze_use_app", True)),
            include_embeds=bool(export_raw.get("include_embeds", False)),
        ),
    )

    cfg.validate()
    return cfg
