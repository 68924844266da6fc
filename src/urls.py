"""Maps URL assembly primitives.

Builds the string pieces every provider shares: number and coordinate
formatting, form-encoded query strings and the iframe snippet used for
embeds. It does NOT call any map APIs and requires no API keys.

Encoding notes:
- Query values use standard form encoding (spaces -> '+', reserved
  characters percent-encoded). Commas stay literal so coordinate pairs
  read `40.7484,-73.9857` as the providers document them.
- Parameter order is the insertion order chosen by each provider, unless
  a provider explicitly asks for key-sorted output.
"""

from __future__ import annotations

import html
from typing import Any, Dict, Iterable, Optional, Tuple
from urllib.parse import quote, quote_plus, urlencode

QUERY_SAFE = ","

# Per-provider coordinate order; anything not listed is lat,lon.
COORDINATE_ORDER = {
    "yandex": "lonlat",
}


def format_number(value: Any) -> str:
    """Shortest decimal text for a number (`40.7484`, `90`, `-3.5`)."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    f = float(value)
    if f.is_integer():
        return str(int(f))
    s = repr(f)
    if "e" in s or "E" in s:
        s = f"{f:.10f}".rstrip("0").rstrip(".")
    return s


def format_point(lat: float, lon: float, order: str = "latlon", sep: str = ",") -> str:
    """Serialize a coordinate pair; `order` is 'latlon' or 'lonlat'."""
    a, b = (lon, lat) if order == "lonlat" else (lat, lon)
    return f"{format_number(a)}{sep}{format_number(b)}"


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return format_number(value)


def build_query(params: Dict[str, Any], sort: bool = False) -> str:
    """Form-encode `params`, skipping None values."""
    items: Iterable[Tuple[str, Any]] = params.items()
    if sort:
        items = sorted(items, key=lambda kv: kv[0])
    pairs = [(k, _text(v)) for k, v in items if v is not None]
    return urlencode(pairs, safe=QUERY_SAFE, quote_via=quote_plus)


def with_query(base: str, params: Dict[str, Any], sort: bool = False) -> str:
    return f"{base}?{build_query(params, sort=sort)}"


def quote_segment(text: str) -> str:
    """Percent-encode a single path segment (slashes included)."""
    return quote(text, safe=QUERY_SAFE)


def iframe(url: Optional[str], width: int, height: int) -> Optional[str]:
    """Return an iframe tag embedding `url`, or None when there is no URL.

    The URL is escaped for safe use inside the `src` attribute.
    """
    if not url:
        return None
    src = html.escape(url, quote=True)
    return (
        f'<iframe width="{int(width)}" height="{int(height)}" style="border:0" '
        f'loading="lazy" allowfullscreen src="{src}"></iframe>'
    )
