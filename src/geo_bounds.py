"""Coordinate, zoom and option bounds shared by every map provider.

Every helper here is total: out-of-range numbers are clamped and unknown
option values fall back to a default or are dropped. Nothing raises on
caller data, so builders can stay permissive.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, TypeVar

T = TypeVar("T")

LAT_RANGE = (-90.0, 90.0)
LON_RANGE = (-180.0, 180.0)

# Street-level view ranges (degrees)
HEADING_RANGE = (-180.0, 360.0)
PITCH_RANGE = (-90.0, 90.0)
FOV_RANGE = (10.0, 100.0)


def clamp(value, low, high):
    """Bound `value` into [low, high]."""
    return max(low, min(high, value))


def clamp_latitude(lat: float) -> float:
    return float(clamp(float(lat), *LAT_RANGE))


def clamp_longitude(lon: float) -> float:
    return float(clamp(float(lon), *LON_RANGE))


def clamp_zoom(level: int, min_zoom: int = 1, max_zoom: int = 20) -> int:
    return int(clamp(int(level), min_zoom, max_zoom))


def clamp_heading(deg: float) -> float:
    return float(clamp(float(deg), *HEADING_RANGE))


def clamp_pitch(deg: float) -> float:
    return float(clamp(float(deg), *PITCH_RANGE))


def clamp_fov(deg: float) -> float:
    return float(clamp(float(deg), *FOV_RANGE))


def floor_at_zero(n: int) -> int:
    return max(0, int(n))


def choose(value: T, allowed: Iterable[T], default: T) -> T:
    """Return `value` when it is allowed, otherwise `default`."""
    return value if value in allowed else default


def keep_allowed(values: Iterable[T], allowed: Iterable[T]) -> List[T]:
    """Order-preserving, de-duplicated intersection with an allow-list."""
    allowed_set = set(allowed)
    out: List[T] = []
    for v in values:
        if v in allowed_set and v not in out:
            out.append(v)
    return out


def truncate(values: Sequence[T], limit: int) -> List[T]:
    return list(values[: max(0, limit)])
