"""Geographic coordinates and great-circle distances."""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS = 6371000


@dataclass(frozen=True)
class Coordinates:
    """A point on the Earth's surface in degrees."""

    lat: float
    lng: float


def compute_distance(start: Coordinates, end: Coordinates) -> float:
    """Return the great-circle distance between two points in metres."""
    if start == end:
        return 0.0
    dr = math.pi / 180.0
    cosine = (
        math.sin(start.lat * dr) * math.sin(end.lat * dr)
        + math.cos(start.lat * dr)
        * math.cos(end.lat * dr)
        * math.cos(abs(start.lng - end.lng) * dr)
    )
    # Rounding can push the cosine just outside acos's domain.
    cosine = max(-1.0, min(1.0, cosine))
    return math.acos(cosine) * EARTH_RADIUS