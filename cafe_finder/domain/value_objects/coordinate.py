"""Coordinate value object — immutable (lat, lon) pair and haversine distance."""

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def distance_km(self, other: "Coordinate") -> float:
        """Great-circle distance in km to *other* (Haversine formula)."""
        return distance_km(self, other)


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Calculate distance in km between two points using the Haversine formula.

    Always finite and non-negative for well-formed inputs; 0.0 when a == b.
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = math.radians(b.latitude - a.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push h just outside [0, 1] near antipodal points
    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def format_distance_km(km: float) -> str:
    """Display form used by the UI: two decimals."""
    return f"{km:.2f}"
