"""Static geolocation adapter — a position fixed by configuration."""

from __future__ import annotations

from cafe_finder.application.ports.geolocation_port import GeolocationPort, GeolocationResult
from cafe_finder.domain.value_objects.coordinate import Coordinate


class StaticGeolocationAdapter(GeolocationPort):
    """Reports the configured coordinate, or DENIED when there is none."""

    def __init__(self, coordinate: Coordinate | None = None):
        self._coordinate = coordinate

    async def locate(self) -> GeolocationResult:
        if self._coordinate is None:
            return GeolocationResult.denied("No user location configured")
        return GeolocationResult.success(self._coordinate)
