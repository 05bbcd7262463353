"""MapSession entity — what the user currently sees on the map."""

from __future__ import annotations

from dataclasses import dataclass

from cafe_finder.domain.entities.cafe import Cafe
from cafe_finder.domain.value_objects.coordinate import Coordinate

# Paris
DEFAULT_CENTER = Coordinate(latitude=48.8566, longitude=2.3522)
DEFAULT_ZOOM = 14


@dataclass
class MapSession:
    center: Coordinate = DEFAULT_CENTER
    zoom: int = DEFAULT_ZOOM
    city: str | None = None
    cafes: tuple[Cafe, ...] = ()
    user_location: Coordinate | None = None
    loading: bool = False
    last_error: str | None = None

    def has_user_location(self) -> bool:
        return self.user_location is not None

    def show_results(self, city: str, center: Coordinate, cafes: tuple[Cafe, ...]) -> None:
        """Replace the visible results and recenter on the searched city."""
        self.city = city
        self.center = center
        self.cafes = cafes
        self.last_error = None

    def locate_user(self, location: Coordinate) -> None:
        """Record the user's position and recenter the map on it."""
        self.user_location = location
        self.center = location
