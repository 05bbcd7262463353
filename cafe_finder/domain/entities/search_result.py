"""SearchResult — cafes found for a city plus the city's center point."""

from dataclasses import dataclass, field

from cafe_finder.domain.entities.cafe import Cafe
from cafe_finder.domain.value_objects.coordinate import Coordinate


@dataclass(frozen=True)
class SearchResult:
    city: str
    center: Coordinate
    cafes: tuple[Cafe, ...] = field(default_factory=tuple)
