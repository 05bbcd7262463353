"""Cafe entity — a search result the user can save as a favorite.

Identity is the ``id`` alone: two records with the same id are the same cafe
even when a later search returns a differently formatted name or position.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from cafe_finder.domain.value_objects.coordinate import Coordinate

CafeId = Union[str, int]


@dataclass(frozen=True, eq=False)
class Cafe:
    id: CafeId
    name: str
    location: Coordinate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cafe):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def to_record(self) -> dict[str, Any]:
        """Wire form shared by the search API and persisted favorites."""
        return {
            "id": self.id,
            "name": self.name,
            "lat": self.location.latitude,
            "lon": self.location.longitude,
        }

    @classmethod
    def from_record(cls, data: Any) -> Cafe:
        """Build a Cafe from its wire form.

        Raises:
            ValueError: if the record is not a dict with a str/int ``id``,
                a str ``name`` and numeric ``lat``/``lon``.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Cafe record must be an object, got {type(data).__name__}")

        cafe_id = data.get("id")
        if isinstance(cafe_id, bool) or not isinstance(cafe_id, (str, int)):
            raise ValueError(f"Invalid cafe id: {cafe_id!r}")

        name = data.get("name")
        if not isinstance(name, str):
            raise ValueError(f"Invalid cafe name for id {cafe_id!r}")

        lat, lon = data.get("lat"), data.get("lon")
        for value in (lat, lon):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Invalid coordinates for cafe {cafe_id!r}")

        return cls(id=cafe_id, name=name, location=Coordinate(latitude=float(lat), longitude=float(lon)))
