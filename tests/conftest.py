"""Pytest configuration and shared fixtures."""

import pytest

from cafe_finder.application.ports.key_value_store import KeyValueStore
from cafe_finder.domain.entities.cafe import Cafe
from cafe_finder.domain.value_objects.coordinate import Coordinate


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store that counts writes."""

    def __init__(self, data: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(data or {})
        self.writes = 0

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.writes += 1
        self.data[key] = value


class LockedKeyValueStore(InMemoryKeyValueStore):
    """Reads fail until unlocked; the stored data itself is intact."""

    def __init__(self, data: dict[str, str] | None = None):
        super().__init__(data)
        self.locked = True

    def get(self, key):
        if self.locked:
            raise OSError("database is locked")
        return super().get(key)


def make_cafe(cafe_id, name=None, lat=10.0, lon=20.0) -> Cafe:
    return Cafe(
        id=cafe_id,
        name=name or f"Cafe {cafe_id}",
        location=Coordinate(latitude=lat, longitude=lon),
    )


PARIS = Coordinate(latitude=48.8566, longitude=2.3522)
LONDON = Coordinate(latitude=51.5074, longitude=-0.1278)


@pytest.fixture
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def paris_cafes():
    return (
        make_cafe(1, "Café de Flore", 48.8540, 2.3325),
        make_cafe(2, "Les Deux Magots", 48.8540, 2.3333),
        make_cafe(3, "Café Procope", 48.8530, 2.3389),
    )
