"""FavoritesStore — the user's saved cafes, written through to a key-value store."""

from __future__ import annotations

import json
import logging

from cafe_finder.application.ports.key_value_store import KeyValueStore
from cafe_finder.domain.entities.cafe import Cafe, CafeId
from cafe_finder.domain.policies.favorites import contains_cafe, dedupe_by_id, toggle_cafe

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "favorites"

FavoritesSet = tuple[Cafe, ...]


class FavoritesUnavailableError(Exception):
    """Storage could not be read, so the saved favorites are unknown."""


class FavoritesStore:
    """Ordered, id-unique favorites with an in-memory mirror of the persisted list.

    The mirror and the persisted JSON are identical after every toggle:
    the new list is written to storage first and only then becomes current.
    Toggling requires a successful read of storage; after a failed read the
    store refuses writes until ``load`` succeeds.
    """

    def __init__(self, storage: KeyValueStore, key: str = DEFAULT_STORAGE_KEY):
        self._storage = storage
        self._key = key
        self._favorites: FavoritesSet = ()
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self) -> FavoritesSet:
        """Read favorites from storage, replacing the in-memory set.

        Missing, unparsable or malformed data yields an empty set. If the
        storage itself cannot be read, the set is empty and the store stays
        unloaded.
        """
        try:
            raw = self._storage.get(self._key)
        except Exception as e:
            logger.warning("Could not read favorites under '%s': %s", self._key, e)
            self._favorites = ()
            self._loaded = False
            return self._favorites

        self._favorites = self._parse(raw)
        self._loaded = True
        logger.info("Loaded %d favorites from '%s'", len(self._favorites), self._key)
        return self._favorites

    def contains(self, cafe_id: CafeId) -> bool:
        return contains_cafe(self._favorites, cafe_id)

    def toggle(self, cafe: Cafe) -> FavoritesSet:
        """Save *cafe* if it is not a favorite yet, otherwise remove it (by id).

        Raises:
            FavoritesUnavailableError: if storage cannot be read.
        """
        if not self._loaded:
            self.load()
            if not self._loaded:
                raise FavoritesUnavailableError(f"Favorites under '{self._key}' could not be read")

        updated = toggle_cafe(self._favorites, cafe)
        self._storage.set(self._key, self._serialize(updated))
        self._favorites = updated

        logger.info(
            "Favorite %s %s (%d saved)",
            cafe.id, "added" if self.contains(cafe.id) else "removed", len(updated),
        )
        return updated

    def list(self) -> FavoritesSet:
        return self._favorites

    # ─── Serialization ───────────────────────────────────────────────

    def _parse(self, raw: str | None) -> FavoritesSet:
        if raw is None:
            return ()

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored favorites under '%s' are not valid JSON, starting empty", self._key)
            return ()

        if not isinstance(data, list):
            logger.warning("Stored favorites under '%s' are not a list, starting empty", self._key)
            return ()

        try:
            cafes = [Cafe.from_record(item) for item in data]
        except ValueError as e:
            logger.warning("Stored favorites under '%s' are malformed (%s), starting empty", self._key, e)
            return ()

        return dedupe_by_id(cafes)

    @staticmethod
    def _serialize(favorites: FavoritesSet) -> str:
        return json.dumps([cafe.to_record() for cafe in favorites], ensure_ascii=False)
