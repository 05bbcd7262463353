"""FavoritesPolicy — id-based membership and the toggle gesture."""

from __future__ import annotations

from typing import Iterable

from cafe_finder.domain.entities.cafe import Cafe, CafeId


def contains_cafe(favorites: Iterable[Cafe], cafe_id: CafeId) -> bool:
    """True iff a cafe with *cafe_id* is in *favorites*."""
    return any(f.id == cafe_id for f in favorites)


def toggle_cafe(favorites: tuple[Cafe, ...], cafe: Cafe) -> tuple[Cafe, ...]:
    """Remove *cafe* by id if present, else append it at the end.

    Args:
        favorites: current ordered favorites, unique by id.
        cafe: the cafe the user clicked.

    Returns:
        The new favorites tuple; the input is not modified.
    """
    if contains_cafe(favorites, cafe.id):
        return tuple(f for f in favorites if f.id != cafe.id)
    return (*favorites, cafe)


def dedupe_by_id(cafes: Iterable[Cafe]) -> tuple[Cafe, ...]:
    """Keep the first occurrence of every id, preserving order."""
    seen: set[CafeId] = set()
    unique: list[Cafe] = []
    for cafe in cafes:
        if cafe.id in seen:
            continue
        seen.add(cafe.id)
        unique.append(cafe)
    return tuple(unique)
