"""Favorites endpoints — list, membership check, toggle.

Handlers stay ``async def`` so they run on the event loop: toggles never
interleave and each write-through completes before the next request.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from cafe_finder.application.services.favorites_store import FavoritesStore, FavoritesUnavailableError
from cafe_finder.infrastructure.api.dependencies import get_favorites_store
from cafe_finder.infrastructure.api.schemas import (
    CafeIn,
    CafeOut,
    FavoritesResponse,
    MembershipResponse,
    ToggleResponse,
)

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=FavoritesResponse)
async def list_favorites(favorites: FavoritesStore = Depends(get_favorites_store)):
    """Saved cafes in the order they were saved."""
    saved = favorites.list()
    return FavoritesResponse(total=len(saved), favorites=[CafeOut.from_domain(c) for c in saved])


@router.get("/{cafe_id}", response_model=MembershipResponse)
async def is_favorite(cafe_id: str, favorites: FavoritesStore = Depends(get_favorites_store)):
    """Membership check; numeric path ids also match integer cafe ids."""
    found = favorites.contains(cafe_id)
    if not found and cafe_id.lstrip("-").isdigit():
        found = favorites.contains(int(cafe_id))
    return MembershipResponse(id=cafe_id, is_favorite=found)


@router.post("/toggle", response_model=ToggleResponse)
async def toggle_favorite(body: CafeIn, favorites: FavoritesStore = Depends(get_favorites_store)):
    """Save the cafe, or remove it if it is already saved."""
    cafe = body.to_domain()
    try:
        saved = favorites.toggle(cafe)
    except FavoritesUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return ToggleResponse(
        id=cafe.id,
        is_favorite=favorites.contains(cafe.id),
        total=len(saved),
        favorites=[CafeOut.from_domain(c) for c in saved],
    )
