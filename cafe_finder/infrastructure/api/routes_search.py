"""Search endpoints — run a city search, show the current results."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from cafe_finder.application.services.favorites_store import FavoritesStore
from cafe_finder.application.use_cases.search_cafes import SearchCafesUseCase
from cafe_finder.domain.entities.map_session import MapSession
from cafe_finder.domain.policies.annotation import annotate_cafes
from cafe_finder.domain.value_objects.enums import SearchStatus
from cafe_finder.infrastructure.api.dependencies import (
    get_favorites_store,
    get_map_session,
    get_search_uc,
)
from cafe_finder.infrastructure.api.schemas import (
    CafeResultOut,
    PointOut,
    SearchRequest,
    SearchResponse,
)

router = APIRouter(prefix="/search", tags=["search"])


@router.post("", response_model=SearchResponse)
async def run_search(
    body: SearchRequest,
    search_uc: SearchCafesUseCase = Depends(get_search_uc),
    favorites: FavoritesStore = Depends(get_favorites_store),
):
    """Search cafes in a city; the map session shows the newest successful search."""
    try:
        outcome = await search_uc.execute(body.city)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if outcome.status == SearchStatus.FAILED:
        raise HTTPException(status_code=502, detail=outcome.error)
    if outcome.status == SearchStatus.STALE:
        raise HTTPException(status_code=409, detail="Search superseded by a newer request")

    return _serialize_session(search_uc.session, favorites)


@router.get("", response_model=SearchResponse)
async def current_results(
    session: MapSession = Depends(get_map_session),
    favorites: FavoritesStore = Depends(get_favorites_store),
):
    """Results of the last successful search, annotated for display."""
    return _serialize_session(session, favorites)


def _serialize_session(session: MapSession, favorites: FavoritesStore) -> SearchResponse:
    views = annotate_cafes(session.cafes, session.user_location, favorites.contains)
    return SearchResponse(
        city=session.city,
        center=PointOut.from_domain(session.center),
        user_location=PointOut.from_domain(session.user_location) if session.user_location else None,
        loading=session.loading,
        last_error=session.last_error,
        cafes=[CafeResultOut.from_view(v) for v in views],
    )
