"""Map endpoints — user location and the marker layer."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from cafe_finder.application.ports.geolocation_port import GeolocationResult
from cafe_finder.application.services.favorites_store import FavoritesStore
from cafe_finder.application.use_cases.locate_user import LocateUserUseCase
from cafe_finder.domain.entities.map_session import MapSession
from cafe_finder.domain.policies.annotation import build_map_markers
from cafe_finder.domain.value_objects.coordinate import Coordinate
from cafe_finder.infrastructure.api.dependencies import (
    get_favorites_store,
    get_locate_uc,
    get_map_session,
)
from cafe_finder.infrastructure.api.schemas import (
    LocationIn,
    LocationResponse,
    MapResponse,
    MarkerOut,
    PointOut,
)

router = APIRouter(tags=["map"])


@router.put("/location", response_model=LocationResponse)
async def set_location(
    body: LocationIn,
    locate_uc: LocateUserUseCase = Depends(get_locate_uc),
    session: MapSession = Depends(get_map_session),
):
    """Accept the position reported by the client device."""
    point = Coordinate(latitude=body.lat, longitude=body.lon)
    locate_uc.set_location(point)
    return _location_response(GeolocationResult.success(point), session)


@router.post("/location/locate", response_model=LocationResponse)
async def locate(
    locate_uc: LocateUserUseCase = Depends(get_locate_uc),
    session: MapSession = Depends(get_map_session),
):
    """Ask the geolocation collaborator; failures leave the map as it was."""
    result = await locate_uc.execute()
    return _location_response(result, session)


@router.get("/map", response_model=MapResponse)
async def map_view(
    session: MapSession = Depends(get_map_session),
    favorites: FavoritesStore = Depends(get_favorites_store),
):
    """Center, zoom and markers (user, search results, favorites)."""
    markers = build_map_markers(session, favorites.contains)
    return MapResponse(
        center=PointOut.from_domain(session.center),
        zoom=session.zoom,
        markers=[MarkerOut.from_domain(m) for m in markers],
    )


def _location_response(result: GeolocationResult, session: MapSession) -> LocationResponse:
    return LocationResponse(
        status=result.status.value,
        reason=result.reason,
        user_location=PointOut.from_domain(session.user_location) if session.user_location else None,
        center=PointOut.from_domain(session.center),
    )
