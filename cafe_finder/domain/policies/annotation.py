"""AnnotationPolicy — decorate search results for display.

Adds the distance from the user and the favorite flag to each cafe, and
builds the marker list the map widget draws.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from cafe_finder.domain.entities.cafe import Cafe, CafeId
from cafe_finder.domain.entities.map_session import MapSession
from cafe_finder.domain.value_objects.coordinate import Coordinate, format_distance_km
from cafe_finder.domain.value_objects.enums import MarkerKind

USER_POPUP = "You are here"
SAVE_HINT = "Click to Save"
REMOVE_HINT = "Click to Remove"


@dataclass(frozen=True)
class CafeView:
    """A cafe as shown in the results list."""

    cafe: Cafe
    distance_km: float | None  # None without a user location
    is_favorite: bool


@dataclass(frozen=True)
class MapMarker:
    kind: MarkerKind
    position: Coordinate
    popup: str
    cafe_id: CafeId | None = None


def annotate_cafes(
    cafes: Iterable[Cafe],
    user_location: Coordinate | None,
    is_favorite: Callable[[CafeId], bool],
) -> list[CafeView]:
    """Annotate each cafe with its distance (2 decimals) and favorite status."""
    views = []
    for cafe in cafes:
        distance = None
        if user_location is not None:
            distance = round(user_location.distance_km(cafe.location), 2)
        views.append(CafeView(cafe=cafe, distance_km=distance, is_favorite=is_favorite(cafe.id)))
    return views


def distance_suffix(distance_km: float | None) -> str:
    if distance_km is None:
        return ""
    return f" — {format_distance_km(distance_km)} km from you"


def build_map_markers(
    session: MapSession,
    is_favorite: Callable[[CafeId], bool],
) -> list[MapMarker]:
    """User marker first (when located), then one marker per search result."""
    markers: list[MapMarker] = []
    if session.user_location is not None:
        markers.append(MapMarker(kind=MarkerKind.USER, position=session.user_location, popup=USER_POPUP))

    for view in annotate_cafes(session.cafes, session.user_location, is_favorite):
        hint = REMOVE_HINT if view.is_favorite else SAVE_HINT
        markers.append(
            MapMarker(
                kind=MarkerKind.FAVORITE if view.is_favorite else MarkerKind.SEARCH,
                position=view.cafe.location,
                popup=f"{view.cafe.name}{distance_suffix(view.distance_km)}\n{hint}",
                cafe_id=view.cafe.id,
            )
        )
    return markers
