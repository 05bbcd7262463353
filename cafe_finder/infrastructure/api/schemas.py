"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from cafe_finder.domain.entities.cafe import Cafe
from cafe_finder.domain.policies.annotation import CafeView, MapMarker
from cafe_finder.domain.value_objects.coordinate import Coordinate


# ── Requests ──────────────────────────────────────────────────────────


class SearchRequest(BaseModel):
    city: str = Field(..., min_length=1, max_length=200)


class CafeIn(BaseModel):
    id: int | str
    name: str
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)

    def to_domain(self) -> Cafe:
        return Cafe(id=self.id, name=self.name, location=Coordinate(latitude=self.lat, longitude=self.lon))


class LocationIn(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


# ── Responses ─────────────────────────────────────────────────────────


class PointOut(BaseModel):
    lat: float
    lon: float

    @classmethod
    def from_domain(cls, point: Coordinate) -> PointOut:
        return cls(lat=point.latitude, lon=point.longitude)


class CafeOut(BaseModel):
    id: int | str
    name: str
    lat: float
    lon: float

    @classmethod
    def from_domain(cls, cafe: Cafe) -> CafeOut:
        return cls(id=cafe.id, name=cafe.name, lat=cafe.location.latitude, lon=cafe.location.longitude)


class CafeResultOut(CafeOut):
    distance_km: float | None = None
    is_favorite: bool = False

    @classmethod
    def from_view(cls, view: CafeView) -> CafeResultOut:
        cafe = view.cafe
        return cls(
            id=cafe.id, name=cafe.name, lat=cafe.location.latitude, lon=cafe.location.longitude,
            distance_km=view.distance_km, is_favorite=view.is_favorite,
        )


class SearchResponse(BaseModel):
    city: str | None
    center: PointOut
    user_location: PointOut | None
    loading: bool
    last_error: str | None
    cafes: list[CafeResultOut]


class FavoritesResponse(BaseModel):
    total: int
    favorites: list[CafeOut]


class ToggleResponse(FavoritesResponse):
    id: int | str
    is_favorite: bool


class MembershipResponse(BaseModel):
    id: int | str
    is_favorite: bool


class LocationResponse(BaseModel):
    status: str
    reason: str | None = None
    user_location: PointOut | None = None
    center: PointOut


class MarkerOut(BaseModel):
    kind: str  # "user" | "search" | "favorite"
    lat: float
    lon: float
    popup: str
    cafe_id: int | str | None = None

    @classmethod
    def from_domain(cls, marker: MapMarker) -> MarkerOut:
        return cls(
            kind=marker.kind.value,
            lat=marker.position.latitude,
            lon=marker.position.longitude,
            popup=marker.popup,
            cafe_id=marker.cafe_id,
        )


class MapResponse(BaseModel):
    center: PointOut
    zoom: int
    markers: list[MarkerOut]
