"""FastAPI dependency injection — wires adapters into the core."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session, sessionmaker

from cafe_finder.adapters.geolocation.ip_geolocation_adapter import IpGeolocationAdapter
from cafe_finder.adapters.geolocation.static_geolocation_adapter import StaticGeolocationAdapter
from cafe_finder.adapters.persistence.database import session_factory
from cafe_finder.adapters.persistence.key_value_store import SqlKeyValueStore
from cafe_finder.adapters.search.http_search_adapter import HttpCafeSearchAdapter
from cafe_finder.application.ports.geolocation_port import GeolocationPort
from cafe_finder.application.services.favorites_store import FavoritesStore
from cafe_finder.application.use_cases.locate_user import LocateUserUseCase
from cafe_finder.application.use_cases.search_cafes import SearchCafesUseCase
from cafe_finder.config import settings
from cafe_finder.domain.entities.map_session import MapSession
from cafe_finder.domain.value_objects.coordinate import Coordinate

logger = logging.getLogger(__name__)


def build_geolocation_adapter() -> GeolocationPort:
    """Fixed position from settings first, then IP lookup, else always denied."""
    if settings.user_latitude is not None and settings.user_longitude is not None:
        logger.info("Using configured user location for geolocation")
        return StaticGeolocationAdapter(
            Coordinate(latitude=settings.user_latitude, longitude=settings.user_longitude)
        )
    if settings.ip_geolocation_url:
        logger.info("Using IP lookup for geolocation")
        return IpGeolocationAdapter()
    return StaticGeolocationAdapter(None)


# Singletons: one map session and one favorites mirror per process
_map_session = MapSession(
    center=Coordinate(latitude=settings.default_center_lat, longitude=settings.default_center_lon),
    zoom=settings.map_zoom,
)
_favorites_store = FavoritesStore(SqlKeyValueStore(session_factory), key=settings.favorites_storage_key)
_search_uc = SearchCafesUseCase(search=HttpCafeSearchAdapter(), session=_map_session)
_locate_uc = LocateUserUseCase(geolocation=build_geolocation_adapter(), session=_map_session)


def get_session_factory() -> sessionmaker[Session]:
    return session_factory


def get_map_session() -> MapSession:
    return _map_session


def get_favorites_store() -> FavoritesStore:
    return _favorites_store


def get_search_uc() -> SearchCafesUseCase:
    return _search_uc


def get_locate_uc() -> LocateUserUseCase:
    return _locate_uc
