"""LocateUserUseCase — ask the geolocation collaborator where the user is."""

from __future__ import annotations

import logging

from cafe_finder.application.ports.geolocation_port import GeolocationPort, GeolocationResult
from cafe_finder.domain.entities.map_session import MapSession
from cafe_finder.domain.value_objects.coordinate import Coordinate
from cafe_finder.domain.value_objects.enums import GeolocationStatus

logger = logging.getLogger(__name__)


class LocateUserUseCase:
    def __init__(self, geolocation: GeolocationPort, session: MapSession):
        self._geolocation = geolocation
        self._session = session

    async def execute(self) -> GeolocationResult:
        """Locate the user; on failure keep the default center and no location."""
        result = await self._geolocation.locate()
        if result.status == GeolocationStatus.SUCCESS and result.coordinate is not None:
            self.set_location(result.coordinate)
            return result

        logger.warning(
            "Geolocation not available or permission denied (%s): %s",
            result.status.value, result.reason,
        )
        return result

    def set_location(self, coordinate: Coordinate) -> None:
        """Accept a position reported directly by the client device."""
        self._session.locate_user(coordinate)
        logger.info("User located at (%f, %f)", coordinate.latitude, coordinate.longitude)
