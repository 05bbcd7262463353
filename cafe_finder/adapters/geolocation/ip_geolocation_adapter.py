"""IP geolocation adapter — implements GeolocationPort over HTTP."""

from __future__ import annotations

import logging

import httpx

from cafe_finder.application.ports.geolocation_port import GeolocationPort, GeolocationResult
from cafe_finder.config import settings
from cafe_finder.domain.value_objects.coordinate import Coordinate

logger = logging.getLogger(__name__)


class IpGeolocationAdapter(GeolocationPort):
    """Approximate the user's position from a ``{"lat": .., "lon": ..}`` endpoint."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = url or settings.ip_geolocation_url
        self._timeout = timeout
        self._transport = transport

    async def locate(self) -> GeolocationResult:
        if not self._url:
            return GeolocationResult.denied("IP geolocation is not configured")

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    self._url,
                    headers={"User-Agent": settings.http_user_agent},
                    timeout=self._timeout,
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("IP geolocation lookup failed: %s", e)
            return GeolocationResult.error(f"Lookup failed: {e}")

        try:
            point = Coordinate(latitude=float(data["lat"]), longitude=float(data["lon"]))
        except (KeyError, TypeError, ValueError):
            logger.warning("IP geolocation returned no usable position: %r", data)
            return GeolocationResult.error("Position unavailable")

        logger.info("IP geolocation resolved to (%f, %f)", point.latitude, point.longitude)
        return GeolocationResult.success(point)
