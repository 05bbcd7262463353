"""HTTP cafe search adapter — implements CafeSearchPort."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from cafe_finder.application.ports.cafe_search_port import CafeSearchError, CafeSearchPort
from cafe_finder.config import settings
from cafe_finder.domain.entities.cafe import Cafe
from cafe_finder.domain.entities.search_result import SearchResult
from cafe_finder.domain.value_objects.coordinate import Coordinate

logger = logging.getLogger(__name__)

FETCH_ERROR = "Error fetching cafes"
TIMEOUT_ERROR = "Search timed out"


class HttpCafeSearchAdapter(CafeSearchPort):
    """Calls ``GET <url>?city=<city>`` and parses ``{cafes, lat, lon}`` or ``{error}``."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = url or settings.cafe_search_url
        self._timeout = timeout if timeout is not None else settings.search_timeout_seconds
        self._user_agent = user_agent or settings.http_user_agent
        self._transport = transport

    async def search(self, city: str) -> SearchResult:
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    self._url,
                    params={"city": city},
                    headers={"User-Agent": self._user_agent},
                    timeout=self._timeout,
                )
        except httpx.TimeoutException as e:
            logger.warning("Cafe search for '%s' timed out after %.1fs", city, self._timeout)
            raise CafeSearchError(TIMEOUT_ERROR) from e
        except httpx.HTTPError as e:
            logger.exception("Cafe search API error for '%s'", city)
            raise CafeSearchError(FETCH_ERROR) from e
        except (httpx.InvalidURL, UnicodeError) as e:
            logger.error("Cafe search request for %r could not be built: %s", city, e)
            raise CafeSearchError(FETCH_ERROR) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Cafe search for '%s' returned non-JSON body (HTTP %d)", city, response.status_code)
            raise CafeSearchError(FETCH_ERROR) from e

        if isinstance(data, dict) and data.get("error"):
            logger.info("Cafe search for '%s' reported: %s", city, data["error"])
            raise CafeSearchError(str(data["error"]))

        if response.is_error:
            logger.error("Cafe search for '%s' failed with HTTP %d", city, response.status_code)
            raise CafeSearchError(FETCH_ERROR)

        return self._parse_result(city, data)

    @staticmethod
    def _parse_result(city: str, data: Any) -> SearchResult:
        """Convert a ``{cafes, lat, lon}`` body into a SearchResult."""
        try:
            center = Coordinate(latitude=float(data["lat"]), longitude=float(data["lon"]))
            raw_cafes = data["cafes"]
            if not isinstance(raw_cafes, list):
                raise ValueError("'cafes' is not a list")
            cafes = tuple(Cafe.from_record(item) for item in raw_cafes)
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed cafe search response for '%s': %s", city, e)
            raise CafeSearchError(FETCH_ERROR) from e

        logger.info("Cafe search resolved '%s' → %d cafes around (%f, %f)",
                    city, len(cafes), center.latitude, center.longitude)
        return SearchResult(city=city, center=center, cafes=cafes)
