"""SearchCafesUseCase — run a city search and publish it to the map session."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cafe_finder.application.ports.cafe_search_port import CafeSearchError, CafeSearchPort
from cafe_finder.domain.entities.map_session import MapSession
from cafe_finder.domain.entities.search_result import SearchResult
from cafe_finder.domain.value_objects.enums import SearchStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one search request."""

    status: SearchStatus
    request_id: int
    result: SearchResult | None = None
    error: str | None = None


class SearchCafesUseCase:
    """Searches cafes and applies only the newest response to the session.

    Every call gets a sequence number. A response that comes back after a
    newer search was started is reported as STALE and dropped, so
    overlapping searches resolve last-write-wins.
    """

    def __init__(self, search: CafeSearchPort, session: MapSession):
        self._search = search
        self._session = session
        self._latest_request = 0

    @property
    def session(self) -> MapSession:
        return self._session

    async def execute(self, city: str) -> SearchOutcome:
        """Search *city*.

        Raises:
            ValueError: if *city* is blank.
        """
        city = city.strip()
        if not city:
            raise ValueError("City must not be empty")

        self._latest_request += 1
        request_id = self._latest_request
        self._session.loading = True
        logger.info("Search #%d for '%s'", request_id, city)

        try:
            result = await self._search.search(city)
        except CafeSearchError as e:
            if not self._is_latest(request_id):
                logger.info("Search #%d for '%s' failed after being superseded", request_id, city)
                return SearchOutcome(status=SearchStatus.STALE, request_id=request_id, error=str(e))

            self._session.last_error = str(e)
            logger.warning("Search #%d for '%s' failed: %s", request_id, city, e)
            return SearchOutcome(status=SearchStatus.FAILED, request_id=request_id, error=str(e))
        finally:
            if self._is_latest(request_id):
                self._session.loading = False

        if not self._is_latest(request_id):
            logger.info(
                "Dropping stale search #%d for '%s' (latest is #%d)",
                request_id, city, self._latest_request,
            )
            return SearchOutcome(status=SearchStatus.STALE, request_id=request_id, result=result)

        self._session.show_results(city=result.city, center=result.center, cafes=result.cafes)
        logger.info("Search #%d for '%s' → %d cafes", request_id, city, len(result.cafes))
        return SearchOutcome(status=SearchStatus.OK, request_id=request_id, result=result)

    def _is_latest(self, request_id: int) -> bool:
        return request_id == self._latest_request
