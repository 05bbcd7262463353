"""Port interface for the remote cafe search service."""

from abc import ABC, abstractmethod

from cafe_finder.domain.entities.search_result import SearchResult


class CafeSearchError(Exception):
    """Raised when a search cannot produce results; the message is user-facing."""


class CafeSearchPort(ABC):
    @abstractmethod
    async def search(self, city: str) -> SearchResult:
        """Find cafes in *city*.

        Raises CafeSearchError on network failure, timeout, malformed
        response or an error reported by the service.
        """
        ...
