"""Port interface for locating the user."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cafe_finder.domain.value_objects.coordinate import Coordinate
from cafe_finder.domain.value_objects.enums import GeolocationStatus


@dataclass(frozen=True)
class GeolocationResult:
    status: GeolocationStatus
    coordinate: Coordinate | None = None
    reason: str | None = None

    @classmethod
    def success(cls, coordinate: Coordinate) -> GeolocationResult:
        return cls(status=GeolocationStatus.SUCCESS, coordinate=coordinate)

    @classmethod
    def error(cls, reason: str) -> GeolocationResult:
        return cls(status=GeolocationStatus.ERROR, reason=reason)

    @classmethod
    def denied(cls, reason: str = "Permission denied") -> GeolocationResult:
        return cls(status=GeolocationStatus.DENIED, reason=reason)


class GeolocationPort(ABC):
    @abstractmethod
    async def locate(self) -> GeolocationResult:
        """One-shot position lookup. Never raises; failures are typed results."""
        ...
