"""Tests for LocateUserUseCase."""

import pytest

from cafe_finder.application.ports.geolocation_port import GeolocationPort, GeolocationResult
from cafe_finder.application.use_cases.locate_user import LocateUserUseCase
from cafe_finder.domain.entities.map_session import DEFAULT_CENTER, MapSession
from cafe_finder.domain.value_objects.enums import GeolocationStatus
from tests.conftest import LONDON, PARIS


class FakeGeolocation(GeolocationPort):
    def __init__(self, result: GeolocationResult):
        self._result = result

    async def locate(self):
        return self._result


@pytest.mark.asyncio
async def test_success_sets_location_and_center():
    session = MapSession()
    uc = LocateUserUseCase(FakeGeolocation(GeolocationResult.success(LONDON)), session)
    result = await uc.execute()
    assert result.status == GeolocationStatus.SUCCESS
    assert session.user_location == LONDON
    assert session.center == LONDON


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "result",
    [GeolocationResult.denied(), GeolocationResult.error("timeout")],
)
async def test_failure_keeps_defaults(result):
    session = MapSession()
    uc = LocateUserUseCase(FakeGeolocation(result), session)
    returned = await uc.execute()
    assert returned.status == result.status
    assert session.user_location is None
    assert session.center == DEFAULT_CENTER


def test_set_location_from_device():
    session = MapSession()
    uc = LocateUserUseCase(FakeGeolocation(GeolocationResult.denied()), session)
    uc.set_location(PARIS)
    assert session.user_location == PARIS
    assert session.center == PARIS
