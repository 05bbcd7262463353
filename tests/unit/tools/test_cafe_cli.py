"""Tests for the command-line client (fakes only, no network or database)."""

import io

import pytest

from cafe_finder.application.ports.cafe_search_port import CafeSearchError, CafeSearchPort
from cafe_finder.application.services.favorites_store import FavoritesStore
from cafe_finder.application.use_cases.search_cafes import SearchCafesUseCase
from cafe_finder.domain.entities.map_session import MapSession
from cafe_finder.domain.entities.search_result import SearchResult
from cafe_finder.tools.cafe_cli import print_favorites, run_search
from tests.conftest import PARIS, LockedKeyValueStore, make_cafe


class FakeSearch(CafeSearchPort):
    def __init__(self, cafes=(), error=None):
        self._cafes = tuple(cafes)
        self._error = error

    async def search(self, city):
        if self._error:
            raise CafeSearchError(self._error)
        return SearchResult(city=city, center=PARIS, cafes=self._cafes)


@pytest.mark.asyncio
async def test_search_prints_results(kv_store, paris_cafes):
    out = io.StringIO()
    store = FavoritesStore(kv_store)
    uc = SearchCafesUseCase(FakeSearch(paris_cafes), MapSession())

    code = await run_search("Paris", store, uc, [], out=out)

    text = out.getvalue()
    assert code == 0
    assert "Cafes in Paris (3):" in text
    assert "[1] Café de Flore (Lat: 48.854, Lon: " in text
    assert "km from you" not in text


@pytest.mark.asyncio
async def test_search_with_location_prints_distance(kv_store, paris_cafes):
    out = io.StringIO()
    session = MapSession()
    session.locate_user(PARIS)
    uc = SearchCafesUseCase(FakeSearch(paris_cafes), session)

    await run_search("Paris", FavoritesStore(kv_store), uc, [], out=out)
    assert "km from you" in out.getvalue()


@pytest.mark.asyncio
async def test_save_toggles_favorites(kv_store, paris_cafes):
    out = io.StringIO()
    store = FavoritesStore(kv_store)
    uc = SearchCafesUseCase(FakeSearch(paris_cafes), MapSession())

    await run_search("Paris", store, uc, ["2", "99"], out=out)

    text = out.getvalue()
    assert "Saved favorite: Les Deux Magots" in text
    assert "No cafe with id 99 in the results" in text
    assert "* [2] Les Deux Magots" in text
    assert [c.id for c in FavoritesStore(kv_store).load()] == [2]


@pytest.mark.asyncio
async def test_search_error_returns_nonzero(kv_store):
    out = io.StringIO()
    uc = SearchCafesUseCase(FakeSearch(error="City not found"), MapSession())
    code = await run_search("Atlantis", FavoritesStore(kv_store), uc, [], out=out)
    assert code == 1
    assert "Error: City not found" in out.getvalue()


@pytest.mark.asyncio
async def test_blank_city_returns_usage_error(kv_store):
    out = io.StringIO()
    uc = SearchCafesUseCase(FakeSearch(), MapSession())
    assert await run_search("  ", FavoritesStore(kv_store), uc, [], out=out) == 2


@pytest.mark.asyncio
async def test_save_with_unreadable_storage_reports_error(paris_cafes):
    out = io.StringIO()
    kv = LockedKeyValueStore({"favorites": "[]"})
    store = FavoritesStore(kv)
    store.load()
    uc = SearchCafesUseCase(FakeSearch(paris_cafes), MapSession())

    code = await run_search("Paris", store, uc, ["1"], out=out)

    assert code == 1
    assert "Error: Favorites under 'favorites' could not be read" in out.getvalue()
    assert kv.writes == 0


def test_print_favorites(kv_store):
    store = FavoritesStore(kv_store)
    store.toggle(make_cafe(5, "Saved One", 1.0, 2.0))
    out = io.StringIO()
    assert print_favorites(store, out=out) == 0
    assert "Favorites (1):" in out.getvalue()
    assert "* [5] Saved One (Lat: 1.000, Lon: 2.000)" in out.getvalue()
