"""Command-line client for the cafe search and favorites.

Usage:
    python -m cafe_finder.tools.cafe_cli search Paris
    python -m cafe_finder.tools.cafe_cli search Paris --lat 48.86 --lon 2.35
    python -m cafe_finder.tools.cafe_cli search Paris --save 42 --save 43
    python -m cafe_finder.tools.cafe_cli favorites
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from cafe_finder.adapters.persistence.database import engine, init_db, session_factory
from cafe_finder.adapters.persistence.key_value_store import SqlKeyValueStore
from cafe_finder.adapters.search.http_search_adapter import HttpCafeSearchAdapter
from cafe_finder.application.services.favorites_store import FavoritesStore, FavoritesUnavailableError
from cafe_finder.application.use_cases.search_cafes import SearchCafesUseCase
from cafe_finder.config import settings
from cafe_finder.domain.entities.cafe import Cafe
from cafe_finder.domain.entities.map_session import MapSession
from cafe_finder.domain.policies.annotation import annotate_cafes, distance_suffix
from cafe_finder.domain.value_objects.coordinate import Coordinate
from cafe_finder.domain.value_objects.enums import SearchStatus

logging.basicConfig(level=logging.WARNING, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


def _format_cafe(cafe: Cafe, distance_km: float | None = None, is_favorite: bool = False) -> str:
    mark = "*" if is_favorite else " "
    return (
        f"{mark} [{cafe.id}] {cafe.name} "
        f"(Lat: {cafe.location.latitude:.3f}, Lon: {cafe.location.longitude:.3f})"
        f"{distance_suffix(distance_km)}"
    )


def _find_cafe(cafes: tuple[Cafe, ...], raw_id: str) -> Cafe | None:
    """Match a command-line id against string or integer cafe ids."""
    for cafe in cafes:
        if str(cafe.id) == raw_id:
            return cafe
    return None


async def run_search(
    city: str,
    store: FavoritesStore,
    search_uc: SearchCafesUseCase,
    save_ids: list[str],
    out=None,
) -> int:
    """Search *city*, print annotated results, toggle the requested ids."""
    out = out if out is not None else sys.stdout
    try:
        outcome = await search_uc.execute(city)
    except ValueError as e:
        print(f"Error: {e}", file=out)
        return 2
    if outcome.status != SearchStatus.OK:
        print(f"Error: {outcome.error}", file=out)
        return 1

    session = search_uc.session
    for raw_id in save_ids:
        cafe = _find_cafe(session.cafes, raw_id)
        if cafe is None:
            print(f"No cafe with id {raw_id} in the results", file=out)
            continue
        try:
            store.toggle(cafe)
        except FavoritesUnavailableError as e:
            print(f"Error: {e}", file=out)
            return 1
        state = "Saved" if store.contains(cafe.id) else "Removed"
        print(f"{state} favorite: {cafe.name}", file=out)

    print(f"Cafes in {session.city} ({len(session.cafes)}):", file=out)
    for view in annotate_cafes(session.cafes, session.user_location, store.contains):
        print(_format_cafe(view.cafe, view.distance_km, view.is_favorite), file=out)
    return 0


def print_favorites(store: FavoritesStore, out=None) -> int:
    out = out if out is not None else sys.stdout
    saved = store.list()
    print(f"Favorites ({len(saved)}):", file=out)
    for cafe in saved:
        print(_format_cafe(cafe, is_favorite=True), file=out)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find cafes and manage favorites")
    sub = parser.add_subparsers(dest="command", required=True)

    search_p = sub.add_parser("search", help="Search cafes in a city")
    search_p.add_argument("city", help="City name")
    search_p.add_argument("--lat", type=float, help="Your latitude (enables distances)")
    search_p.add_argument("--lon", type=float, help="Your longitude (enables distances)")
    search_p.add_argument(
        "--save", action="append", default=[], metavar="ID",
        help="Toggle the favorite state of a result (repeatable)",
    )

    sub.add_parser("favorites", help="List saved cafes")

    args = parser.parse_args(argv)

    init_db(engine)
    store = FavoritesStore(SqlKeyValueStore(session_factory), key=settings.favorites_storage_key)
    store.load()

    if args.command == "favorites":
        return print_favorites(store)

    session = MapSession()
    if args.lat is not None and args.lon is not None:
        session.locate_user(Coordinate(latitude=args.lat, longitude=args.lon))
    search_uc = SearchCafesUseCase(search=HttpCafeSearchAdapter(), session=session)
    return asyncio.run(run_search(args.city, store, search_uc, args.save))


if __name__ == "__main__":
    sys.exit(main())
