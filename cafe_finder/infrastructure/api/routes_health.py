"""Health endpoint — storage reachability and favorites state."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from cafe_finder.application.services.favorites_store import FavoritesStore
from cafe_finder.infrastructure.api.dependencies import get_favorites_store, get_session_factory

router = APIRouter(tags=["health"])


def _check_storage(factory: sessionmaker[Session]) -> str:
    try:
        with factory() as session:
            session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        return f"error: {e}"
    return "connected"


@router.get("/health")
async def health_check(
    factory: sessionmaker[Session] = Depends(get_session_factory),
    favorites: FavoritesStore = Depends(get_favorites_store),
):
    """Degraded when storage is unreachable or favorites were never read from it."""
    storage = _check_storage(factory)
    favorites_state = "loaded" if favorites.is_loaded else "unavailable"
    healthy = storage == "connected" and favorites.is_loaded
    return {
        "status": "ok" if healthy else "degraded",
        "storage": storage,
        "favorites": favorites_state,
        "favorites_count": len(favorites.list()),
        "service": "Cafe Finder",
    }
