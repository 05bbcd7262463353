"""Cafe Finder — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cafe_finder.adapters.persistence.database import engine, init_db
from cafe_finder.config import settings
from cafe_finder.infrastructure.api.dependencies import get_favorites_store, get_locate_uc
from cafe_finder.infrastructure.api.routes_favorites import router as favorites_router
from cafe_finder.infrastructure.api.routes_health import router as health_router
from cafe_finder.infrastructure.api.routes_map import router as map_router
from cafe_finder.infrastructure.api.routes_search import router as search_router

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: storage tables, favorites mirror, user location."""
    try:
        init_db(engine)
    except Exception as e:
        logger.warning("Favorites storage tables not created on startup: %s", e)

    favorites = get_favorites_store()
    favorites.load()
    if favorites.is_loaded:
        logger.info("Favorites storage ready")
    else:
        logger.warning("Favorites storage unreadable; toggles are refused until it recovers")

    await get_locate_uc().execute()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Cafe Finder",
        description="Search cafes by city, see how far they are, keep favorites",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(search_router, prefix="/api")
    app.include_router(favorites_router, prefix="/api")
    app.include_router(map_router, prefix="/api")

    return app


app = create_app()
