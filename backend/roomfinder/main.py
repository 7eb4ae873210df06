"""Room Finder API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RoomFinderError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Composition root lives in the lifespan: database manager, repository and
      service are built once there and handed to routes through app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roomfinder.api.error_handlers import register_error_handlers
from roomfinder.api.routes import health, rooms
from roomfinder.config import get_settings
from roomfinder.infrastructure.database import close_db, init_db
from roomfinder.infrastructure.observability import setup_logging
from roomfinder.infrastructure.room_repository import SqlAlchemyRoomRepository
from roomfinder.services.room_service import RoomService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.room_service = RoomService(SqlAlchemyRoomRepository(db))
    logger.info("Room Finder API started")
    yield
    logger.info("Room Finder API shutting down")
    await close_db()


app = FastAPI(
    title="Room Finder API", version="0.0.1", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[
        "Location", "Link", "X-Total-Count",
        f"X-{settings.app_name}-alert",
        f"X-{settings.app_name}-error",
        f"X-{settings.app_name}-params",
    ],
)

app.include_router(health.router)
app.include_router(rooms.router)

register_error_handlers(app)
