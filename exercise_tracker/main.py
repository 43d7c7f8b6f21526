"""Exercise Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExerciseTrackerError → {"error": message} responses
    - CORS configured from settings (not hardcoded)
    - Database connected on startup via lifespan; a failed connection is logged, not fatal

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Landing page served by an explicit route; other assets mounted under /public
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from exercise_tracker import __version__
from exercise_tracker.api.error_handlers import register_error_handlers
from exercise_tracker.api.routes import exercises, health, users
from exercise_tracker.config import get_settings
from exercise_tracker.infrastructure.database import init_db
from exercise_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.connect()
    logger.info("Exercise Tracker API started")
    yield
    logger.info("Exercise Tracker API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Exercise Tracker API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(exercises.router)

app.mount("/public", StaticFiles(directory=STATIC_DIR), name="public")

register_error_handlers(app)


@app.get("/", include_in_schema=False)
async def landing_page():
    """Serve the landing page."""
    return FileResponse(STATIC_DIR / "index.html")
