"""FastAPI application for the workout-tracker web interface."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from .. import __version__
from ..db.engine import get_db_path, init_db
from ..errors import TrackerError
from .routers import exercises, workouts

logger = logging.getLogger(__name__)

# Template path
TEMPLATES_DIR = Path(__file__).parent / "templates"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Schema creation is idempotent
    await init_db(app.state.db_path)
    logger.info("Using database %s", app.state.db_path)
    yield


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: SQLite database file (defaults to the configured data dir)
    """
    app = FastAPI(
        title="workout-tracker",
        description="Exercise library, workout log and volume reports",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = db_path or get_db_path()

    # Store templates in app state for use in routers
    templates = Jinja2Templates(directory=TEMPLATES_DIR)
    app.state.templates = templates

    # Include routers
    app.include_router(exercises.router)
    app.include_router(workouts.router)

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(request: Request, exc: TrackerError):
        """Render domain errors (not found, invalid input, in use) as an error page."""
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
        return templates.TemplateResponse(
            request,
            "error.html",
            {
                "status_code": exc.status_code,
                "error_type": type(exc).__name__,
                "message": str(exc),
            },
            status_code=exc.status_code,
        )

    @app.get("/", response_class=HTMLResponse)
    async def root(request: Request):
        """Root redirect to the workout log."""
        return RedirectResponse(url="/workouts", status_code=302)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
