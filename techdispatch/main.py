"""Technician Task Assignment — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from techdispatch.adapters.persistence.database import create_schema, engine
from techdispatch.config import settings
from techdispatch.infrastructure.api.errors import register_error_handlers
from techdispatch.infrastructure.api.routes_assignments import router as assignments_router
from techdispatch.infrastructure.api.routes_health import router as health_router
from techdispatch.infrastructure.api.routes_tasks import router as tasks_router

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)
    if settings.storage_backend == "sql":
        await create_schema()
        logger.info("SQL blob store ready")
    else:
        logger.info("File blob store ready in %s", Path(settings.data_dir).resolve())
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Technician Task Assignment",
        description="Task intake, assignment history and best-technician selection",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(tasks_router)
    app.include_router(assignments_router)

    return app


app = create_app()
