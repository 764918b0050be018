"""
Application factory - builds the FastAPI app that hosts the queue worker.

The HTTP surface is only a health endpoint; the app's lifespan starts the
BullMQ worker and closes it on shutdown so in-flight jobs can finish.
"""

from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from docworker import __version__
from docworker.config import Settings, get_settings
from docworker.modules.generation import DocumentJobProcessor, WorkerStats, create_worker
from docworker.modules.health import router as health_router
from docworker.modules.render import RenderService
from docworker.modules.storage import StorageService
from docworker.shared.logging import get_logger, setup_logging

logger = get_logger(__name__)

WorkerFactory = Callable[[Settings, DocumentJobProcessor], Any]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan - start and stop the queue worker."""
    settings: Settings = app.state.settings

    setup_logging(settings.log_level, settings.log_format)
    logger.info("Starting docworker...")

    processor = DocumentJobProcessor(
        render_service=RenderService(settings),
        storage_service=StorageService(settings),
        queue_name=settings.pdf_generation_queue,
        stats=app.state.stats,
    )
    app.state.worker = app.state.worker_factory(settings, processor)
    logger.info(f"Worker started - consuming {settings.pdf_generation_queue} queue")

    try:
        yield
    finally:
        logger.info("Shutting down docworker...")
        worker = app.state.worker
        app.state.worker = None
        await worker.close()
        logger.info("docworker stopped")


def build_app(
    settings: Settings | None = None,
    worker_factory: WorkerFactory = create_worker,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Optional settings override (useful for testing)
        worker_factory: Builds the queue worker from settings and processor

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="docworker",
        description="Queue-driven HTML to PDF/image rendering worker",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.worker_factory = worker_factory
    app.state.stats = WorkerStats()
    app.state.worker = None

    app.include_router(health_router, tags=["health"])

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"service": "docworker", "version": __version__}

    return app
