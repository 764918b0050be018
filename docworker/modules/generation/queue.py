"""
BullMQ wiring for the document generation queue.
"""

from typing import Any

from bullmq import Queue, Worker

from docworker.config import Settings
from docworker.shared.logging import get_logger

from .processor import DocumentJobProcessor

logger = get_logger(__name__)


# Retry and retention policy applied to jobs added to the queue:
# 3 attempts, exponential backoff 5s -> 10s -> 20s, keep the last 100
# completed and 50 failed jobs for inspection.
DEFAULT_JOB_OPTIONS: dict[str, Any] = {
    "attempts": 3,
    "backoff": {"type": "exponential", "delay": 5000},
    "removeOnComplete": 100,
    "removeOnFail": 50,
}

DEFAULT_JOB_NAME = "generate-document"


def connection_options(settings: Settings) -> dict[str, Any]:
    return {"connection": settings.redis_url}


def worker_options(settings: Settings) -> dict[str, Any]:
    """Options for the consuming worker."""
    return {
        **connection_options(settings),
        "concurrency": settings.worker_concurrency,
        "autorun": True,
    }


def create_worker(settings: Settings, processor: DocumentJobProcessor) -> Worker:
    """Start consuming the generation queue."""
    logger.info(
        "Starting queue worker",
        extra={
            "queue": settings.pdf_generation_queue,
            "concurrency": settings.worker_concurrency,
            "redis_host": settings.redis_host,
            "redis_tls": settings.redis_tls,
        },
    )
    return Worker(settings.pdf_generation_queue, processor.process, worker_options(settings))


class DocumentQueue:
    """Producer side of the generation queue (local tooling and tests)."""

    def __init__(self, settings: Settings, queue: Queue | None = None) -> None:
        self.name = settings.pdf_generation_queue
        self.queue = queue or Queue(self.name, connection_options(settings))

    async def add(
        self,
        payload: dict[str, Any],
        name: str = DEFAULT_JOB_NAME,
        **overrides: Any,
    ) -> Any:
        """Enqueue a job payload with the default retry policy."""
        opts = {**DEFAULT_JOB_OPTIONS, **overrides}
        job = await self.queue.add(name, payload, opts)
        logger.info("Job enqueued", extra={"queue": self.name, "job_id": str(job.id)})
        return job

    async def close(self) -> None:
        await self.queue.close()
