"""
Document generation job processor.

Consumes one queue job: render, upload, return the result. Failures are
logged and re-raised so the queue can apply its retry/backoff policy and,
once attempts are exhausted, keep the job in its failed set.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from docworker.modules.render.service import RenderService
from docworker.modules.storage.service import StorageService
from docworker.shared.logging import (
    JobContext,
    clear_job_context,
    get_logger,
    set_job_context,
)
from docworker.shared.time import utcnow_iso

from .schemas import ImageDocumentJob, JobResult, PdfDocumentJob, parse_document_job

logger = get_logger(__name__)


@dataclass
class WorkerStats:
    """Counters reported by the health endpoint."""
    completed: int = 0
    failed: int = 0
    active: int = 0


class DocumentJobProcessor:
    """BullMQ processor for the document generation queue."""

    def __init__(
        self,
        render_service: RenderService,
        storage_service: StorageService,
        queue_name: str,
        stats: WorkerStats | None = None,
    ) -> None:
        self.render_service = render_service
        self.storage_service = storage_service
        self.queue_name = queue_name
        self.stats = stats or WorkerStats()

    async def process(self, job: Any, token: str | None = None) -> dict[str, Any]:
        """
        Process one job.

        Args:
            job: Queue job exposing ``id`` and ``data``
            token: Lock token supplied by the worker (unused)

        Returns:
            Result payload stored by the queue

        Raises:
            Whatever rendering, validation or upload raised, unchanged
        """
        job_id = str(job.id)
        set_job_context(JobContext(job_id=job_id, queue=self.queue_name))
        self.stats.active += 1

        try:
            data = job.data or {}
            fields = data if isinstance(data, Mapping) else {}
            logger.info(
                "Job started",
                extra={
                    "job_id": job_id,
                    "queue": self.queue_name,
                    "document_type": fields.get("documentType"),
                    "s3_key": fields.get("s3Key"),
                    "user_id": fields.get("userId"),
                    "attempt": getattr(job, "attemptsMade", None),
                },
            )

            document = parse_document_job(data)

            content = await self._render(document)
            logger.info("Document generated", extra={"job_id": job_id, "bytes": len(content)})

            url = await self.storage_service.upload(
                document.storage_key, content, document.document_type
            )
            logger.info(
                "Uploaded to storage",
                extra={"job_id": job_id, "s3_key": document.storage_key, "url": url},
            )

            result = JobResult(
                url=url,
                user_id=document.user_id,
                completed_at=utcnow_iso(),
                meta_data=document.meta_data,
            )

            logger.info("Job completed", extra={"job_id": job_id, "url": url})
            self.stats.completed += 1
            return result.to_payload()

        except Exception as e:
            logger.error(
                "Job failed",
                exc_info=True,
                extra={
                    "job_id": job_id,
                    "queue": self.queue_name,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            self.stats.failed += 1
            # Re-raise so the queue records the failed attempt
            raise

        finally:
            self.stats.active -= 1
            clear_job_context()

    async def _render(self, document: PdfDocumentJob | ImageDocumentJob) -> bytes:
        if isinstance(document, PdfDocumentJob):
            return await self.render_service.render_pdf(document.html_content, document.pdf_options)
        if isinstance(document, ImageDocumentJob):
            return await self.render_service.render_image(document.html_content, document.image_options)
        raise TypeError(f"Unsupported document job: {type(document).__name__}")
