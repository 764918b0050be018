"""
Generation module exports.
"""

from .processor import DocumentJobProcessor, WorkerStats
from .queue import DEFAULT_JOB_OPTIONS, DocumentQueue, create_worker
from .schemas import (
    ImageDocumentJob,
    JobResult,
    PdfDocumentJob,
    parse_document_job,
)

__all__ = [
    "DEFAULT_JOB_OPTIONS",
    "DocumentJobProcessor",
    "DocumentQueue",
    "ImageDocumentJob",
    "JobResult",
    "PdfDocumentJob",
    "WorkerStats",
    "create_worker",
    "parse_document_job",
]
