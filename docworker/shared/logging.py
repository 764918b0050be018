"""
Logging setup and job-scoped context.

Every record carries the job id and queue of the job being processed (when
there is one). Structured fields are passed with ``extra=`` and rendered as
JSON keys by python-json-logger.
"""

import logging
import sys
from contextvars import ContextVar
from dataclasses import dataclass

from pythonjsonlogger.json import JsonFormatter

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


@dataclass(frozen=True)
class JobContext:
    """Correlation fields attached to log records."""
    job_id: str | None = None
    queue: str | None = None


_job_context: ContextVar[JobContext | None] = ContextVar("job_context", default=None)


def set_job_context(ctx: JobContext) -> None:
    _job_context.set(ctx)


def get_job_context() -> JobContext | None:
    return _job_context.get()


def clear_job_context() -> None:
    _job_context.set(None)


class JobContextFilter(logging.Filter):
    """Copy the current job context onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = _job_context.get()
        if ctx is not None:
            if not hasattr(record, "job_id"):
                record.job_id = ctx.job_id
            if not hasattr(record, "queue"):
                record.queue = ctx.queue
        return True


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        fmt: "json" for one JSON object per line, "text" for plain lines
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    handler.addFilter(JobContextFilter())

    root = logging.getLogger()
    # Replace handlers so repeated setup (tests, reload) does not duplicate output
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)

    # botocore and urllib3 are chatty at DEBUG
    for noisy in ("botocore", "urllib3", "asyncio"):
        logging.getLogger(noisy).setLevel(max(log_level, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)
