"""Health module schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness and worker counters."""
    status: str = "ok"
    queue: str
    worker_running: bool
    active_jobs: int = 0
    completed_jobs: int = 0
    failed_jobs: int = 0
