"""Health module routes."""

from fastapi import APIRouter, Request

from .schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(request: Request) -> HealthResponse:
    """Report whether the queue worker is running and what it has processed."""
    state = request.app.state
    stats = state.stats
    return HealthResponse(
        queue=state.settings.pdf_generation_queue,
        worker_running=getattr(state, "worker", None) is not None,
        active_jobs=stats.active,
        completed_jobs=stats.completed,
        failed_jobs=stats.failed,
    )
