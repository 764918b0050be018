"""Health module - liveness endpoint."""

from .router import router
from .schemas import HealthResponse

__all__ = ["router", "HealthResponse"]
