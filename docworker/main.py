"""
docworker entrypoint - runs the worker under uvicorn.
"""

import uvicorn

from docworker.app import build_app
from docworker.config import get_settings
from docworker.shared.errors import ConfigError


def main() -> None:
    """Run the docworker service."""
    try:
        settings = get_settings()
    except ConfigError as e:
        raise SystemExit(f"Failed to start worker: {e}") from e

    app = build_app(settings)

    print(f"Starting docworker (queue: {settings.pdf_generation_queue})")
    print(f"Health: http://{settings.host}:{settings.port}/health")

    # uvicorn handles SIGTERM/SIGINT and runs the lifespan shutdown
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
