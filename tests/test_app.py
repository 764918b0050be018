"""Tests for the application shell and health endpoint."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from docworker.app import build_app
from docworker.config import Settings
from docworker.modules.generation.processor import DocumentJobProcessor


@pytest.fixture
def worker() -> MagicMock:
    worker = MagicMock()
    worker.close = AsyncMock()
    return worker


@pytest.fixture
def worker_factory(worker: MagicMock) -> MagicMock:
    return MagicMock(return_value=worker)


def test_root(settings: Settings, worker_factory: MagicMock) -> None:
    client = TestClient(build_app(settings, worker_factory))

    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.json()["service"] == "docworker"


def test_health_before_startup(settings: Settings, worker_factory: MagicMock) -> None:
    client = TestClient(build_app(settings, worker_factory))

    data = client.get("/health").json()

    assert data["status"] == "ok"
    assert data["queue"] == "pdf-generation"
    assert data["worker_running"] is False


def test_lifespan_starts_and_closes_worker(
    settings: Settings, worker_factory: MagicMock, worker: MagicMock
) -> None:
    app = build_app(settings, worker_factory)

    with TestClient(app) as client:
        data = client.get("/health").json()
        assert data["worker_running"] is True
        assert data["completed_jobs"] == 0

        passed_settings, processor = worker_factory.call_args.args
        assert passed_settings is settings
        assert isinstance(processor, DocumentJobProcessor)
        assert processor.stats is app.state.stats

    worker.close.assert_awaited_once()
    assert app.state.worker is None


def test_health_reports_counters(settings: Settings, worker_factory: MagicMock) -> None:
    app = build_app(settings, worker_factory)
    app.state.stats.completed = 3
    app.state.stats.failed = 1

    data = TestClient(app).get("/health").json()

    assert data["completed_jobs"] == 3
    assert data["failed_jobs"] == 1
