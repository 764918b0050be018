"""
Shared fixtures: settings and a fake Playwright.
"""

from pathlib import Path

import pytest

from docworker.config import Settings, init_settings, reset_settings
from tests.fakes import FakePage, FakePlaywright


@pytest.fixture
def chromium_path(tmp_path: Path) -> Path:
    """A stand-in Chromium executable on disk."""
    path = tmp_path / "chromium"
    path.write_text("#!/bin/sh\n")
    return path


@pytest.fixture
def settings(chromium_path: Path) -> Settings:
    """Settings with every required value present."""
    s = Settings(
        redis_host="localhost",
        s3_bucket_name="test-bucket",
        aws_region="us-east-1",
        local_chromium_path=str(chromium_path),
        image_idle_timeout_ms=500,
        log_format="text",
    )
    init_settings(s)
    yield s
    reset_settings()


@pytest.fixture
def page() -> FakePage:
    return FakePage()


@pytest.fixture
def playwright(page: FakePage, chromium_path: Path) -> FakePlaywright:
    return FakePlaywright(page, executable_path=str(chromium_path))
