"""Tests for capture region selection and screenshot options."""

import pytest

from docworker.modules.render.clip import (
    ContentSize,
    build_screenshot_options,
    select_capture_region,
)
from docworker.modules.render.options import resolve_image_options
from docworker.modules.render.schemas import Clip, ImageOptions


def test_explicit_clip_wins_over_probe():
    clip = Clip(x=10, y=20, width=300, height=150)

    region = select_capture_region(clip, ContentSize(800, 600), full_page=True)

    assert region == {"clip": {"x": 10, "y": 20, "width": 300, "height": 150}}
    assert "full_page" not in region


def test_auto_fit_uses_content_size():
    region = select_capture_region(None, ContentSize(800, 600), full_page=True)

    assert region == {"clip": {"x": 0, "y": 0, "width": 800, "height": 600}}


@pytest.mark.parametrize("size", [ContentSize(0, 0), ContentSize(800, 0), ContentSize(0, 600), None])
def test_unmeasurable_content_falls_back_to_full_page(size):
    region = select_capture_region(None, size, full_page=True)

    assert region == {"full_page": True}


def test_fallback_honors_caller_full_page():
    region = select_capture_region(None, ContentSize(0, 0), full_page=False)

    assert region == {"full_page": False}


class TestScreenshotOptions:
    """Quality gating and region exclusivity."""

    def test_png_never_carries_quality(self) -> None:
        resolved = resolve_image_options(ImageOptions(type="png", quality=55))

        options = build_screenshot_options(resolved, ContentSize(800, 600))

        assert "quality" not in options
        assert options["type"] == "png"

    def test_jpeg_defaults_quality(self) -> None:
        resolved = resolve_image_options(ImageOptions(type="jpeg"))

        options = build_screenshot_options(resolved, ContentSize(800, 600))

        assert options["quality"] == 80

    def test_webp_keeps_supplied_quality(self) -> None:
        resolved = resolve_image_options(ImageOptions(type="webp", quality=60))

        options = build_screenshot_options(resolved, None)

        assert options["quality"] == 60

    def test_clip_and_full_page_are_exclusive(self) -> None:
        resolved = resolve_image_options(None)

        with_clip = build_screenshot_options(resolved, ContentSize(640, 480))
        without_clip = build_screenshot_options(resolved, ContentSize(0, 0))

        assert "clip" in with_clip and "full_page" not in with_clip
        assert "full_page" in without_clip and "clip" not in without_clip

    def test_omit_background_passed(self) -> None:
        resolved = resolve_image_options(ImageOptions(omit_background=True))

        options = build_screenshot_options(resolved, None)

        assert options["omit_background"] is True
