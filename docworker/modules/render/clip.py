"""
Capture region selection for screenshots.

Order: explicit clip, then auto-fit to the measured content, then full page.
Exactly one of ``clip`` / ``full_page`` ends up in the capture request.
"""

from typing import Any, NamedTuple

from .schemas import Clip, ResolvedImageOptions

# Evaluated in the page; reads the rendered document size
CONTENT_SIZE_SCRIPT = """() => ({
    width: document.body ? document.body.scrollWidth : 0,
    height: document.body ? document.body.scrollHeight : 0,
})"""


class ContentSize(NamedTuple):
    width: float
    height: float

    @property
    def is_measurable(self) -> bool:
        return self.width > 0 and self.height > 0


def select_capture_region(
    clip: Clip | None,
    content_size: ContentSize | None,
    full_page: bool,
) -> dict[str, Any]:
    """
    Decide the capture region.

    Args:
        clip: Caller-supplied region, used verbatim when present
        content_size: Probed document size, None if the probe failed
        full_page: Resolved fallback flag

    Returns:
        Either {"clip": {...}} or {"full_page": bool}
    """
    if clip is not None:
        return {"clip": clip.model_dump(include={"x", "y", "width", "height"})}

    if content_size is not None and content_size.is_measurable:
        return {
            "clip": {
                "x": 0,
                "y": 0,
                "width": content_size.width,
                "height": content_size.height,
            }
        }

    return {"full_page": full_page}


def build_screenshot_options(
    options: ResolvedImageOptions,
    content_size: ContentSize | None,
) -> dict[str, Any]:
    """Compose Playwright screenshot keyword arguments."""
    screenshot: dict[str, Any] = {
        "type": options.type,
        "omit_background": options.omit_background,
    }
    # Quality is rejected by the engine for lossless formats
    if options.is_lossy:
        screenshot["quality"] = options.quality

    screenshot.update(select_capture_region(options.clip, content_size, options.full_page))
    return screenshot
