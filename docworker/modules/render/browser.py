"""
Browser process lifecycle - one Chromium per render call.
"""

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from playwright.async_api import Page, Playwright, async_playwright

from docworker.shared.errors import BrowserNotFoundError
from docworker.shared.logging import get_logger

from .schemas import Viewport

logger = get_logger(__name__)


# Flags for containerized Chromium without a display or a large /dev/shm
BASE_CHROMIUM_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--no-zygote",
    "--font-render-hinting=none",
)

GPU_DISABLED_ARGS = (
    "--disable-gpu",
    "--disable-software-rasterizer",
)


PlaywrightFactory = Callable[[], Any]


@dataclass(frozen=True)
class LaunchOptions:
    """Per-invocation launch settings."""
    executable_path: str
    headless: bool = True
    disable_gpu: bool = True
    extra_args: tuple[str, ...] = field(default_factory=tuple)

    @property
    def args(self) -> list[str]:
        args = list(BASE_CHROMIUM_ARGS)
        if self.disable_gpu:
            args.extend(GPU_DISABLED_ARGS)
        args.extend(self.extra_args)
        return args

    def to_kwargs(self) -> dict[str, Any]:
        return {
            "executable_path": self.executable_path,
            "headless": self.headless,
            "args": self.args,
        }


def resolve_executable_path(local_path: str | None, playwright: Playwright) -> str:
    """
    Locate the Chromium binary.

    A configured local path wins; otherwise the Chromium bundled with
    Playwright (installed by ``playwright install chromium``) is used.

    Raises:
        BrowserNotFoundError: If the resolved path is not an existing file
    """
    if local_path:
        path, source = local_path, "local"
    else:
        path, source = playwright.chromium.executable_path, "playwright"

    if not path or not Path(path).is_file():
        raise BrowserNotFoundError(
            f"Chromium executable not found: {path}",
            details={"path": path, "source": source},
        )

    logger.info("Using Chromium", extra={"path": path, "source": source})
    return path


def viewport_context_options(viewport: Viewport) -> dict[str, Any]:
    """Browser context options emulating the requested device."""
    long_side = max(viewport.width, viewport.height)
    short_side = min(viewport.width, viewport.height)
    if viewport.is_landscape:
        screen = {"width": long_side, "height": short_side}
    else:
        screen = {"width": short_side, "height": long_side}

    return {
        "viewport": {"width": viewport.width, "height": viewport.height},
        "screen": screen,
        "device_scale_factor": viewport.device_scale_factor,
        "is_mobile": viewport.is_mobile,
        "has_touch": viewport.has_touch,
    }


async def _close_after_failure(browser: Any) -> None:
    """Close after a failed render. A CancelledError from close still propagates."""
    try:
        await browser.close()
    except Exception:
        # The render error is the one that must reach the caller
        logger.warning("Browser close failed after render error", exc_info=True)


@asynccontextmanager
async def browser_session(
    local_chromium_path: str | None,
    viewport: Viewport | None = None,
    playwright_factory: PlaywrightFactory = async_playwright,
) -> AsyncIterator[Page]:
    """
    Launch a headless Chromium and yield a fresh page.

    The browser is closed exactly once on every exit path. When the body
    raised, a close failure is logged and the body's exception propagates.
    """
    async with playwright_factory() as playwright:
        launch = LaunchOptions(
            executable_path=resolve_executable_path(local_chromium_path, playwright),
        )
        browser = await playwright.chromium.launch(**launch.to_kwargs())

        try:
            if viewport is not None:
                # Viewport must be fixed before content loads so layout happens once
                context = await browser.new_context(**viewport_context_options(viewport))
                page = await context.new_page()
            else:
                page = await browser.new_page()
            yield page
        except BaseException:
            await _close_after_failure(browser)
            raise

        await browser.close()
