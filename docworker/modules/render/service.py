"""Render service - HTML to PDF or image using Playwright."""

import io
from typing import Any

from PIL import Image
from playwright.async_api import Page, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from docworker.config import Settings
from docworker.shared.logging import get_logger

from .browser import PlaywrightFactory, browser_session
from .clip import CONTENT_SIZE_SCRIPT, ContentSize, build_screenshot_options
from .options import resolve_image_options, resolve_pdf_options
from .schemas import ImageOptions, PdfOptions, ResolvedPdfOptions

logger = get_logger(__name__)


def pdf_kwargs(options: ResolvedPdfOptions) -> dict[str, Any]:
    """Map resolved options to ``page.pdf`` keyword arguments."""
    return {
        "format": options.format,
        "landscape": options.landscape,
        "print_background": options.print_background,
        "margin": options.margin.model_dump(),
        "tagged": options.tagged,
        "prefer_css_page_size": options.prefer_css_page_size,
    }


def transcode_to_webp(png: bytes, quality: int) -> bytes:
    """Re-encode a PNG capture as WebP."""
    with Image.open(io.BytesIO(png)) as image:
        out = io.BytesIO()
        image.save(out, format="WEBP", quality=quality)
        return out.getvalue()


def screenshot_kwargs(screenshot: dict[str, Any]) -> dict[str, Any]:
    """
    Map capture options onto ``page.screenshot`` arguments.

    Playwright trims a clip to the viewport unless ``full_page`` is set, in
    which case the clip is taken in document coordinates.
    """
    kwargs = dict(screenshot)
    if "clip" in kwargs:
        kwargs["full_page"] = True
    return kwargs


def parse_content_size(raw: Any) -> ContentSize | None:
    """Read the probe result; None when it is not a usable size."""
    if not isinstance(raw, dict):
        return None
    width, height = raw.get("width"), raw.get("height")
    if not isinstance(width, (int, float)) or not isinstance(height, (int, float)):
        return None
    return ContentSize(width=width, height=height)


class RenderService:
    """
    Render HTML documents in a headless Chromium.

    Every call launches and closes its own browser process, so a crashed or
    leaking renderer never affects another job.
    """

    def __init__(
        self,
        settings: Settings,
        playwright_factory: PlaywrightFactory = async_playwright,
    ) -> None:
        self.settings = settings
        self._playwright_factory = playwright_factory

    async def render_pdf(self, html: str, options: PdfOptions | None = None) -> bytes:
        """
        Render HTML to PDF bytes.

        Args:
            html: Complete HTML document
            options: Caller PDF options, defaulted per field

        Returns:
            PDF bytes
        """
        resolved = resolve_pdf_options(options)

        async with browser_session(
            self.settings.local_chromium_path,
            playwright_factory=self._playwright_factory,
        ) as page:
            # networkidle: fonts, images and scripts referenced by the HTML have settled
            await page.set_content(html, wait_until="networkidle")
            pdf = await page.pdf(**pdf_kwargs(resolved))

        logger.info(f"Generated PDF: {len(pdf)} bytes")
        return bytes(pdf)

    async def render_image(self, html: str, options: ImageOptions | None = None) -> bytes:
        """
        Render HTML to an image.

        The capture region is the caller's clip, else the measured content
        size, else the full page.

        Args:
            html: Complete HTML document
            options: Caller image options, defaulted per field

        Returns:
            PNG, JPEG or WebP bytes
        """
        resolved = resolve_image_options(options)

        async with browser_session(
            self.settings.local_chromium_path,
            viewport=resolved.viewport,
            playwright_factory=self._playwright_factory,
        ) as page:
            await page.set_content(html, wait_until="load")
            await self._wait_for_idle(page)

            content_size = parse_content_size(await page.evaluate(CONTENT_SIZE_SCRIPT))
            screenshot = build_screenshot_options(resolved, content_size)

            if "clip" in screenshot:
                logger.info("Capturing clip", extra={"clip": screenshot["clip"]})
            else:
                logger.info("Capturing full page")

            image = await self._capture(page, screenshot)

        logger.info(f"Generated {resolved.type} image: {len(image)} bytes")
        return image

    async def _wait_for_idle(self, page: Page) -> None:
        """Give late images and fonts a bounded window to finish loading."""
        timeout = self.settings.image_idle_timeout_ms
        if timeout <= 0:
            return
        try:
            await page.wait_for_load_state("networkidle", timeout=timeout)
        except PlaywrightTimeoutError:
            logger.debug(f"Network not idle after {timeout}ms, capturing anyway")

    async def _capture(self, page: Page, screenshot: dict[str, Any]) -> bytes:
        if screenshot["type"] != "webp":
            return bytes(await page.screenshot(**screenshot_kwargs(screenshot)))

        # The engine only encodes PNG/JPEG; capture lossless and re-encode
        capture = {k: v for k, v in screenshot.items() if k != "quality"}
        capture["type"] = "png"
        png = await page.screenshot(**screenshot_kwargs(capture))
        return transcode_to_webp(png, screenshot["quality"])
