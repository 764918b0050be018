"""Render module - HTML to PDF/image rendering using Playwright."""

from .clip import ContentSize, build_screenshot_options, select_capture_region
from .options import resolve_image_options, resolve_pdf_options
from .schemas import Clip, ImageOptions, Margin, PdfOptions
from .service import RenderService

__all__ = [
    "Clip",
    "ContentSize",
    "ImageOptions",
    "Margin",
    "PdfOptions",
    "RenderService",
    "build_screenshot_options",
    "resolve_image_options",
    "resolve_pdf_options",
    "select_capture_region",
]
