"""
Option resolution - merge caller options with fixed defaults.

Each field falls back to its default independently; the caller's object is
never modified.
"""

from .schemas import (
    ImageOptions,
    Margin,
    PdfOptions,
    ResolvedImageOptions,
    ResolvedMargin,
    ResolvedPdfOptions,
    Viewport,
)

DEFAULT_MARGIN = "10mm"

PDF_DEFAULTS = {
    "format": "A4",
    "landscape": False,
    "print_background": True,
    "tagged": True,
    "prefer_css_page_size": True,
}

IMAGE_DEFAULTS = {
    "type": "png",
    "quality": 80,
    "full_page": True,
    "omit_background": False,
}

VIEWPORT_DEFAULTS = {
    "width": 320,
    "height": 1080,
    "device_scale_factor": 1,
    "has_touch": False,
    "is_landscape": False,
    "is_mobile": True,
}


def _pick(value, default):
    return default if value is None else value


def _resolve_margin(margin: Margin | None) -> ResolvedMargin:
    margin = margin or Margin()
    return ResolvedMargin(
        top=_pick(margin.top, DEFAULT_MARGIN),
        right=_pick(margin.right, DEFAULT_MARGIN),
        bottom=_pick(margin.bottom, DEFAULT_MARGIN),
        left=_pick(margin.left, DEFAULT_MARGIN),
    )


def resolve_pdf_options(options: PdfOptions | None = None) -> ResolvedPdfOptions:
    """Return a fully populated PDF option set."""
    options = options or PdfOptions()
    values = {
        name: _pick(getattr(options, name), default)
        for name, default in PDF_DEFAULTS.items()
    }
    return ResolvedPdfOptions(margin=_resolve_margin(options.margin), **values)


def resolve_image_options(options: ImageOptions | None = None) -> ResolvedImageOptions:
    """Return a fully populated image option set (clip stays optional)."""
    options = options or ImageOptions()
    values = {
        name: _pick(getattr(options, name), default)
        for name, default in IMAGE_DEFAULTS.items()
    }
    viewport = Viewport(**{
        name: _pick(getattr(options, name), default)
        for name, default in VIEWPORT_DEFAULTS.items()
    })
    return ResolvedImageOptions(viewport=viewport, clip=options.clip, **values)
