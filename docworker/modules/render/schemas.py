"""
Render module schemas - caller options and their resolved forms.

Caller-facing models keep camelCase wire names (the producer is a Node
service); every field is optional and defaulted by ``options.py``.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


PageFormat = Literal["A4", "Letter", "Legal"]
ImageType = Literal["png", "jpeg", "webp"]

# Image types that accept a compression quality
LOSSY_IMAGE_TYPES = frozenset({"jpeg", "webp"})


class WireModel(BaseModel):
    """Base for models exchanged with the job producer."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# CALLER OPTIONS
# =============================================================================

class Margin(WireModel):
    """Page margins in CSS units."""
    top: str | None = None
    right: str | None = None
    bottom: str | None = None
    left: str | None = None


class PdfOptions(WireModel):
    """PDF export options."""
    format: PageFormat | None = Field(None, description="Page size")
    landscape: bool | None = None
    print_background: bool | None = Field(None, description="Include CSS backgrounds")
    margin: Margin | None = None
    tagged: bool | None = Field(None, description="Emit an accessible (tagged) PDF")
    prefer_css_page_size: bool | None = Field(
        None,
        alias="preferCSSPageSize",
        description="Honor @page size from CSS over format",
    )


class Clip(WireModel):
    """Rectangular capture region in CSS pixels."""
    x: float
    y: float
    width: float
    height: float


class ImageOptions(WireModel):
    """Screenshot options."""
    type: ImageType | None = None
    quality: int | None = Field(None, ge=0, le=100, description="Only used for jpeg/webp")
    full_page: bool | None = Field(None, description="Fallback when content size is unknown")
    device_scale_factor: float | None = None
    has_touch: bool | None = None
    is_landscape: bool | None = None
    is_mobile: bool | None = None
    width: int | None = None
    height: int | None = None
    clip: Clip | None = Field(None, description="Explicit region; overrides auto-fit")
    omit_background: bool | None = None


# =============================================================================
# RESOLVED OPTIONS
# =============================================================================

class ResolvedMargin(BaseModel):
    top: str
    right: str
    bottom: str
    left: str


class ResolvedPdfOptions(BaseModel):
    """PDF options with every field populated."""
    model_config = ConfigDict(frozen=True)

    format: PageFormat
    landscape: bool
    print_background: bool
    margin: ResolvedMargin
    tagged: bool
    prefer_css_page_size: bool


class Viewport(BaseModel):
    """Emulated device for image rendering; fixed before the page loads."""
    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    device_scale_factor: float
    has_touch: bool
    is_landscape: bool
    is_mobile: bool


class ResolvedImageOptions(BaseModel):
    """Image options with every field populated except the optional clip."""
    model_config = ConfigDict(frozen=True)

    type: ImageType
    quality: int
    full_page: bool
    omit_background: bool
    viewport: Viewport
    clip: Clip | None = None

    @property
    def is_lossy(self) -> bool:
        return self.type in LOSSY_IMAGE_TYPES
