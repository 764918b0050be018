"""Tests for render option resolution."""

from docworker.modules.render.options import resolve_image_options, resolve_pdf_options
from docworker.modules.render.schemas import Clip, ImageOptions, Margin, PdfOptions


class TestPdfOptions:
    """Defaults apply field by field."""

    def test_none_yields_all_defaults(self) -> None:
        resolved = resolve_pdf_options(None)

        assert resolved.format == "A4"
        assert resolved.landscape is False
        assert resolved.print_background is True
        assert resolved.tagged is True
        assert resolved.prefer_css_page_size is True
        assert resolved.margin.model_dump() == {
            "top": "10mm", "right": "10mm", "bottom": "10mm", "left": "10mm",
        }

    def test_single_field_keeps_other_defaults(self) -> None:
        resolved = resolve_pdf_options(PdfOptions(landscape=True))

        assert resolved.landscape is True
        assert resolved.format == "A4"
        assert resolved.print_background is True
        assert resolved.tagged is True

    def test_supplied_values_pass_through(self) -> None:
        options = PdfOptions(
            format="Letter",
            print_background=False,
            tagged=False,
            prefer_css_page_size=False,
            margin=Margin(top="0", right="5mm", bottom="1cm", left="20px"),
        )
        resolved = resolve_pdf_options(options)

        assert resolved.format == "Letter"
        assert resolved.print_background is False
        assert resolved.tagged is False
        assert resolved.prefer_css_page_size is False
        assert resolved.margin.model_dump() == {
            "top": "0", "right": "5mm", "bottom": "1cm", "left": "20px",
        }

    def test_partial_margin_defaults_missing_sides(self) -> None:
        resolved = resolve_pdf_options(PdfOptions(margin=Margin(top="25mm")))

        assert resolved.margin.top == "25mm"
        assert resolved.margin.left == "10mm"
        assert resolved.margin.bottom == "10mm"

    def test_caller_object_not_mutated(self) -> None:
        options = PdfOptions(landscape=True)
        resolve_pdf_options(options)

        assert options.format is None
        assert options.margin is None

    def test_wire_names_accepted(self) -> None:
        options = PdfOptions.model_validate({"printBackground": False, "preferCSSPageSize": False})
        resolved = resolve_pdf_options(options)

        assert resolved.print_background is False
        assert resolved.prefer_css_page_size is False


class TestImageOptions:
    def test_none_yields_all_defaults(self) -> None:
        resolved = resolve_image_options(None)

        assert resolved.type == "png"
        assert resolved.quality == 80
        assert resolved.full_page is True
        assert resolved.omit_background is False
        assert resolved.clip is None
        assert resolved.viewport.model_dump() == {
            "width": 320,
            "height": 1080,
            "device_scale_factor": 1,
            "has_touch": False,
            "is_landscape": False,
            "is_mobile": True,
        }

    def test_viewport_fields_default_independently(self) -> None:
        resolved = resolve_image_options(ImageOptions(width=1200, is_mobile=False))

        assert resolved.viewport.width == 1200
        assert resolved.viewport.is_mobile is False
        assert resolved.viewport.height == 1080
        assert resolved.viewport.device_scale_factor == 1

    def test_clip_passed_through(self) -> None:
        clip = Clip(x=10, y=20, width=300, height=150)
        resolved = resolve_image_options(ImageOptions(clip=clip))

        assert resolved.clip == clip

    def test_falsy_values_are_not_replaced(self) -> None:
        resolved = resolve_image_options(ImageOptions(full_page=False, quality=0))

        assert resolved.full_page is False
        assert resolved.quality == 0

    def test_wire_names_accepted(self) -> None:
        options = ImageOptions.model_validate(
            {"type": "jpeg", "deviceScaleFactor": 2, "hasTouch": True, "omitBackground": True}
        )
        resolved = resolve_image_options(options)

        assert resolved.type == "jpeg"
        assert resolved.viewport.device_scale_factor == 2
        assert resolved.viewport.has_touch is True
        assert resolved.omit_background is True
