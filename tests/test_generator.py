"""Tests for HTML generation and image export."""

import struct
import fitz
import pytest
from unittest.mock import patch
from cvstudio.exceptions import CaptureError, ExportError
from cvstudio.models.cv_models import CvDocument, ExperienceEntry
from cvstudio.models.visual_models import VisualNode
from cvstudio.services import theme_registry
from cvstudio.services.html_generator import HtmlGenerator
from cvstudio.services.image_exporter import ExportState, ImageExporter
from cvstudio.services.preview_renderer import render


def png_size(png_bytes):
    """Width and height from the PNG IHDR chunk."""
    return struct.unpack(">II", png_bytes[16:24])


def corner_pixel(png_bytes):
    return fitz.Pixmap(png_bytes).pixel(4, 4)


@pytest.fixture
def document():
    return CvDocument(
        fullName="Ada Lovelace",
        job="Mathematician",
        profile="Line one\nLine two <b>not bold</b>",
        skills=["Analysis"],
        experience=[ExperienceEntry(company="Engine Co.", description="Note G")],
    )


def test_generate_html(document):
    """Test HTML generation for the preview."""
    theme = theme_registry.resolve("modern")
    html = HtmlGenerator().generate_html(render(document, theme, "en"), theme)

    assert "<!DOCTYPE html>" in html
    assert "Ada Lovelace" in html
    assert "Profile" in html
    assert "@page" not in html


def test_generate_html_turkish(document):
    """Test HTML generation with Turkish labels."""
    theme = theme_registry.resolve("modern")
    html = HtmlGenerator().generate_html(render(document, theme, "tr"), theme)

    assert "Profil" in html
    assert "Deneyim" in html
    assert "Ada Lovelace" in html


def test_generate_html_escapes_text(document):
    """Test field text is escaped rather than interpreted."""
    theme = theme_registry.resolve("minimal")
    html = HtmlGenerator().generate_html(render(document, theme, "en"), theme)

    assert "&lt;b&gt;not bold&lt;/b&gt;" in html
    assert "<b>not bold</b>" not in html
    assert "Line one\nLine two" in html


def test_generate_html_for_export(document):
    """Test export HTML pins the page to A4 with the theme background."""
    theme = theme_registry.resolve("professional")
    html = HtmlGenerator().generate_html(render(document, theme, "en"), theme, for_export=True)

    assert "@page" in html
    assert "210mm 297mm" in html
    assert "background: #2C5530" in html


@pytest.mark.asyncio
async def test_export_png_size_and_background(document):
    """Test export produces an A4 PNG at twice CSS pixel density."""
    theme = theme_registry.resolve("modern")
    exporter = ImageExporter(pixel_ratio=2)

    png_bytes = await exporter.export_to_image(render(document, theme, "en"), theme)

    assert png_bytes.startswith(b"\x89PNG")
    width, height = png_size(png_bytes)
    # 210mm x 297mm at 96 px/in is 793.7 x 1122.5 CSS pixels
    assert abs(width - 1587) <= 2
    assert abs(height - 2245) <= 2
    assert corner_pixel(png_bytes) == (0x1E, 0x25, 0x32)
    assert exporter.state == ExportState.IDLE


@pytest.mark.asyncio
async def test_export_without_rendered_preview():
    """Test exporting something that is not a rendered document."""
    exporter = ImageExporter()
    theme = theme_registry.resolve("modern")

    with pytest.raises(ExportError, match="not rendered"):
        await exporter.export_to_image(None, theme)
    with pytest.raises(ExportError):
        await exporter.export_to_image(VisualNode(kind="section"), theme)
    assert exporter.state == ExportState.IDLE


@pytest.mark.asyncio
async def test_export_retries_transient_failure(document):
    """Test one retry after a transient capture failure."""
    theme = theme_registry.resolve("modern")
    exporter = ImageExporter(retries=1)

    with patch.object(
        ImageExporter, "capture", side_effect=[CaptureError("busy"), b"\x89PNG fake"]
    ) as capture:
        png_bytes = await exporter.export_to_image(render(document, theme, "en"), theme)

    assert png_bytes == b"\x89PNG fake"
    assert capture.call_count == 2
    assert exporter.state == ExportState.IDLE


@pytest.mark.asyncio
async def test_export_failure_returns_to_idle(document):
    """Test a failing capture raises ExportError and leaves the exporter idle."""
    theme = theme_registry.resolve("modern")
    exporter = ImageExporter(retries=1)

    with patch.object(ImageExporter, "capture", side_effect=CaptureError("boom")) as capture:
        with pytest.raises(ExportError, match="Failed to export CV image"):
            await exporter.export_to_image(render(document, theme, "en"), theme)

    assert capture.call_count == 2
    assert exporter.state == ExportState.IDLE


def test_capture_wraps_layout_errors(document):
    """Test layout failures surface as CaptureError."""
    theme = theme_registry.resolve("modern")
    exporter = ImageExporter()

    with patch("cvstudio.services.image_exporter.WeasyHTML", side_effect=RuntimeError("no fonts")):
        with pytest.raises(CaptureError, match="Layout failed"):
            exporter.capture(render(document, theme, "en"), theme)


@pytest.mark.asyncio
async def test_export_missing_template_is_export_error(document, tmp_path):
    """Test a template failure is reported as ExportError, not a raw Jinja2 error."""
    theme = theme_registry.resolve("modern")
    exporter = ImageExporter(html_generator=HtmlGenerator(template_dir=tmp_path), retries=0)
    tree = render(document, theme, "en")

    with pytest.raises(CaptureError, match="Layout failed"):
        exporter.capture(tree, theme)
    with pytest.raises(ExportError, match="Failed to export CV image"):
        await exporter.export_to_image(tree, theme)
    assert exporter.state == ExportState.IDLE


@pytest.mark.asyncio
async def test_export_state_while_capturing(document):
    """Test the exporter reports CAPTURING during a capture and IDLE after it."""
    theme = theme_registry.resolve("modern")
    exporter = ImageExporter(retries=0)
    seen = []

    def fake_capture(rendered_node, theme):
        seen.append(exporter.state)
        return b"png"

    with patch.object(ImageExporter, "capture", side_effect=fake_capture):
        assert exporter.state == ExportState.IDLE
        assert await exporter.export_to_image(render(document, theme, "en"), theme) == b"png"

    assert seen == [ExportState.CAPTURING]
    assert exporter.state == ExportState.IDLE


@pytest.mark.asyncio
async def test_export_state_while_failing_capture(document):
    """Test a failing capture is also observed in CAPTURING before returning to IDLE."""
    theme = theme_registry.resolve("modern")
    exporter = ImageExporter(retries=1)
    seen = []

    def failing_capture(rendered_node, theme):
        seen.append(exporter.state)
        raise CaptureError("boom")

    with patch.object(ImageExporter, "capture", side_effect=failing_capture):
        with pytest.raises(ExportError):
            await exporter.export_to_image(render(document, theme, "en"), theme)

    assert seen == [ExportState.CAPTURING, ExportState.CAPTURING]
    assert exporter.state == ExportState.IDLE
