"""Service for exporting the rendered preview to a PNG image."""

import asyncio
from enum import Enum
from typing import Optional
import fitz
from weasyprint import HTML as WeasyHTML
from cvstudio.config import get_settings
from cvstudio.exceptions import CaptureError, ExportError
from cvstudio.models.theme_models import ThemeDefinition
from cvstudio.models.visual_models import VisualNode
from cvstudio.services.html_generator import HtmlGenerator
from cvstudio.utils.logging_utils import LOG

EXPORT_FILENAME = "cv.png"
EXPORT_MIME_TYPE = "image/png"

# PDF user space is 72 units per inch, CSS pixels are 96 per inch
CSS_PIXELS_PER_POINT = 96 / 72


class ExportState(str, Enum):
    """Lifecycle of an export request."""

    IDLE = "idle"
    CAPTURING = "capturing"


class ImageExporter:
    """Service to rasterize a rendered CV preview at A4 size."""

    def __init__(
        self,
        html_generator: HtmlGenerator = None,
        pixel_ratio: Optional[float] = None,
        retries: Optional[int] = None,
    ):
        """
        Initialize the image exporter.

        Args:
            html_generator: HTML generator instance. If None, creates a new one.
            pixel_ratio: Device pixel ratio of the export. Defaults to settings.
            retries: Extra attempts after a transient capture failure. Defaults to settings.
        """
        settings = get_settings()
        if html_generator is None:
            html_generator = HtmlGenerator()
        self.html_generator = html_generator
        self.pixel_ratio = pixel_ratio if pixel_ratio is not None else settings.cv_export_pixel_ratio
        self.retries = retries if retries is not None else settings.cv_export_retries
        self.state = ExportState.IDLE
        self._lock = asyncio.Lock()

    async def export_to_image(self, rendered_node: VisualNode, theme: ThemeDefinition) -> bytes:
        """
        Export a rendered preview to PNG.

        Requests are serialized; a second request waits for the one in flight.

        Args:
            rendered_node: Root node produced by the preview renderer
            theme: Theme the node was rendered with; its primary color fills the page

        Returns:
            bytes: PNG image of one A4 page

        Raises:
            ExportError: If the preview is not rendered or capture keeps failing
        """
        if not isinstance(rendered_node, VisualNode) or rendered_node.kind != "document":
            LOG.error("Export requested without a rendered preview: %r", rendered_node)
            raise ExportError("Nothing to export: the CV preview is not rendered")

        async with self._lock:
            self.state = ExportState.CAPTURING
            try:
                return await self._capture_with_retry(rendered_node, theme)
            finally:
                self.state = ExportState.IDLE

    async def _capture_with_retry(self, rendered_node: VisualNode, theme: ThemeDefinition) -> bytes:
        attempts = 1 + max(self.retries, 0)
        for attempt in range(1, attempts + 1):
            try:
                png_bytes = await asyncio.to_thread(self.capture, rendered_node, theme)
                LOG.info("Exported CV preview (%s theme, %d bytes)", theme.key.value, len(png_bytes))
                return png_bytes
            except CaptureError as e:
                LOG.warning("Capture attempt %d/%d failed: %s", attempt, attempts, e)
                if attempt == attempts:
                    LOG.error("Export failed after %d attempt(s)", attempts, exc_info=e)
                    raise ExportError(f"Failed to export CV image: {e}") from e

    def capture(self, rendered_node: VisualNode, theme: ThemeDefinition) -> bytes:
        """
        Rasterize the preview synchronously.

        The page is laid out by WeasyPrint at 210mm x 297mm with the theme's
        primary color as page background, then the single page is rendered
        to pixels by PyMuPDF at ``pixel_ratio`` times CSS pixel density.

        Args:
            rendered_node: Root node produced by the preview renderer
            theme: Active theme

        Returns:
            bytes: PNG image

        Raises:
            CaptureError: If layout or rasterization fails
        """
        try:
            html_content = self.html_generator.generate_html(rendered_node, theme, for_export=True)
            pdf_bytes = WeasyHTML(string=html_content).write_pdf()
        except Exception as e:
            raise CaptureError(f"Layout failed: {e}") from e

        zoom = self.pixel_ratio * CSS_PIXELS_PER_POINT
        try:
            with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
                if doc.page_count == 0:
                    raise CaptureError("Layout produced no pages")
                pixmap = doc[0].get_pixmap(matrix=fitz.Matrix(zoom, zoom), alpha=False)
                return pixmap.tobytes("png")
        except CaptureError:
            raise
        except Exception as e:
            raise CaptureError(f"Rasterization failed: {e}") from e
