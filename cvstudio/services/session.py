"""Editing session owning the CV document and the UI state."""

from typing import Awaitable, Optional, Union
from cvstudio.config import get_settings
from cvstudio.exceptions import PhotoDecodeError
from cvstudio.models.cv_models import CvDocument
from cvstudio.models.theme_models import ThemeDefinition, ThemeKey
from cvstudio.models.ui_models import Language, UiState
from cvstudio.models.visual_models import VisualNode
from cvstudio.services import theme_registry
from cvstudio.services.field_store import FieldStore
from cvstudio.services.html_generator import HtmlGenerator
from cvstudio.services.image_exporter import ImageExporter
from cvstudio.services.photo_loader import PhotoLoader
from cvstudio.services.preview_renderer import render
from cvstudio.utils.logging_utils import LOG


class Session:
    """
    One user's editing session.

    The session is the only writer of the document/UI-state pair. Every
    change re-renders the preview, and exports read that rendered tree
    rather than the field store.
    """

    def __init__(
        self,
        ui_state: Optional[UiState] = None,
        store: Optional[FieldStore] = None,
        html_generator: Optional[HtmlGenerator] = None,
        exporter: Optional[ImageExporter] = None,
        photo_loader: Optional[PhotoLoader] = None,
    ):
        """
        Initialize the session.

        Args:
            ui_state: Initial UI state. Defaults to the configured theme and language.
            store: Field store. Defaults to an empty document.
            html_generator: HTML generator for the live preview.
            exporter: Image exporter.
            photo_loader: Photo loader.
        """
        if ui_state is None:
            settings = get_settings()
            ui_state = UiState(
                selectedThemeKey=ThemeKey(settings.cv_default_theme),
                language=Language(settings.cv_default_language),
            )
        self.ui_state = ui_state
        self.store = store or FieldStore()
        self.html_generator = html_generator or HtmlGenerator()
        self.exporter = exporter or ImageExporter(html_generator=self.html_generator)
        self.photo_loader = photo_loader or PhotoLoader()
        self.preview: VisualNode = self._render()
        self.store.subscribe(self._on_document_change)

    @property
    def document(self) -> CvDocument:
        return self.store.document

    @property
    def theme(self) -> ThemeDefinition:
        return theme_registry.resolve(self.ui_state.selectedThemeKey)

    def _render(self) -> VisualNode:
        return render(self.store.document, self.theme, self.ui_state.language)

    def _on_document_change(self, document: CvDocument) -> None:
        self.preview = self._render()

    def _set_ui(self, **changes) -> None:
        self.ui_state = self.ui_state.model_copy(update=changes)
        self.preview = self._render()

    def select_theme(self, key: Union[ThemeKey, str]) -> None:
        """Switch the CV theme. Unknown keys raise ValueError."""
        self._set_ui(selectedThemeKey=ThemeKey(key))

    def select_language(self, language: Union[Language, str]) -> None:
        """Switch label language. Unknown codes raise ValueError."""
        self._set_ui(language=Language(language))

    def toggle_dark_mode(self) -> None:
        """Flip the editing form's dark mode; the preview is unaffected."""
        self.ui_state = self.ui_state.model_copy(update={"isDarkMode": not self.ui_state.isDarkMode})

    def preview_html(self) -> str:
        """HTML of the current preview for on-screen display."""
        return self.html_generator.generate_html(self.preview, self.theme)

    async def upload_photo(self, data: bytes, mime_type: str) -> bool:
        """
        Load an uploaded photo into the document.

        Args:
            data: Raw file content
            mime_type: MIME type reported for the upload

        Returns:
            bool: True if the photo was set, False if it could not be read
        """
        try:
            photo = await self.photo_loader.load_photo(data, mime_type)
        except PhotoDecodeError as e:
            LOG.warning("Photo upload rejected: %s", e)
            return False
        self.store.set_photo(photo)
        return True

    def remove_photo(self) -> None:
        self.store.clear_photo()

    def export_png(self) -> Awaitable[bytes]:
        """
        Export the preview as it is rendered when the request is made.

        The tree and theme are taken when this is called, before the
        returned awaitable is scheduled.

        Returns:
            Awaitable[bytes]: Resolves to the PNG image

        Raises:
            ExportError: When awaited, if the capture fails; the session stays usable
        """
        return self.exporter.export_to_image(self.preview, self.theme)
