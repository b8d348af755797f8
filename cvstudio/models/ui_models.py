"""Presentation state of the editing view."""

from enum import Enum
from pydantic import BaseModel
from cvstudio.models.theme_models import ThemeKey


class Language(str, Enum):
    """Supported languages."""

    TR = "tr"
    EN = "en"


class UiState(BaseModel):
    """UI state model, independent of the CV document."""

    isDarkMode: bool = False
    selectedThemeKey: ThemeKey = ThemeKey.MODERN
    language: Language = Language.TR

    class Config:
        frozen = True
