"""Fixed registry of CV preview themes."""

from types import MappingProxyType
from typing import List, Tuple, Union
from cvstudio.models.theme_models import (
    LayoutToken,
    PhotoShape,
    ThemeColors,
    ThemeDefinition,
    ThemeKey,
    ThemeTones,
)


_THEMES = {
    ThemeKey.MODERN: ThemeDefinition(
        key=ThemeKey.MODERN,
        displayName="Koyu",
        layoutToken=LayoutToken.TWO_COLUMN,
        colorTokens=ThemeColors(
            primary="#1e2532",
            secondary="#60a5fa",
            text="#ffffff",
            accent="rgba(30, 58, 138, 0.5)",
        ),
        tones=ThemeTones(
            title="#ffffff",
            heading="#d1d5db",
            body="#d1d5db",
            detail="#9ca3af",
            muted="#6b7280",
            contact="#d1d5db",
            chip_text="#d1d5db",
        ),
        photoShape=PhotoShape.ROUNDED_FULL,
    ),
    ThemeKey.MINIMAL: ThemeDefinition(
        key=ThemeKey.MINIMAL,
        displayName="Beyaz",
        layoutToken=LayoutToken.ONE_COLUMN,
        colorTokens=ThemeColors(
            primary="#ffffff",
            secondary="#374151",
            text="#000000",
            accent="#000000",
        ),
        tones=ThemeTones(
            title="#111827",
            heading="#111827",
            body="#374151",
            detail="#374151",
            muted="#4b5563",
            contact="#000000",
            chip_text="#ffffff",
        ),
        photoShape=PhotoShape.ROUNDED_RECTANGLE,
    ),
    ThemeKey.PROFESSIONAL: ThemeDefinition(
        key=ThemeKey.PROFESSIONAL,
        displayName="Yeşil",
        layoutToken=LayoutToken.TWO_COLUMN,
        colorTokens=ThemeColors(
            primary="#2C5530",
            secondary="#34d399",
            text="#ffffff",
            accent="rgba(6, 78, 59, 0.5)",
        ),
        tones=ThemeTones(
            title="#ffffff",
            heading="#d1d5db",
            body="#d1d5db",
            detail="#9ca3af",
            muted="#6b7280",
            contact="#d1d5db",
            chip_text="#d1d5db",
        ),
        photoShape=PhotoShape.ROUNDED_FULL,
    ),
}

THEMES = MappingProxyType(_THEMES)


def resolve(key: Union[ThemeKey, str]) -> ThemeDefinition:
    """
    Look up a theme by key.

    Args:
        key: Theme key ('modern', 'minimal' or 'professional')

    Returns:
        ThemeDefinition: The theme's token bundle

    Raises:
        ValueError: If the key is not one of the built-in themes
    """
    return THEMES[ThemeKey(key)]


def available_themes() -> List[Tuple[ThemeKey, ThemeDefinition]]:
    """List the built-in themes in selector order."""
    return list(THEMES.items())
