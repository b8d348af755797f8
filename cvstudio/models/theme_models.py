"""Pydantic models for CV preview themes."""

from enum import Enum
from pydantic import BaseModel


class ThemeKey(str, Enum):
    """Built-in CV themes."""

    MODERN = "modern"
    MINIMAL = "minimal"
    PROFESSIONAL = "professional"


class LayoutToken(str, Enum):
    """Column arrangement of the preview."""

    ONE_COLUMN = "one-column"
    TWO_COLUMN = "two-column"


class PhotoShape(str, Enum):
    """Corner rounding applied to the profile photo."""

    ROUNDED_FULL = "rounded-full"
    ROUNDED_RECTANGLE = "rounded-rectangle"


class ThemeColors(BaseModel):
    """Color tokens of a theme."""

    primary: str
    secondary: str
    text: str
    accent: str

    class Config:
        frozen = True


class ThemeTones(BaseModel):
    """Text tones for the name, entry titles, body copy and secondary details."""

    title: str
    heading: str
    body: str
    detail: str
    muted: str
    contact: str
    chip_text: str

    class Config:
        frozen = True


class ThemeDefinition(BaseModel):
    """Immutable bundle of layout and color tokens."""

    key: ThemeKey
    displayName: str
    layoutToken: LayoutToken
    colorTokens: ThemeColors
    tones: ThemeTones
    photoShape: PhotoShape

    class Config:
        frozen = True

    @property
    def is_two_column(self) -> bool:
        return self.layoutToken == LayoutToken.TWO_COLUMN
