"""Tests for the theme registry."""

import pytest
from cvstudio.models.theme_models import LayoutToken, PhotoShape, ThemeKey
from cvstudio.services import theme_registry


def test_three_builtin_themes():
    """Test the registry holds exactly the built-in themes."""
    keys = [key for key, _ in theme_registry.available_themes()]

    assert keys == [ThemeKey.MODERN, ThemeKey.MINIMAL, ThemeKey.PROFESSIONAL]


def test_resolve_by_string_and_enum():
    """Test themes resolve from either form of key."""
    assert theme_registry.resolve("modern") is theme_registry.resolve(ThemeKey.MODERN)


def test_theme_tokens():
    """Test layout and color tokens of each theme."""
    modern = theme_registry.resolve("modern")
    minimal = theme_registry.resolve("minimal")
    professional = theme_registry.resolve("professional")

    assert modern.layoutToken == LayoutToken.TWO_COLUMN
    assert modern.colorTokens.primary == "#1e2532"
    assert minimal.layoutToken == LayoutToken.ONE_COLUMN
    assert minimal.colorTokens.primary == "#ffffff"
    assert professional.layoutToken == LayoutToken.TWO_COLUMN
    assert professional.colorTokens.primary == "#2C5530"

    assert minimal.photoShape == PhotoShape.ROUNDED_RECTANGLE
    assert modern.photoShape == PhotoShape.ROUNDED_FULL


def test_color_tokens_are_distinct():
    """Test every theme carries its own colors."""
    colors = {theme.colorTokens for _, theme in theme_registry.available_themes()}

    assert len(colors) == 3


def test_resolve_unknown_theme():
    """Test unknown keys are rejected."""
    with pytest.raises(ValueError):
        theme_registry.resolve("neon")


def test_registry_is_read_only():
    """Test themes cannot be registered at runtime."""
    with pytest.raises(TypeError):
        theme_registry.THEMES["neon"] = theme_registry.resolve("modern")

    theme = theme_registry.resolve("modern")
    with pytest.raises(Exception):
        theme.displayName = "Neon"
