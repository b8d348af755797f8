"""Helper functions for Jinja2 templates."""

from typing import Mapping
from jinja2 import Environment


def css_style(style: Mapping[str, str]) -> str:
    """
    Convert a style mapping to an inline CSS declaration list.

    Example: {"color": "#fff", "width": "2px"} -> "color: #fff; width: 2px"

    Args:
        style: CSS property to value mapping

    Returns:
        str: Declarations in insertion order
    """
    if not style:
        return ""
    return "; ".join(f"{name}: {value}" for name, value in style.items())


def css_class(kind: str, role: str = None) -> str:
    """
    Build the class attribute for a visual node.

    Args:
        kind: Node kind
        role: Node role, if any

    Returns:
        str: Space separated class names
    """
    classes = [f"cv-{kind}"]
    if role:
        classes.append(f"cv-{role}")
    return " ".join(classes)


def register_jinja_filters(env: Environment) -> None:
    """
    Register helper functions as Jinja2 filters.

    Args:
        env: Jinja2 Environment instance
    """
    env.filters['css_style'] = css_style
    env.filters['css_class'] = css_class
