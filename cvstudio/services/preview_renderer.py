"""Projection of a CV document into a visual document tree."""

from typing import Dict, List, Tuple, Union
from cvstudio.models.cv_models import CvDocument
from cvstudio.models.theme_models import PhotoShape, ThemeDefinition
from cvstudio.models.ui_models import Language
from cvstudio.models.visual_models import VisualNode
from cvstudio.utils.labels import get_labels


PHOTO_SIZE = "192px"
DIVIDER_WIDTH = "2px"
DIVIDER_COLOR = "#9ca3af"
LEFT_COLUMN_WIDTH = "250px"

PRESERVE_LINES = {"white-space": "pre-wrap", "overflow-wrap": "break-word"}

PHOTO_RADIUS = {
    PhotoShape.ROUNDED_FULL: "50%",
    PhotoShape.ROUNDED_RECTANGLE: "8px",
}


def _text(role: str, text: str, **style: str) -> VisualNode:
    return VisualNode(kind="text", role=role, text=text, style=style)


def _heading(theme: ThemeDefinition, role: str, label: str) -> VisualNode:
    return VisualNode(
        kind="heading",
        role=f"{role}-heading",
        text=label,
        style={"color": theme.colorTokens.secondary},
    )


def _section(theme: ThemeDefinition, role: str, label: str, items: List[VisualNode]) -> VisualNode:
    return VisualNode(
        kind="section",
        role=role,
        children=(_heading(theme, role, label), *items),
    )


def _photo(document: CvDocument, theme: ThemeDefinition, labels: Dict[str, str]) -> VisualNode:
    image = VisualNode(
        kind="image",
        role="photo-image",
        text=labels["photo_alt"],
        src=document.photo,
        style={
            "width": PHOTO_SIZE,
            "height": PHOTO_SIZE,
            "object-fit": "cover",
            "border-radius": PHOTO_RADIUS[theme.photoShape],
        },
    )
    return VisualNode(kind="section", role="photo", children=(image,))


def _header(document: CvDocument, theme: ThemeDefinition) -> VisualNode:
    return VisualNode(
        kind="header",
        role="identity",
        children=(
            VisualNode(
                kind="title",
                role="fullName",
                text=document.fullName,
                style={"color": theme.tones.title},
            ),
            VisualNode(
                kind="subtitle",
                role="job",
                text=document.job,
                style={"color": theme.colorTokens.secondary},
            ),
        ),
    )


def _contact(document: CvDocument, theme: ThemeDefinition, labels: Dict[str, str]) -> VisualNode:
    tone = theme.tones.contact
    return _section(
        theme,
        "contact",
        labels["contact"],
        [_text("email", document.email, color=tone), _text("phone", document.phone, color=tone)],
    )


def _profile(document: CvDocument, theme: ThemeDefinition, labels: Dict[str, str]) -> VisualNode:
    return _section(
        theme,
        "profile",
        labels["profile"],
        [_text("profile-text", document.profile, color=theme.tones.body, **PRESERVE_LINES)],
    )


def _skills(document: CvDocument, theme: ThemeDefinition, labels: Dict[str, str]) -> VisualNode:
    chips = [
        VisualNode(
            kind="chip",
            role="skill",
            text=skill,
            style={"background": theme.colorTokens.accent, "color": theme.tones.chip_text},
        )
        for skill in document.skills
    ]
    chip_row = VisualNode(kind="chips", role="skill-list", children=tuple(chips))
    return _section(theme, "skills", labels["skills"], [chip_row])


def _education(document: CvDocument, theme: ThemeDefinition, labels: Dict[str, str]) -> VisualNode:
    entries = [
        VisualNode(
            kind="entry",
            role="education-entry",
            children=(
                _text("school", edu.school, color=theme.tones.heading),
                _text("degree", edu.degree, color=theme.tones.detail),
                _text("year", edu.year, color=theme.tones.muted),
            ),
        )
        for edu in document.education
    ]
    return _section(theme, "education", labels["education"], entries)


def _experience(document: CvDocument, theme: ThemeDefinition, labels: Dict[str, str]) -> VisualNode:
    entries = [
        VisualNode(
            kind="entry",
            role="experience-entry",
            children=(
                _text("company", exp.company, color=theme.tones.heading),
                _text("position", exp.position, color=theme.tones.detail),
                _text("year", exp.year, color=theme.tones.muted),
                _text("description", exp.description, color=theme.tones.detail, **PRESERVE_LINES),
            ),
        )
        for exp in document.experience
    ]
    return _section(theme, "experience", labels["experience"], entries)


def _references(document: CvDocument, theme: ThemeDefinition, labels: Dict[str, str]) -> VisualNode:
    tone = theme.colorTokens.secondary
    entries = [
        VisualNode(
            kind="entry",
            role="reference-entry",
            children=(
                _text("name", ref.name, color=tone),
                _text("position", ref.position, color=tone),
                _text("contact", ref.contact, color=tone),
            ),
        )
        for ref in document.references
    ]
    return _section(theme, "references", labels["references"], entries)


def _column(role: str, sections: List[VisualNode], **style: str) -> VisualNode:
    return VisualNode(kind="column", role=role, children=tuple(sections), style=style)


def render(
    document: CvDocument,
    theme: ThemeDefinition,
    language: Union[Language, str],
) -> VisualNode:
    """
    Render a CV document into a visual tree.

    The result depends only on the arguments, so identical inputs always
    produce equal trees.

    Args:
        document: CV document snapshot
        theme: Theme providing layout and color tokens
        language: Language of the section labels

    Returns:
        VisualNode: Root ``document`` node of the preview
    """
    labels = get_labels(language)
    photo: Tuple[VisualNode, ...] = ()
    if document.has_photo:
        photo = (_photo(document, theme, labels),)

    if theme.is_two_column:
        left = _column(
            "left-column",
            [
                *photo,
                _contact(document, theme, labels),
                _skills(document, theme, labels),
                _education(document, theme, labels),
            ],
            width=LEFT_COLUMN_WIDTH,
        )
        divider = VisualNode(
            kind="divider",
            role="divider",
            style={"width": DIVIDER_WIDTH, "background": DIVIDER_COLOR},
        )
        right = _column(
            "right-column",
            [
                _header(document, theme),
                _profile(document, theme, labels),
                _experience(document, theme, labels),
                _references(document, theme, labels),
            ],
        )
        body: Tuple[VisualNode, ...] = (left, divider, right)
    else:
        body = (
            _column(
                "main-column",
                [
                    _header(document, theme),
                    *photo,
                    _contact(document, theme, labels),
                    _profile(document, theme, labels),
                    _skills(document, theme, labels),
                    _education(document, theme, labels),
                    _experience(document, theme, labels),
                    _references(document, theme, labels),
                ],
            ),
        )

    return VisualNode(
        kind="document",
        role=theme.key.value,
        style={
            "background": theme.colorTokens.primary,
            "color": theme.colorTokens.text,
        },
        children=body,
    )
