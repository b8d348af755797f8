"""Streamlit interface for CV Studio."""

import asyncio
import streamlit as st
import streamlit.components.v1 as components
from cvstudio.config import get_settings
from cvstudio.exceptions import ExportError
from cvstudio.models.cv_models import Collection
from cvstudio.models.ui_models import Language
from cvstudio.services import theme_registry
from cvstudio.services.image_exporter import EXPORT_FILENAME, EXPORT_MIME_TYPE
from cvstudio.services.session import Session
from cvstudio.utils.labels import get_labels
from cvstudio.utils.logging_utils import LOG, setup_logging

# Page configuration
st.set_page_config(
    page_title="CV Studio",
    page_icon="📄",
    layout="wide",
    initial_sidebar_state="collapsed"
)

PREVIEW_HEIGHT = 1160

# Form fields of each collection entry, in display order
ENTRY_FIELDS = {
    Collection.EDUCATION: [("school", False), ("degree", False), ("year", False)],
    Collection.EXPERIENCE: [
        ("company", False),
        ("position", False),
        ("year", False),
        ("description", True),
    ],
    Collection.REFERENCES: [("name", False), ("position", False), ("contact", False)],
}

ENTRY_TITLES = {
    Collection.EDUCATION: ("education", "add_education"),
    Collection.EXPERIENCE: ("experience", "add_experience"),
    Collection.REFERENCES: ("reference", "add_reference"),
}

SECTION_TITLES = {
    Collection.EDUCATION: "education",
    Collection.EXPERIENCE: "experience",
    Collection.REFERENCES: "references",
}

DARK_CSS = """
<style>
    .stApp { background-color: #111827; color: #ffffff; }
    .stApp label, .stApp h1, .stApp h2, .stApp h3, .stApp h4, .stApp p { color: #ffffff; }
    .stApp input, .stApp textarea { background-color: #374151; color: #ffffff; border-color: #4b5563; }
</style>
"""

LIGHT_CSS = """
<style>
    .stApp { background-color: #f3f4f6; color: #111827; }
</style>
"""


def get_session() -> Session:
    """Create the session on first run and return it on every rerun."""
    if "cv_session" not in st.session_state:
        setup_logging(get_settings().cv_log_level)
        st.session_state.cv_session = Session()
        st.session_state.form_revision = 0
        LOG.info("Started CV editing session")
    return st.session_state.cv_session


def _bump_revision() -> None:
    # Entry widgets are keyed by position; removal shifts positions so
    # the keys must change to drop stale widget values.
    st.session_state.form_revision += 1


def _on_scalar_change(field: str) -> None:
    get_session().store.set_scalar(field, st.session_state[f"scalar_{field}"])


def _on_entry_change(collection: Collection, index: int, field: str, key: str) -> None:
    get_session().store.update(collection, index, field, st.session_state[key])


def _on_entry_add(collection: Collection) -> None:
    get_session().store.add(collection)


def _on_entry_remove(collection: Collection, index: int) -> None:
    get_session().store.remove(collection, index)
    _bump_revision()


def _on_skill_add() -> None:
    get_session().store.add_skill(st.session_state.new_skill)
    st.session_state.new_skill = ""


def _on_photo_change() -> None:
    session = get_session()
    uploaded = st.session_state.photo_upload
    st.session_state.photo_failed = False
    if uploaded is None:
        session.remove_photo()
        return
    if not asyncio.run(session.upload_photo(uploaded.getvalue(), uploaded.type)):
        st.session_state.photo_failed = True


def _on_export() -> None:
    session = get_session()
    preview = session.preview
    st.session_state.export_failed = False
    try:
        png_bytes = asyncio.run(session.export_png())
    except ExportError as e:
        LOG.error("Export from the form failed: %s", e)
        st.session_state.export_failed = True
        return
    st.session_state.export_result = (preview, png_bytes)


def render_toolbar(session: Session, labels: dict) -> None:
    """Theme selector, language selector and dark mode toggle."""
    theme_col, language_col, mode_col = st.columns([3, 2, 1])

    with theme_col:
        keys = [key for key, _ in theme_registry.available_themes()]
        selected = st.radio(
            labels["theme"],
            keys,
            index=keys.index(session.ui_state.selectedThemeKey),
            format_func=lambda key: theme_registry.resolve(key).displayName,
            horizontal=True,
        )
        if selected != session.ui_state.selectedThemeKey:
            session.select_theme(selected)

    with language_col:
        languages = list(Language)
        language = st.radio(
            labels["language"],
            languages,
            index=languages.index(session.ui_state.language),
            format_func=lambda lang: lang.value.upper(),
            horizontal=True,
        )
        if language != session.ui_state.language:
            session.select_language(language)
            st.rerun()

    with mode_col:
        dark = st.toggle(labels["dark_mode"], value=session.ui_state.isDarkMode)
        if dark != session.ui_state.isDarkMode:
            session.toggle_dark_mode()

    st.markdown(DARK_CSS if session.ui_state.isDarkMode else LIGHT_CSS, unsafe_allow_html=True)


def render_scalars(session: Session, labels: dict) -> None:
    document = session.document
    for field, label_key in [
        ("fullName", "full_name"),
        ("job", "job_title"),
        ("email", "email"),
        ("phone", "phone"),
    ]:
        st.text_input(
            labels[label_key],
            value=getattr(document, field),
            key=f"scalar_{field}",
            on_change=_on_scalar_change,
            args=(field,),
        )

    st.text_area(
        labels["profile"],
        value=document.profile,
        height=120,
        key="scalar_profile",
        on_change=_on_scalar_change,
        args=("profile",),
    )


def render_skills(session: Session, labels: dict) -> None:
    st.subheader(labels["skills"])
    input_col, button_col = st.columns([4, 1])
    with input_col:
        st.text_input(
            labels["skills"],
            placeholder=labels["new_skill"],
            key="new_skill",
            label_visibility="collapsed",
        )
    with button_col:
        st.button(labels["add"], on_click=_on_skill_add, use_container_width=True)

    revision = st.session_state.form_revision
    for index, skill in enumerate(session.document.skills):
        skill_col, remove_col = st.columns([5, 1])
        skill_col.markdown(f"`{skill}`")
        remove_col.button(
            "×",
            key=f"skills_{index}_remove_{revision}",
            on_click=_on_entry_remove,
            args=(Collection.SKILLS, index),
        )


def render_collection(session: Session, labels: dict, collection: Collection) -> None:
    """Editors for one list of records with add and remove buttons."""
    title_key, add_key = ENTRY_TITLES[collection]
    st.subheader(labels[SECTION_TITLES[collection]])
    revision = st.session_state.form_revision

    for index, entry in enumerate(session.document.entries(collection)):
        with st.container(border=True):
            head_col, remove_col = st.columns([5, 1])
            head_col.markdown(f"**{labels[title_key]} {index + 1}**")
            remove_col.button(
                "×",
                key=f"{collection.value}_{index}_remove_{revision}",
                on_click=_on_entry_remove,
                args=(collection, index),
            )
            for field, multiline in ENTRY_FIELDS[collection]:
                key = f"{collection.value}_{index}_{field}_{revision}"
                widget = st.text_area if multiline else st.text_input
                widget(
                    labels[field],
                    value=getattr(entry, field),
                    placeholder=labels[field],
                    key=key,
                    label_visibility="collapsed",
                    on_change=_on_entry_change,
                    args=(collection, index, field, key),
                )

    st.button(labels[add_key], key=f"{collection.value}_add", on_click=_on_entry_add, args=(collection,))


def render_photo(session: Session, labels: dict) -> None:
    st.subheader(labels["photo"])
    st.file_uploader(
        labels["photo"],
        type=["png", "jpg", "jpeg", "gif", "webp"],
        key="photo_upload",
        on_change=_on_photo_change,
        label_visibility="collapsed",
    )
    if st.session_state.get("photo_failed"):
        st.error(labels["photo_failed"])


def render_form(session: Session, labels: dict) -> None:
    st.header(labels["cv_information"])
    render_scalars(session, labels)
    render_skills(session, labels)
    for collection in (Collection.EDUCATION, Collection.EXPERIENCE, Collection.REFERENCES):
        render_collection(session, labels, collection)
    render_photo(session, labels)


def render_preview(session: Session, labels: dict) -> None:
    st.header(labels["preview"])
    components.html(session.preview_html(), height=PREVIEW_HEIGHT, scrolling=True)

    st.button(
        f"🖼️ {labels['prepare_download']}",
        on_click=_on_export,
        use_container_width=True,
        type="primary",
    )
    if st.session_state.get("export_failed"):
        st.error(f"❌ {labels['export_failed']}")

    result = st.session_state.get("export_result")
    # Only offer the image while it still matches the preview on screen
    if result is not None and result[0] is session.preview:
        st.download_button(
            label=f"📥 {labels['download']}",
            data=result[1],
            file_name=EXPORT_FILENAME,
            mime=EXPORT_MIME_TYPE,
            use_container_width=True,
            key="cv_download",
        )


def main():
    """Main Streamlit app."""
    session = get_session()
    labels = get_labels(session.ui_state.language)

    st.markdown('<h1 style="margin-bottom: 0">📄 CV Studio</h1>', unsafe_allow_html=True)
    render_toolbar(session, labels)

    form_col, preview_col = st.columns(2)
    with form_col:
        render_form(session, labels)
    with preview_col:
        render_preview(session, labels)


if __name__ == "__main__":
    main()
