"""Field store holding the CV form state.

Every edit is a command applied by :func:`reduce` to the current
document, producing a new immutable snapshot. :class:`FieldStore` keeps
the latest snapshot and notifies subscribers after each change.
"""

from typing import Callable, List, Optional, Union
from pydantic import BaseModel
from cvstudio.exceptions import FieldError
from cvstudio.models.cv_models import (
    ENTRY_TYPES,
    SCALAR_FIELDS,
    SKILL_FIELD,
    Collection,
    CvDocument,
)


class SetScalar(BaseModel):
    """Replace one of the free-text scalar fields."""

    field: str
    value: str


class AddEntry(BaseModel):
    """Append an entry to a collection; ``value`` is the text of a new skill."""

    collection: Collection
    value: str = ""


class UpdateEntry(BaseModel):
    """Replace one field of the entry at ``index``."""

    collection: Collection
    index: int
    field: Optional[str] = None
    value: str


class RemoveEntry(BaseModel):
    """Remove the entry at ``index``, shifting later entries down."""

    collection: Collection
    index: int


class SetPhoto(BaseModel):
    """Set or clear the inline photo payload."""

    photo: Optional[str] = None


Command = Union[SetScalar, AddEntry, UpdateEntry, RemoveEntry, SetPhoto]


def _check_index(entries: tuple, collection: Collection, index: int) -> None:
    if not 0 <= index < len(entries):
        raise FieldError(
            f"No {collection.value} entry at position {index} "
            f"(collection has {len(entries)})"
        )


def _updated_entry(collection: Collection, entry, field: Optional[str], value: str):
    if collection == Collection.SKILLS:
        if field not in (None, SKILL_FIELD):
            raise FieldError(f"Unsupported skill field: {field}")
        return value

    entry_type = ENTRY_TYPES[collection]
    if field not in entry_type.model_fields:
        raise FieldError(
            f"Unsupported {collection.value} field: {field}. "
            f"Supported: {', '.join(entry_type.model_fields)}"
        )
    return entry.model_copy(update={field: value})


def reduce(document: CvDocument, command: Command) -> CvDocument:
    """
    Apply a command to a document.

    Args:
        document: Current document snapshot
        command: Edit to apply

    Returns:
        CvDocument: New snapshot; ``document`` is left untouched

    Raises:
        FieldError: If the command names an unknown field or position
    """
    if isinstance(command, SetScalar):
        if command.field not in SCALAR_FIELDS:
            raise FieldError(
                f"Unsupported field: {command.field}. Supported: {', '.join(SCALAR_FIELDS)}"
            )
        return document.model_copy(update={command.field: command.value})

    if isinstance(command, SetPhoto):
        return document.model_copy(update={"photo": command.photo or None})

    collection = command.collection
    entries = document.entries(collection)

    if isinstance(command, AddEntry):
        if collection == Collection.SKILLS:
            new_entry = command.value
        elif command.value:
            raise FieldError(
                f"{collection.value} entries are added empty; set fields with UpdateEntry"
            )
        else:
            new_entry = ENTRY_TYPES[collection]()
        entries = entries + (new_entry,)

    elif isinstance(command, UpdateEntry):
        _check_index(entries, collection, command.index)
        new_entry = _updated_entry(
            collection, entries[command.index], command.field, command.value
        )
        entries = entries[:command.index] + (new_entry,) + entries[command.index + 1:]

    elif isinstance(command, RemoveEntry):
        _check_index(entries, collection, command.index)
        entries = entries[:command.index] + entries[command.index + 1:]

    else:
        raise TypeError(f"Unknown command: {command!r}")

    return document.model_copy(update={collection.value: entries})


Listener = Callable[[CvDocument], None]


class FieldStore:
    """Holds the current CV document and applies edits to it."""

    def __init__(self, document: Optional[CvDocument] = None):
        """
        Initialize the field store.

        Args:
            document: Initial document. Defaults to an empty CV.
        """
        self._document = document if document is not None else CvDocument()
        self._listeners: List[Listener] = []

    @property
    def document(self) -> CvDocument:
        return self._document

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener`` with the new document after every change."""
        self._listeners.append(listener)

    def dispatch(self, command: Command) -> CvDocument:
        """
        Apply a command and notify subscribers.

        Args:
            command: Edit to apply

        Returns:
            CvDocument: The new current document
        """
        self._document = reduce(self._document, command)
        for listener in self._listeners:
            listener(self._document)
        return self._document

    def set_scalar(self, field: str, value: str) -> None:
        self.dispatch(SetScalar(field=field, value=value))

    def add(self, collection: Union[Collection, str]) -> int:
        """Append an empty entry and return its position."""
        collection = Collection(collection)
        self.dispatch(AddEntry(collection=collection))
        return len(self._document.entries(collection)) - 1

    def update(
        self,
        collection: Union[Collection, str],
        index: int,
        field: Optional[str],
        value: str,
    ) -> None:
        self.dispatch(
            UpdateEntry(collection=Collection(collection), index=index, field=field, value=value)
        )

    def remove(self, collection: Union[Collection, str], index: int) -> None:
        self.dispatch(RemoveEntry(collection=Collection(collection), index=index))

    def add_skill(self, text: str) -> Optional[int]:
        """
        Append a skill typed into the "new skill" box.

        Args:
            text: Skill text; surrounding whitespace is dropped

        Returns:
            Optional[int]: Position of the new skill, or None for blank input
        """
        text = text.strip()
        if not text:
            return None
        self.dispatch(AddEntry(collection=Collection.SKILLS, value=text))
        return len(self._document.skills) - 1

    def set_photo(self, photo: str) -> None:
        self.dispatch(SetPhoto(photo=photo))

    def clear_photo(self) -> None:
        self.dispatch(SetPhoto(photo=None))
