"""Pydantic models for CV data structures."""

from enum import Enum
from typing import Optional, Tuple
from pydantic import BaseModel, Field


class EducationEntry(BaseModel):
    """Education entry model."""

    school: str = ""
    degree: str = ""
    year: str = ""

    class Config:
        frozen = True


class ExperienceEntry(BaseModel):
    """Experience entry model."""

    company: str = ""
    position: str = ""
    year: str = ""
    description: str = ""

    class Config:
        frozen = True


class ReferenceEntry(BaseModel):
    """Reference entry model."""

    name: str = ""
    position: str = ""
    contact: str = ""

    class Config:
        frozen = True


class Collection(str, Enum):
    """Ordered list fields of a CV document."""

    SKILLS = "skills"
    EDUCATION = "education"
    EXPERIENCE = "experience"
    REFERENCES = "references"


SCALAR_FIELDS = ("fullName", "job", "email", "phone", "profile")

SKILL_FIELD = "skill"

# Record type created by add() for each collection; skills are plain strings
ENTRY_TYPES = {
    Collection.EDUCATION: EducationEntry,
    Collection.EXPERIENCE: ExperienceEntry,
    Collection.REFERENCES: ReferenceEntry,
}


class CvDocument(BaseModel):
    """Complete CV data model.

    Snapshots are immutable; edits go through the field store which
    produces a new document for every change.
    """

    fullName: str = Field(default="", alias="fullName")
    job: str = ""
    email: str = ""
    phone: str = ""
    profile: str = ""
    skills: Tuple[str, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    references: Tuple[ReferenceEntry, ...] = ()
    photo: Optional[str] = None

    class Config:
        """Pydantic config."""

        populate_by_name = True
        frozen = True

    def entries(self, collection: Collection) -> tuple:
        """Return the entries of ``collection`` in display order."""
        return getattr(self, Collection(collection).value)

    @property
    def has_photo(self) -> bool:
        return bool(self.photo)
