"""
Resume document schema.

A resume is a versioned, fully structured document (no free-form blobs).
Bullets carry stable ids so later pipeline stages can track rewrites, and
optional evidence claims used to reject unsupported statements downstream.
"""

from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, Field, StringConstraints
from pydantic_core import PydanticCustomError

from dossier.contexts.schema.base import DocumentModel, validate_document
from dossier.contexts.schema.primitives import (
    DocumentVersion,
    EmailString,
    IsoDate,
    NonEmptyStr,
    NotNull,
    UrlString,
)

class ClaimType(str, Enum):
    METRIC = "metric"
    TECH = "tech"
    SCOPE = "scope"
    OUTCOME = "outcome"


class Link(DocumentModel):
    label: NonEmptyStr
    url: UrlString


class Basics(DocumentModel):
    full_name: NonEmptyStr
    email: EmailString
    phone: Annotated[str, StringConstraints(min_length=6)]
    location: NonEmptyStr
    links: list[Link] = Field(default_factory=list)


class Claim(DocumentModel):
    """Typed evidence tag backing a bullet (e.g. a metric or a technology)."""

    type: ClaimType
    value: NonEmptyStr


class Bullet(DocumentModel):
    """
    A single resume bullet.

    Attributes:
        id: Stable identifier, unique within the parent's bullet list. Assigned
            once and never regenerated, so rewrites can be mapped back.
        text: Bullet text (at least 3 characters)
        claims: Evidence tags; empty until a later stage fills them
    """

    id: NonEmptyStr
    text: Annotated[str, StringConstraints(min_length=3)]
    claims: list[Claim] = Field(default_factory=list)


def check_unique_bullet_ids(bullets: list[Bullet]) -> list[Bullet]:
    seen = set()
    for bullet in bullets:
        if bullet.id in seen:
            raise PydanticCustomError(
                "duplicate_bullet_id",
                "Duplicate bullet id '{bullet_id}'",
                {"bullet_id": bullet.id},
            )
        seen.add(bullet.id)
    return bullets


# Non-empty, with ids unique within the list
BulletList = Annotated[list[Bullet], Field(min_length=1), AfterValidator(check_unique_bullet_ids)]


class Experience(DocumentModel):
    """
    A position held.

    An absent end_date means the position is current, not that the end is unknown.
    """

    id: NonEmptyStr
    company: NonEmptyStr
    role: NonEmptyStr
    location: Annotated[Optional[NonEmptyStr], NotNull] = None
    start_date: IsoDate
    end_date: Annotated[Optional[IsoDate], NotNull] = None
    bullets: BulletList

    @property
    def is_current(self) -> bool:
        return self.end_date is None


class Project(DocumentModel):
    id: NonEmptyStr
    name: NonEmptyStr
    tech: list[NonEmptyStr] = Field(default_factory=list)
    bullets: BulletList
    links: list[Link] = Field(default_factory=list)


class Education(DocumentModel):
    school: NonEmptyStr
    degree: NonEmptyStr
    start_date: Annotated[Optional[IsoDate], NotNull] = None
    end_date: Annotated[Optional[IsoDate], NotNull] = None


class Resume(DocumentModel):
    """
    Versioned resume document.

    Missing collections (skills, experience, projects, education) default to
    empty lists; every experience and project entry must have at least one bullet.
    """

    version: DocumentVersion
    basics: Basics
    headline: Annotated[Optional[NonEmptyStr], NotNull] = None
    summary: Annotated[Optional[NonEmptyStr], NotNull] = None
    skills: list[NonEmptyStr] = Field(default_factory=list)
    experience: list[Experience] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)

    def iter_bullets(self):
        """Yield (parent_id, bullet) for every experience and project bullet."""
        for entry in self.experience:
            for bullet in entry.bullets:
                yield entry.id, bullet
        for project in self.projects:
            for bullet in project.bullets:
                yield project.id, bullet


def parse_resume(raw: Any) -> Resume:
    """
    Validate a raw resume document.

    Args:
        raw: Mapping, or a JSON document as str/bytes

    Returns:
        Validated Resume

    Raises:
        ValidationError: With every failure keyed by field path
    """
    return validate_document(Resume, raw, document="resume")
