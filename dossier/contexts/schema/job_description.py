"""
Normalized job description schema.

A normalized job description is cleaned plain text plus source metadata.
Raw HTML or document blobs are never accepted here; cleaning happens upstream.
"""

import re
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, StringConstraints
from pydantic_core import PydanticCustomError

from dossier.contexts.schema.base import DocumentModel, validate_document
from dossier.contexts.schema.primitives import DocumentVersion, NonEmptyStr, NotNull, UtcTimestamp

# Shorter texts produce meaningless downstream scoring
JD_TEXT_MIN_LENGTH = 20

HTML_TAG_PATTERN = re.compile(
    r"</?\s*(html|head|body|div|span|p|br|hr|ul|ol|li|a|b|i|em|strong|h[1-6]|table|tr|td|th|script|style)"
    r"(\s[^<>]*)?/?>",
    re.IGNORECASE,
)


class JdSourceType(str, Enum):
    URL = "url"
    TEXT = "text"


def check_plain_text(value: str) -> str:
    if HTML_TAG_PATTERN.search(value):
        raise PydanticCustomError("plain_text", "Expected normalized plain text, found HTML markup")
    return value


JdText = Annotated[
    str, StringConstraints(min_length=JD_TEXT_MIN_LENGTH), AfterValidator(check_plain_text)
]


class JobDescriptionSource(DocumentModel):
    """Where the text came from: a URL, or "inline" for pasted text."""

    source_type: JdSourceType
    source_value: NonEmptyStr
    fetched_at: Annotated[Optional[UtcTimestamp], NotNull] = None


class NormalizedJobDescription(DocumentModel):
    version: DocumentVersion
    source: JobDescriptionSource
    title: Annotated[Optional[NonEmptyStr], NotNull] = None
    company: Annotated[Optional[NonEmptyStr], NotNull] = None
    location: Annotated[Optional[NonEmptyStr], NotNull] = None
    text: JdText


def parse_normalized_jd(raw: Any) -> NormalizedJobDescription:
    """
    Validate a raw normalized job description document.

    Raises:
        ValidationError: With every failure keyed by field path
    """
    return validate_document(NormalizedJobDescription, raw, document="job description")
