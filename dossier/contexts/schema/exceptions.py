"""Validation exceptions for the schema context."""

from dataclasses import dataclass
from typing import Iterable

# Key used for failures that are not attached to a field (e.g. malformed JSON)
ROOT_PATH = "__root__"

# pydantic error types produced by closed enums and by unknown union tags
ENUM_ERROR_TYPES = {"enum", "union_tag_invalid"}


@dataclass(frozen=True)
class FieldIssue:
    """
    A single validation failure.

    Attributes:
        path: Dotted field path (e.g. "resume.experience.0.bullets")
        message: Human-readable message
        code: Machine-readable error type (e.g. "missing", "enum", "iso_date")
    """

    path: str
    message: str
    code: str

    @property
    def is_unsupported_enum(self) -> bool:
        return self.code in ENUM_ERROR_TYPES


class ValidationError(Exception):
    """
    Raised when a document fails validation.

    Carries every failure found, never just the first one, so callers can
    render a complete report in one round trip.

    Attributes:
        issues: All failures, in the order they were found
        document: Name of the document being validated (e.g. "compile request")
    """

    def __init__(self, issues: Iterable[FieldIssue], document: str = "document"):
        self.issues = list(issues)
        self.document = document

        count = len(self.issues)
        noun = "error" if count == 1 else "errors"
        parts = [f"Invalid {document}: {count} validation {noun}"]
        for issue in self.issues:
            parts.append(f"  {issue.path}: {issue.message}")

        super().__init__("\n".join(parts))

    @classmethod
    def from_issues(cls, issues: Iterable[FieldIssue], document: str = "document") -> "ValidationError":
        """Build the most specific error class for a set of issues."""
        issues = list(issues)
        if any(issue.is_unsupported_enum for issue in issues):
            return UnsupportedEnumValue(issues, document)
        return ValidationError(issues, document)

    @property
    def field_errors(self) -> dict[str, list[str]]:
        """Messages grouped by field path, in order of first occurrence."""
        grouped: dict[str, list[str]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.path, []).append(issue.message)
        return grouped

    def to_dict(self) -> dict:
        return {"fieldErrors": self.field_errors}


class UnsupportedEnumValue(ValidationError):
    """
    Validation failure that includes at least one value outside a closed enum.

    Closed enums are never coerced to a default. The error still carries every
    other issue found in the same document.
    """

    @property
    def enum_paths(self) -> list[str]:
        return [issue.path for issue in self.issues if issue.is_unsupported_enum]
