"""
Shared pydantic plumbing for schema models.

Wire documents use camelCase keys; models expose snake_case attributes.
pydantic errors are converted to FieldIssue here and never reach callers.
"""

from typing import Any, Callable, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from dossier.contexts.schema.exceptions import ROOT_PATH, FieldIssue, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)
Loc = tuple


class SchemaModel(BaseModel):
    """Base for every wire model. Unknown keys are dropped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
    )

    def to_wire(self) -> dict:
        """JSON-ready dict with camelCase keys and absent optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class DocumentModel(SchemaModel):
    """Validated inbound documents are immutable."""

    model_config = ConfigDict(frozen=True)


def format_loc(loc: Loc) -> str:
    """Join a pydantic error location into a dotted field path."""
    if not loc:
        return ROOT_PATH
    return ".".join(str(part) for part in loc)


def issues_from_pydantic(
    exc: PydanticValidationError, rewrite_loc: Optional[Callable[[Loc], Loc]] = None
) -> list[FieldIssue]:
    """
    Convert a pydantic ValidationError into FieldIssue objects.

    Args:
        exc: Error raised by model validation
        rewrite_loc: Optional hook to adjust locations (e.g. drop union tags)

    Returns:
        One FieldIssue per pydantic error, in pydantic's order
    """
    issues = []
    for error in exc.errors(include_url=False):
        loc = tuple(error["loc"])
        if rewrite_loc is not None:
            loc = rewrite_loc(loc)
        issues.append(FieldIssue(path=format_loc(loc), message=error["msg"], code=error["type"]))
    return issues


def validate_document(
    model: Type[ModelT],
    raw: Any,
    document: str,
    rewrite_loc: Optional[Callable[[Loc], Loc]] = None,
) -> ModelT:
    """
    Validate raw input into a typed model.

    Args:
        model: Model class to validate against
        raw: Mapping, or a JSON document as str/bytes
        document: Human-readable document name for error messages
        rewrite_loc: Optional hook to adjust error locations

    Returns:
        Validated model instance

    Raises:
        ValidationError: With every failure found (UnsupportedEnumValue if a
            closed enum was violated)
    """
    try:
        if isinstance(raw, (str, bytes, bytearray)):
            return model.model_validate_json(raw)
        return model.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError.from_issues(issues_from_pydantic(exc, rewrite_loc), document) from exc
