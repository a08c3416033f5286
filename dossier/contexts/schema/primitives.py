"""
Primitive validators reused across documents.

IsoDate checks format only. Calendar validity is deliberately not checked,
so "2024-99-99" is accepted.

Optional wire fields may be omitted but never sent as null; annotate them
with NotNull.
"""

import re
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, AnyUrl, BeforeValidator, EmailStr, StringConstraints, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# UTC only, "Z" suffix, optional fractional seconds
UTC_TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(\.[0-9]+)?Z")

_URL_ADAPTER = TypeAdapter(AnyUrl)
_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def reject_null(value: Any) -> Any:
    if value is None:
        raise PydanticCustomError("null_not_allowed", "Field may be omitted but not null")
    return value


NotNull = BeforeValidator(reject_null)


def check_iso_date(value: str) -> str:
    """Accept strings shaped exactly like YYYY-MM-DD."""
    if not ISO_DATE_PATTERN.fullmatch(value):
        raise PydanticCustomError("iso_date", "Expected YYYY-MM-DD")
    return value


def check_utc_timestamp(value: str) -> str:
    """Accept ISO 8601 UTC timestamps such as 2025-11-13T18:45:40Z."""
    if not UTC_TIMESTAMP_PATTERN.fullmatch(value):
        raise PydanticCustomError("utc_timestamp", "Expected ISO 8601 UTC timestamp (YYYY-MM-DDTHH:MM:SSZ)")
    return value


def check_url(value: str) -> str:
    """
    Accept syntactically valid absolute URLs.

    The caller's string is returned unchanged; pydantic's parser is only used
    to decide validity, so no normalisation leaks into hashing.
    """
    if value != value.strip():
        raise PydanticCustomError("url", "Invalid url")
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        raise PydanticCustomError("url", "Invalid url") from None
    return value


def check_email(value: str) -> str:
    """
    Accept a bare email address, returned unchanged.

    The "Name <addr>" display form is rejected rather than reduced to the address.
    """
    if value != value.strip() or "<" in value or ">" in value:
        raise PydanticCustomError("email", "Invalid email")
    try:
        _EMAIL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        raise PydanticCustomError("email", "Invalid email") from None
    return value


NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

IsoDate = Annotated[str, AfterValidator(check_iso_date)]

UrlString = Annotated[str, AfterValidator(check_url)]

EmailString = Annotated[str, AfterValidator(check_email)]

UtcTimestamp = Annotated[str, AfterValidator(check_utc_timestamp)]


def check_document_version(value: Any) -> Any:
    """Only the integer 1; true, 1.0 and "1" are not versions."""
    if type(value) is not int or value != 1:
        raise PydanticCustomError("literal_error", "Input should be 1")
    return value


DocumentVersion = Annotated[Literal[1], BeforeValidator(check_document_version)]
