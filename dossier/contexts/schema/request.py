"""
Compile request schema.

A compile request bundles a resume, a job description reference and compile
preferences. The job description is either inline text or a URL to be fetched
later by another stage; this module never fetches anything.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field, StringConstraints

from dossier.contexts.schema.base import DocumentModel, Loc, validate_document
from dossier.contexts.schema.job_description import JD_TEXT_MIN_LENGTH
from dossier.contexts.schema.primitives import NonEmptyStr, NotNull, UrlString
from dossier.contexts.schema.resume import Resume


class ScoringModel(str, Enum):
    # An alignment score against the job description, not a universal ATS score
    KEYWORD_ALIGNMENT_V1 = "keyword_alignment_v1"


class TemplateName(str, Enum):
    ONE_PAGE_V1 = "one_page_v1"


class CompilePreferences(DocumentModel):
    """
    Compile preferences. Unknown scoring models or templates are rejected,
    never replaced with the default.
    """

    target_role: Annotated[Optional[NonEmptyStr], NotNull] = None
    scoring_model: ScoringModel = ScoringModel.KEYWORD_ALIGNMENT_V1
    template: TemplateName = TemplateName.ONE_PAGE_V1


class JdUrlReference(DocumentModel):
    type: Literal["url"]
    url: UrlString


class JdTextReference(DocumentModel):
    type: Literal["text"]
    text: Annotated[str, StringConstraints(min_length=JD_TEXT_MIN_LENGTH)]


JdReference = Annotated[Union[JdUrlReference, JdTextReference], Field(discriminator="type")]

JD_REFERENCE_TAGS = {"url", "text"}


class CompileRequest(DocumentModel):
    resume: Resume
    jd: JdReference
    # Absent prefs are replaced by the whole default object
    prefs: CompilePreferences = Field(default_factory=CompilePreferences)


def _drop_jd_tag(loc: Loc) -> Loc:
    """pydantic reports ("jd", "text", "text"); callers want "jd.text"."""
    if len(loc) > 2 and loc[0] == "jd" and loc[1] in JD_REFERENCE_TAGS:
        return (loc[0],) + tuple(loc[2:])
    return loc


def validate_compile_request(raw: Any) -> CompileRequest:
    """
    Validate raw input into a CompileRequest.

    Validation is binary: either a fully typed request with defaults applied is
    returned, or every failure is raised at once.

    Args:
        raw: Mapping, or a JSON document as str/bytes

    Returns:
        Validated CompileRequest

    Raises:
        ValidationError: With every failure keyed by field path
        UnsupportedEnumValue: If any closed enum value was rejected

    Example:
        >>> request = validate_compile_request({
        ...     "resume": resume_dict,
        ...     "jd": {"type": "url", "url": "https://jobs.example.com/123"},
        ... })
        >>> request.prefs.template
        <TemplateName.ONE_PAGE_V1: 'one_page_v1'>
    """
    return validate_document(CompileRequest, raw, document="compile request", rewrite_loc=_drop_jd_tag)
