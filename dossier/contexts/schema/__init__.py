"""
Schema Context

Responsibilities:
- Primitive validators (ISO dates, URLs, identifier strings)
- Resume and normalized job description documents
- Compile request composition (resume + job description reference + preferences)
- Aggregated, field-path-keyed validation errors

Owns: The parse-to-typed-value boundary for every inbound document
Never: Hashes requests, creates jobs, or reads configuration
"""

from dossier.contexts.schema.exceptions import (
    FieldIssue,
    UnsupportedEnumValue,
    ValidationError,
)
from dossier.contexts.schema.job_description import (
    NormalizedJobDescription,
    parse_normalized_jd,
)
from dossier.contexts.schema.request import (
    CompilePreferences,
    CompileRequest,
    JdTextReference,
    JdUrlReference,
    ScoringModel,
    TemplateName,
    validate_compile_request,
)
from dossier.contexts.schema.resume import Resume, parse_resume

__all__ = [
    # Errors
    "FieldIssue",
    "ValidationError",
    "UnsupportedEnumValue",
    # Documents
    "Resume",
    "parse_resume",
    "NormalizedJobDescription",
    "parse_normalized_jd",
    # Compile request
    "CompilePreferences",
    "CompileRequest",
    "JdTextReference",
    "JdUrlReference",
    "ScoringModel",
    "TemplateName",
    "validate_compile_request",
]
