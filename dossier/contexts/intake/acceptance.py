"""
Inbound boundary for compile requests.

raw input -> validate -> hash -> queued job descriptor

Holds no state between calls; size limits and transport concerns belong to the
caller.
"""

from dataclasses import dataclass
from typing import Any, Optional

from dossier.contexts.intake.logger import log_request_accepted, log_request_rejected
from dossier.contexts.jobs.descriptor import JobDescriptor, create_job
from dossier.contexts.jobs.hashing import compute_input_hash
from dossier.contexts.schema.exceptions import ValidationError
from dossier.contexts.schema.request import CompileRequest, validate_compile_request


@dataclass
class AcceptanceResult:
    """
    Outcome of accept_compile_request().

    Attributes:
        ok: True if the request was accepted
        job: Queued descriptor (accepted requests only)
        request: Validated request with defaults applied (accepted requests only)
        error: Aggregated validation failures (rejected requests only)
    """

    ok: bool
    job: Optional[JobDescriptor] = None
    request: Optional[CompileRequest] = None
    error: Optional[ValidationError] = None

    def to_dict(self) -> dict:
        """Wire form: {"ok": true, "job": {...}} or {"ok": false, "error": {...}}."""
        if self.ok:
            return {"ok": True, "job": self.job.to_wire()}
        return {"ok": False, "error": self.error.to_dict()}


def accept_compile_request(raw: Any) -> AcceptanceResult:
    """
    Validate a raw compile request and emit a queued job descriptor.

    Never raises for invalid input; rejection is reported in the result.

    Args:
        raw: Untyped request (mapping, or JSON str/bytes)

    Returns:
        AcceptanceResult with either job + request, or error

    Example:
        >>> result = accept_compile_request(payload)
        >>> if result.ok:
        ...     dispatch(result.job)
    """
    try:
        request = validate_compile_request(raw)
    except ValidationError as exc:
        log_request_rejected(exc)
        return AcceptanceResult(ok=False, error=exc)

    job = create_job(compute_input_hash(request))
    log_request_accepted(job, jd_type=request.jd.type)
    return AcceptanceResult(ok=True, job=job, request=request)
