"""
Job descriptor model.

A descriptor tracks one compile job from creation to a terminal state:

    queued -> processing -> done | failed

This module creates descriptors in the queued state. Every later transition
belongs to the execution collaborator, which must keep the invariants checked
by JobDescriptor (re-validate with parse_job_descriptor after mutating).
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Optional
from uuid import uuid4

from pydantic import AwareDatetime, Field, StringConstraints, model_validator
from pydantic_core import PydanticCustomError

from dossier.contexts.schema.base import SchemaModel, validate_document
from dossier.contexts.schema.primitives import NonEmptyStr, NotNull
from dossier.utils.timestamp import utc_now


class JobStatus(str, Enum):
    QUEUED = "queued"
    PROCESSING = "processing"
    DONE = "done"
    FAILED = "failed"


TERMINAL_STATUSES = frozenset({JobStatus.DONE, JobStatus.FAILED})

ALLOWED_TRANSITIONS = {
    JobStatus.QUEUED: frozenset({JobStatus.PROCESSING}),
    JobStatus.PROCESSING: frozenset({JobStatus.DONE, JobStatus.FAILED}),
    JobStatus.DONE: frozenset(),
    JobStatus.FAILED: frozenset(),
}


def can_transition(current: JobStatus, target: JobStatus) -> bool:
    """Whether a descriptor may move from current to target status."""
    return JobStatus(target) in ALLOWED_TRANSITIONS[JobStatus(current)]


class ArtifactKind(str, Enum):
    PDF = "pdf"
    ATS_REPORT_JSON = "ats_report_json"
    DIFF_MD = "diff_md"


class Artifact(SchemaModel):
    kind: ArtifactKind
    # Local path or object key
    path: NonEmptyStr


class JobFailure(SchemaModel):
    """Terminal failure details, set only by the execution collaborator."""

    message: str
    code: Annotated[Optional[str], NotNull] = None


class JobDescriptor(SchemaModel):
    """
    Lifecycle record of a compile job.

    Attributes:
        job_id: Opaque unique id, fresh per accepted request, never derived from content
        status: Current state machine value
        created_at: Creation time (UTC)
        updated_at: Last mutation time, never earlier than created_at
        input_hash: Content digest of the validated request (dedup key, not an id)
        artifacts: Outputs in production order; empty until a later stage adds them
        error: Present exactly when status is failed
    """

    job_id: NonEmptyStr
    status: JobStatus
    created_at: AwareDatetime
    updated_at: AwareDatetime
    input_hash: Annotated[str, StringConstraints(min_length=8)]
    artifacts: list[Artifact] = Field(default_factory=list)
    error: Annotated[Optional[JobFailure], NotNull] = None

    @model_validator(mode="after")
    def check_invariants(self) -> "JobDescriptor":
        if self.updated_at < self.created_at:
            raise PydanticCustomError("timestamp_order", "updatedAt must not be earlier than createdAt")
        if self.status == JobStatus.FAILED and self.error is None:
            raise PydanticCustomError("missing_error", "A failed job must carry an error")
        if self.status != JobStatus.FAILED and self.error is not None:
            raise PydanticCustomError(
                "unexpected_error",
                "Only a failed job may carry an error (status is '{status}')",
                {"status": self.status.value},
            )
        return self

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES


def parse_job_descriptor(raw: Any) -> JobDescriptor:
    """
    Validate a descriptor, e.g. after the execution collaborator mutated it.

    Raises:
        ValidationError: If the shape or an invariant is violated
    """
    return validate_document(JobDescriptor, raw, document="job descriptor")


def create_job(input_hash: str, created_at: Optional[datetime] = None) -> JobDescriptor:
    """
    Create a fresh descriptor in the queued state.

    Every call produces a new random job id, even for identical input hashes.

    Args:
        input_hash: Digest of the validated compile request
        created_at: Creation time (defaults to now, UTC)

    Returns:
        Descriptor with status queued, createdAt == updatedAt, no artifacts, no error
    """
    timestamp = created_at or utc_now()
    return parse_job_descriptor(
        {
            "jobId": str(uuid4()),
            "status": JobStatus.QUEUED,
            "createdAt": timestamp,
            "updatedAt": timestamp,
            "inputHash": input_hash,
            "artifacts": [],
        }
    )
