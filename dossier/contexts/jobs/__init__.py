"""
Jobs Context

Responsibilities:
- Canonical serialization and content hashing of validated compile requests
- Job descriptor record shape and status state machine
- Creation of fresh descriptors in the queued state

Owns: inputHash computation, job descriptor invariants
Never: Executes, schedules or persists jobs
"""

from dossier.contexts.jobs.descriptor import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    Artifact,
    ArtifactKind,
    JobDescriptor,
    JobFailure,
    JobStatus,
    can_transition,
    create_job,
    parse_job_descriptor,
)
from dossier.contexts.jobs.hashing import canonicalize, compute_input_hash

__all__ = [
    # Hashing
    "canonicalize",
    "compute_input_hash",
    # Descriptor model
    "JobStatus",
    "TERMINAL_STATUSES",
    "ALLOWED_TRANSITIONS",
    "can_transition",
    "ArtifactKind",
    "Artifact",
    "JobFailure",
    "JobDescriptor",
    "create_job",
    "parse_job_descriptor",
]
