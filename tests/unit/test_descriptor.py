"""Unit tests for the job descriptor model."""

from datetime import datetime, timedelta, timezone

import pytest

from dossier.contexts.jobs.descriptor import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    ArtifactKind,
    JobStatus,
    can_transition,
    create_job,
    parse_job_descriptor,
)
from dossier.contexts.schema import UnsupportedEnumValue, ValidationError

INPUT_HASH = "a" * 64


def _wire(**overrides) -> dict:
    descriptor = {
        "jobId": "job-1",
        "status": "queued",
        "createdAt": "2025-11-13T18:45:40Z",
        "updatedAt": "2025-11-13T18:45:40Z",
        "inputHash": INPUT_HASH,
    }
    descriptor.update(overrides)
    return descriptor


@pytest.mark.unit
def test_create_job_initial_state():
    """Test that a new job is queued with no artifacts and no error."""
    job = create_job(INPUT_HASH)

    assert job.status is JobStatus.QUEUED
    assert job.artifacts == []
    assert job.error is None
    assert job.created_at == job.updated_at
    assert job.created_at.tzinfo is not None
    assert job.input_hash == INPUT_HASH
    assert not job.is_terminal


@pytest.mark.unit
def test_create_job_ids_are_fresh():
    """Test that every created job gets a new id."""
    ids = {create_job(INPUT_HASH).job_id for _ in range(50)}
    assert len(ids) == 50


@pytest.mark.unit
def test_job_id_is_not_the_input_hash():
    """Test that the job id is not derived from the input hash."""
    assert create_job(INPUT_HASH).job_id != INPUT_HASH


@pytest.mark.unit
def test_create_job_rejects_short_hash():
    """Test that an implausibly short input hash is rejected."""
    with pytest.raises(ValidationError) as exc_info:
        create_job("abc")

    assert "inputHash" in exc_info.value.field_errors


@pytest.mark.unit
def test_wire_form():
    """Test the camelCase wire form of a new descriptor."""
    created = datetime(2025, 11, 13, 18, 45, 40, tzinfo=timezone.utc)
    wire = create_job(INPUT_HASH, created_at=created).to_wire()

    assert set(wire) == {"jobId", "status", "createdAt", "updatedAt", "inputHash", "artifacts"}
    assert wire["status"] == "queued"
    assert wire["createdAt"] == wire["updatedAt"] == "2025-11-13T18:45:40Z"
    assert wire["artifacts"] == []


@pytest.mark.unit
def test_failed_requires_error():
    """Test that a failed descriptor must carry an error."""
    with pytest.raises(ValidationError) as exc_info:
        parse_job_descriptor(_wire(status="failed"))

    assert exc_info.value.issues[0].code == "missing_error"


@pytest.mark.unit
def test_failed_with_error_is_valid():
    """Test a well-formed failed descriptor."""
    job = parse_job_descriptor(
        _wire(status="failed", updatedAt="2025-11-13T18:50:00Z", error={"message": "LaTeX overflow", "code": "E_LAYOUT"})
    )

    assert job.error.code == "E_LAYOUT"
    assert job.is_terminal
    assert job.to_wire()["error"] == {"message": "LaTeX overflow", "code": "E_LAYOUT"}


@pytest.mark.unit
@pytest.mark.parametrize("status", ["queued", "processing", "done"])
def test_error_only_allowed_when_failed(status):
    """Test that non-failed descriptors cannot carry an error."""
    with pytest.raises(ValidationError) as exc_info:
        parse_job_descriptor(_wire(status=status, error={"message": "boom"}))

    assert exc_info.value.issues[0].code == "unexpected_error"


@pytest.mark.unit
def test_updated_at_cannot_precede_created_at():
    """Test that updatedAt earlier than createdAt is rejected."""
    with pytest.raises(ValidationError) as exc_info:
        parse_job_descriptor(_wire(updatedAt="2025-11-13T18:45:39Z"))

    assert exc_info.value.issues[0].code == "timestamp_order"


@pytest.mark.unit
def test_done_with_artifacts():
    """Test a finished descriptor listing every artifact kind."""
    job = parse_job_descriptor(
        _wire(
            status="done",
            updatedAt="2025-11-13T18:46:40Z",
            artifacts=[
                {"kind": "pdf", "path": "outs/job-1/resume.pdf"},
                {"kind": "ats_report_json", "path": "outs/job-1/report.json"},
                {"kind": "diff_md", "path": "outs/job-1/diff.md"},
            ],
        )
    )

    assert [artifact.kind for artifact in job.artifacts] == [
        ArtifactKind.PDF,
        ArtifactKind.ATS_REPORT_JSON,
        ArtifactKind.DIFF_MD,
    ]


@pytest.mark.unit
def test_unknown_artifact_kind_rejected():
    """Test that artifact kinds outside the closed set are rejected."""
    with pytest.raises(UnsupportedEnumValue) as exc_info:
        parse_job_descriptor(_wire(artifacts=[{"kind": "docx", "path": "x.docx"}]))

    assert exc_info.value.enum_paths == ["artifacts.0.kind"]


@pytest.mark.unit
def test_unknown_status_rejected():
    """Test that statuses outside the state machine are rejected."""
    with pytest.raises(UnsupportedEnumValue):
        parse_job_descriptor(_wire(status="cancelled"))


@pytest.mark.unit
def test_naive_created_at_rejected():
    """Test that a creation time without a timezone is rejected."""
    with pytest.raises(ValidationError):
        create_job(INPUT_HASH, created_at=datetime(2025, 1, 1))


@pytest.mark.unit
def test_transition_table():
    """Test allowed and forbidden status transitions."""
    assert can_transition(JobStatus.QUEUED, JobStatus.PROCESSING)
    assert can_transition("processing", "done")
    assert can_transition(JobStatus.PROCESSING, JobStatus.FAILED)
    assert not can_transition(JobStatus.QUEUED, JobStatus.DONE)
    assert not can_transition(JobStatus.PROCESSING, JobStatus.QUEUED)


@pytest.mark.unit
@pytest.mark.parametrize("terminal", sorted(TERMINAL_STATUSES, key=lambda s: s.value))
def test_terminal_states_have_no_exits(terminal):
    """Test that done and failed are terminal."""
    assert ALLOWED_TRANSITIONS[terminal] == frozenset()
    for target in JobStatus:
        assert not can_transition(terminal, target)


@pytest.mark.unit
def test_later_updates_keep_invariants():
    """Test that a processing update still satisfies the descriptor invariants."""
    job = create_job(INPUT_HASH)
    later = job.updated_at + timedelta(seconds=5)

    processing = parse_job_descriptor(
        job.model_copy(update={"status": JobStatus.PROCESSING, "updated_at": later}).to_wire()
    )

    assert processing.job_id == job.job_id
    assert processing.created_at == job.created_at


@pytest.mark.unit
def test_null_error_rejected():
    """Test that a queued descriptor omits error rather than sending null."""
    with pytest.raises(ValidationError) as exc_info:
        parse_job_descriptor(_wire(error=None))

    assert list(exc_info.value.field_errors) == ["error"]
    assert exc_info.value.issues[0].code == "null_not_allowed"


@pytest.mark.unit
def test_null_failure_code_rejected():
    """Test that a failure code may be omitted but not sent as null."""
    with pytest.raises(ValidationError) as exc_info:
        parse_job_descriptor(_wire(status="failed", error={"message": "boom", "code": None}))

    assert list(exc_info.value.field_errors) == ["error.code"]
