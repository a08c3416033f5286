"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from dossier.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(
    log_dir: Path,
    phase: str = "submit",
    resume_path: Optional[Path] = None,
    jd_source: Optional[str] = None,
) -> Path:
    """
    Setup logger for intake context.

    Records which documents the session was run against in the provenance header.

    Args:
        log_dir: Directory for this intake session
        phase: Phase name for provenance ("submit" or "validate")
        resume_path: Resume document being submitted
        jd_source: Job description URL or text file

    Returns:
        Path to log file

    Example:
        log_file = setup_intake_logger(
            log_dir, resume_path=Path("data/resume.json"), jd_source="https://jobs.example.com/42"
        )
    """
    provenance = {"Phase": phase}
    if resume_path is not None:
        provenance["Resume"] = str(resume_path)
    if jd_source is not None:
        provenance["Job description"] = jd_source

    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance=provenance,
    )


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_request_accepted(job, jd_type: str) -> None:
    """Log creation of a queued job for an accepted request."""
    _log_success(f"Accepted compile request -> job {job.job_id} ({jd_type} job description)")
    _log_debug(f"  inputHash: {job.input_hash}")


def log_request_rejected(error) -> None:
    """
    Log a rejected request with every field error.

    Args:
        error: ValidationError raised by validate_compile_request()
    """
    field_errors = error.field_errors
    _log_warning(f"Rejected {error.document}: {len(error.issues)} issue(s) in {len(field_errors)} field(s)")
    for path, messages in field_errors.items():
        for message in messages:
            _log_debug(f"  {path}: {message}")
