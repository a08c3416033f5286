"""
Job event logging utilities.

Appends job lifecycle events to a JSON Lines file so that the dispatch side of
the pipeline can follow what intake has emitted. This is separate from the
detailed per-session logs configured by dossier.utils.logger.

Usage:
    from dossier.utils.event_logging import log_job_event

    log_job_event(
        event_type="job_created",
        job_id=job.job_id,
        source="cli",
        input_hash=job.input_hash,
    )
"""

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from dossier.utils.timestamp import now_exact

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
JOB_EVENTS_FILE = Path(os.getenv("JOB_EVENTS_FILE", LOGS_PATH / "job_events.log"))


def log_job_event(event_type: str, job_id: str, source: str, **extra_fields) -> None:
    """
    Log an event to the job event log.

    Events are appended in JSON Lines format (one JSON object per line), which
    keeps the file streamable and easy to filter by event_type or job_id.

    Args:
        event_type: Type of event (e.g., "job_created", "request_rejected")
        job_id: Job identifier (empty string for rejected requests)
        source: Event source (e.g., "cli", "intake")
        **extra_fields: Additional event-specific fields

    Example:
        log_job_event(
            event_type="job_created",
            job_id="5f0c...",
            source="cli",
            input_hash="9a1b...",
        )
    """
    JOB_EVENTS_FILE.parent.mkdir(parents=True, exist_ok=True)

    event = {
        "timestamp": now_exact(),
        "event_type": event_type,
        "job_id": job_id,
        "source": source,
        **extra_fields,
    }

    with open(JOB_EVENTS_FILE, "a", encoding="utf-8") as f:
        f.write(json.dumps(event) + "\n")


def get_recent_events(
    n: int = 10, job_id: Optional[str] = None, event_type: Optional[str] = None
) -> list[dict]:
    """
    Get the last n events from the job event log, optionally filtered.

    Args:
        n: Number of recent events to return (default: 10)
        job_id: Filter to only events for this job (optional)
        event_type: Filter to only events of this type (optional)

    Returns:
        List of event dicts (most recent last)
    """
    if not JOB_EVENTS_FILE.exists():
        return []

    events = []
    with open(JOB_EVENTS_FILE, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError:
                # Skip malformed lines
                continue

    if job_id:
        events = [e for e in events if e.get("job_id") == job_id]

    if event_type:
        events = [e for e in events if e.get("event_type") == event_type]

    return events[-n:] if len(events) > n else events
