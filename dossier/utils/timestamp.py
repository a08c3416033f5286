"""Timestamp helpers. All timestamps are timezone-aware UTC."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def now_exact() -> str:
    """Current UTC time as an ISO 8601 string with microseconds (e.g. 2025-11-13T18:45:40.572549+00:00)."""
    return utc_now().isoformat()


def format_timestamp(iso_timestamp: str) -> str:
    """
    Format ISO 8601 timestamp to readable format.

    Args:
        iso_timestamp: ISO 8601 formatted timestamp string ("Z" suffix accepted)

    Returns:
        Human-readable timestamp (e.g. "2025-11-13 18:45:40"), or the original
        string if it cannot be parsed

    Examples:
        format_timestamp("2025-11-13T18:45:40.572549Z")
        # "2025-11-13 18:45:40"
    """
    try:
        dt = datetime.fromisoformat(iso_timestamp.replace("Z", "+00:00"))
    except (ValueError, AttributeError):
        return iso_timestamp
    return dt.strftime("%Y-%m-%d %H:%M:%S")
