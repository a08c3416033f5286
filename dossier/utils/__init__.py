"""
Shared utilities for DOSSIER.

Common functionality used across contexts:
- Logging setup and provenance
- Job event log
- Timestamps
- Text report formatting
"""

from dossier.utils.timestamp import now_exact, utc_now

__all__ = ["now_exact", "utc_now"]
