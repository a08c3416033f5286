"""Unit tests for report formatting."""

import pytest

from dossier.utils.report_formatter import Column, TableFormatter, format_field_errors
from dossier.utils.timestamp import format_timestamp, now_exact


@pytest.mark.unit
def test_format_field_errors_lists_every_message():
    """Test that the report lists every message under its path."""
    report = format_field_errors(
        {
            "jd.text": ["String should have at least 20 characters"],
            "resume.basics.email": ["Field required", "Another message"],
        }
    )

    assert "VALIDATION ERRORS" in report
    assert "jd.text" in report
    assert report.count("resume.basics.email") == 2
    assert report.endswith("3 errors in 2 field(s)")


@pytest.mark.unit
def test_table_formatter_rejects_wrong_row_width():
    """Test that rows must match the column count."""
    formatter = TableFormatter([Column("A", 5), Column("B", 5)])
    with pytest.raises(ValueError):
        formatter.add_row(["only one"])


@pytest.mark.unit
def test_format_timestamp():
    """Test timestamp shortening for reports."""
    assert format_timestamp("2025-11-13T18:45:40.572549Z") == "2025-11-13 18:45:40"
    assert format_timestamp("garbage") == "garbage"
    assert format_timestamp(now_exact()).count(":") == 2
