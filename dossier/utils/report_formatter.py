"""
Utility functions for formatting text-based reports and tables.

Provides consistent table formatting for validation reports.
"""

from typing import Any, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        return f"{str(value):{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = 100):
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header with top/bottom separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        """Add table header row with column names."""
        header_parts = [col.format_header() for col in self.columns]
        self.lines.append(" ".join(header_parts).rstrip())
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        row_parts = [col.format_value(val) for col, val in zip(self.columns, values)]
        self.lines.append(" ".join(row_parts).rstrip())
        return self

    def add_summary(self, text: str) -> "TableFormatter":
        """Add summary line (typically after table data)."""
        self.lines.append(f"\n{text}")
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_field_errors(field_errors: dict[str, list[str]], title: str = "VALIDATION ERRORS") -> str:
    """
    Render a field-path-keyed error mapping as an aligned text table.

    Args:
        field_errors: Mapping of dotted field path to messages
        title: Section title

    Returns:
        Report string with one row per message

    Example:
        >>> print(format_field_errors({"jd.text": ["String should have at least 20 characters"]}))
    """
    path_width = max([len("Field")] + [len(path) for path in field_errors])
    formatter = TableFormatter([Column("Field", path_width), Column("Message", 60)])
    formatter.add_section_header(title).add_table_header().add_separator()

    count = 0
    for path, messages in field_errors.items():
        for message in messages:
            formatter.add_row([path, message])
            count += 1

    noun = "error" if count == 1 else "errors"
    formatter.add_summary(f"{count} {noun} in {len(field_errors)} field(s)")
    return formatter.render()
