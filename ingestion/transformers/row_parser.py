"""
Minimal comma-separated row parser.

Fields are split on every ',' with no quoting or escaping support, so a
comma inside a value always starts a new field. Columns are matched
by position only.
"""

from typing import Dict, List, Sequence, Tuple

DELIMITER = ","


def split_lines(text: str) -> List[str]:
    """
    Split decoded content into lines.

    Surrounding whitespace is stripped first, so a trailing newline does
    not produce an empty data line. Empty content yields no lines.
    """
    stripped = text.strip()
    if not stripped:
        return []
    return stripped.split("\n")


def split_fields(line: str) -> List[str]:
    """Split one line on commas and trim each field"""
    return [field.strip() for field in line.split(DELIMITER)]


def parse_headers(line: str) -> Tuple[str, ...]:
    """Parse the header line into an ordered tuple of column names"""
    return tuple(split_fields(line))


def parse_row(headers: Sequence[str], line: str) -> Dict[str, str]:
    """
    Map the values of a data line onto the headers by position.

    Missing trailing values become "", values beyond the header count
    are dropped.
    """
    values = split_fields(line)
    return {
        header: values[index] if index < len(values) else ""
        for index, header in enumerate(headers)
    }
