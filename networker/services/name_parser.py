from __future__ import annotations

from typing import List

from networker.models import ParsedName


def parse_name(line: str) -> ParsedName:
    """Split a name line into first and last name.

    Valid only with at least two whitespace-separated tokens; middle names and
    initials are dropped.
    """
    parts = line.split()
    if len(parts) < 2:
        return ParsedName(original=line, is_valid=False)
    return ParsedName(original=line, first_name=parts[0], last_name=parts[-1], is_valid=True)


def parse_name_list(content: str) -> List[ParsedName]:
    """Parse one name per line, skipping blank lines. Input order is kept."""
    lines = [line.strip() for line in content.split("\n")]
    return [parse_name(line) for line in lines if line]
