"""Flat key/value properties text helpers."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

COMMENT_PREFIXES = ("#", "!")
SEPARATORS = ("=", ":")


def parse_properties(lines: Iterable[str]) -> Dict[str, str]:
    """Parse ``key=value`` lines into a dict.

    Blank lines and lines starting with ``#`` or ``!`` are skipped. The key
    ends at the first ``=`` or ``:``; a line without either is a key with an
    empty value. Keys and values are stripped. The first occurrence of a
    duplicated key wins.

    Args:
        lines: Text lines, with or without line terminators

    Returns:
        Mapping of property names to values
    """
    properties: Dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue
        positions = [line.find(sep) for sep in SEPARATORS if sep in line]
        if positions:
            index = min(positions)
            key, value = line[:index].strip(), line[index + 1:].strip()
        else:
            key, value = line, ""
        if key and key not in properties:
            properties[key] = value
    return properties


def split_by_whitespace(text: Optional[str]) -> List[str]:
    """Split text on runs of whitespace, dropping empty tokens."""
    if text is None:
        return []
    return text.split()
