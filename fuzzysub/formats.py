"""
fuzzysub.formats — Convert between match records and plain data.

Supported conversions:
    • MatchResult list ↔ list of {"distance", "start", "end"} dicts
    • MatchResult list ↔ JSON strings
    • Distance row → list of [distance, offset] pairs
    • MatchResult → the haystack slice it denotes
"""

import json
from collections.abc import Sequence
from typing import Any

from .core import AlignmentCell, MatchResult

_FIELDS = ("distance", "start", "end")


# ═══════════════════════════════════════════════════════════════════
#  PYTHON OBJECTS ↔ MATCH RECORDS
# ═══════════════════════════════════════════════════════════════════

def to_python(matches: Sequence[MatchResult]) -> list[dict[str, int]]:
    """
    Convert match records to plain dicts.

        to_python([MatchResult(0, 2, 5)])
        → [{"distance": 0, "start": 2, "end": 5}]
    """
    return [
        {"distance": m.distance, "start": m.start, "end": m.end}
        for m in matches
    ]


def from_python(data: Any) -> list[MatchResult]:
    """
    Convert a list of dicts back into match records.

    Inverse of to_python:
        from_python(to_python(matches)) == matches
    """
    if not isinstance(data, (list, tuple)):
        raise TypeError(f"Expected a list of match dicts, got {type(data).__name__}")

    results: list[MatchResult] = []
    for item in data:
        if not isinstance(item, dict):
            raise TypeError(f"Expected a match dict, got {type(item).__name__}")
        missing = [f for f in _FIELDS if f not in item]
        if missing:
            raise ValueError(f"Match record is missing {', '.join(missing)}")
        values = [item[f] for f in _FIELDS]
        # bool is an int subclass; reject it explicitly
        if any(type(v) is bool or not isinstance(v, int) for v in values):
            raise TypeError(f"Match fields must be integers: {item!r}")
        results.append(MatchResult(*values))
    return results


# ═══════════════════════════════════════════════════════════════════
#  JSON STRINGS ↔ MATCH RECORDS
# ═══════════════════════════════════════════════════════════════════

def to_json(matches: Sequence[MatchResult], **kwargs) -> str:
    """Serialize match records to a JSON array."""
    return json.dumps(to_python(matches), **kwargs)


def from_json(text: str) -> list[MatchResult]:
    """Parse a JSON array of match objects."""
    return from_python(json.loads(text))


# ═══════════════════════════════════════════════════════════════════
#  ROWS AND SLICES
# ═══════════════════════════════════════════════════════════════════

def row_to_python(row: Sequence[AlignmentCell]) -> list[list[int]]:
    """Distance row as [distance, offset] pairs."""
    return [[cell.distance, cell.offset] for cell in row]


def matched_text(haystack: Sequence, match: MatchResult) -> Sequence:
    """
    The part of the haystack a match covers.

    A negative start is clamped to 0 for slicing only; the match
    itself is left as reported.
    """
    return haystack[max(0, match.start):match.end]
