"""
Fuzzy Substring Search
======================

Find the best approximate occurrences of a short string inside a long
one, using Levenshtein edit distance.

    find_matches("cat", "a cat sat")   → [MatchResult(distance=0, start=2, end=5)]
    find_matches("cat", "cap")         → [MatchResult(distance=1, start=0, end=2),
                                          MatchResult(distance=1, start=0, end=3)]

A single O(n·m) dynamic program scores every end position of the
haystack at once.  Each cell also carries the insertion−deletion
offset of its best path, so a match's start is recovered from its end
without a trace-back.
"""

from fuzzysub.core import (
    # Types
    AlignmentCell,
    MatchResult,
    # Search
    edit_distances,
    compute_alignment,
    extract_matches,
    find_matches,
    # Reference
    levenshtein,
)
from fuzzysub.formats import (
    to_python, from_python, to_json, from_json, row_to_python, matched_text,
)

__version__ = "0.1.0"
__all__ = [
    "AlignmentCell", "MatchResult",
    "edit_distances", "compute_alignment", "extract_matches", "find_matches",
    "levenshtein",
    "to_python", "from_python", "to_json", "from_json",
    "row_to_python", "matched_text",
]
