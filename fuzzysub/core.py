"""
fuzzysub.core — Approximate Substring Search
=============================================

§1  THE PROBLEM
───────────────

Levenshtein distance answers "how far apart are these two strings?".
Searching asks a different question: "where in this long text does
this short string occur, allowing a few typos?".  The naive answer,
scoring the needle against every substring of the haystack, costs
O(n²·m).

The classic fix (Sellers 1980) is to run the ordinary Levenshtein DP
with a FREE first row: starting the needle at any haystack position
costs nothing.  After the last needle character, cell j of the final
row holds the cheapest way to align the whole needle with SOME
substring that ends at haystack position j.  One O(n·m) pass scores
every end position at once.


§2  THE DP
──────────

    D[0][j] = 0                                  (free start)
    D[i][0] = i                                  (needle prefix vs nothing)
    D[i][j] = min(
        D[i-1][j]   + 1,                         # delete needle[i-1]
        D[i][j-1]   + 1,                         # insert haystack[j-1]
        D[i-1][j-1] + (needle[i-1] != haystack[j-1]),
    )

Only two rows are ever alive.  The result is the final row D[m][·].


§3  RECOVERING THE START
────────────────────────

The final row only tells us where a match ENDS.  Rather than keep the
whole matrix and trace back, every cell also carries an OFFSET: the
running count of insertions minus deletions along the path that won
that cell.  Along any path from row 0 to (m, j):

    haystack consumed = substitutions + insertions = end − start
    needle consumed   = substitutions + deletions  = m

so   start = end − m − (insertions − deletions) = end − m − offset.

Reconstruction is O(1) per match instead of O(n + m).

When several operations tie for the minimum, the winner is picked in
the fixed order DELETION, INSERTION, SUBSTITUTION.  The order never
changes a distance but does change which start a tied cell reports, so
it is part of the contract.

The boundary column D[i][0] carries offset 0 even though it represents
i deletions.  A path that runs down that column therefore reports a
start below zero (e.g. needle "cat" in an empty haystack starts at −3).
The value is returned as computed; slicing with max(0, start) recovers
the text that was actually aligned.


§4  EXTRACTION
──────────────

One left-to-right scan over the final row keeps the smallest distance
seen so far and every index that reaches it.  Index 0 seeds the scan,
so results always come out in ascending end order.

Author: fuzzysub contributors
License: Apache-2.0
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


# Unit costs of the DP
EDIT_COST = 1
MATCH_COST = 0


# ═══════════════════════════════════════════════════════════════════
#  DATA TYPES
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class AlignmentCell:
    """
    One DP cell: best distance of the needle against some substring
    ending here, and the insertion−deletion offset of the path that
    achieved it.

    `offset` is bookkeeping for start recovery, not a distance.
    """
    distance: int
    offset: int

    def __iter__(self):
        yield self.distance
        yield self.offset

    def __repr__(self) -> str:
        return f"AlignmentCell({self.distance}, {self.offset})"


@dataclass(frozen=True, slots=True)
class MatchResult:
    """
    A best-scoring span of the haystack.

    `end` is exclusive (number of haystack items consumed).  `start` is
    `end − len(needle) − offset` as computed, and may be negative when
    the optimal path ran along the boundary column.
    """
    distance: int
    start: int
    end: int

    @property
    def length(self) -> int:
        """
        Raw aligned length, `end − start`.

        Uses the unclamped start, so a match with a negative start
        reports more than it covers: MatchResult(3, -3, 0).length == 3
        although the haystack slice is empty.
        """
        return self.end - self.start

    def __repr__(self) -> str:
        return f"MatchResult(distance={self.distance}, start={self.start}, end={self.end})"


# ═══════════════════════════════════════════════════════════════════
#  REFERENCE DISTANCE
# ═══════════════════════════════════════════════════════════════════

def levenshtein(s: Sequence, t: Sequence) -> int:
    """
    Plain Levenshtein distance between two whole sequences.

    The search never calls this.  It re-scores a reported span, e.g.
    levenshtein(needle, haystack[max(0, m.start):m.end]) == m.distance,
    which is how the tests check start recovery.
    """
    m, n = len(s), len(t)
    if m == 0:
        return n
    if n == 0:
        return m

    prev = list(range(n + 1))
    curr = [0] * (n + 1)

    for i in range(1, m + 1):
        curr[0] = i
        for j in range(1, n + 1):
            cost = MATCH_COST if s[i - 1] == t[j - 1] else EDIT_COST
            curr[j] = min(
                prev[j] + EDIT_COST,       # deletion
                curr[j - 1] + EDIT_COST,   # insertion
                prev[j - 1] + cost,        # substitution
            )
        prev, curr = curr, prev

    return prev[n]


# ═══════════════════════════════════════════════════════════════════
#  DISTANCE / OFFSET ROW
# ═══════════════════════════════════════════════════════════════════

def _check_sequence(name: str, value: Any) -> None:
    if not isinstance(value, Sequence):
        raise TypeError(
            f"{name} must be a sequence (str, bytes, list, tuple), "
            f"got {type(value).__name__}"
        )


def edit_distances(needle: Sequence, haystack: Sequence) -> list[AlignmentCell]:
    """
    Score the whole needle against every end position of the haystack.

    Returns n + 1 cells (n = len(haystack)).  Cell j holds the minimum
    edit distance between the needle and any substring ending at j,
    together with the offset needed to find where that substring starts.

        edit_distances("cat", "cap")
        → [AlignmentCell(3, 0), AlignmentCell(2, -2),
           AlignmentCell(1, -1), AlignmentCell(1, 0)]

    An empty needle yields n + 1 cells of (0, 0); an empty haystack
    yields the single cell (len(needle), 0).

    Both arguments must be registered collections.abc.Sequence types
    (str, bytes, list, tuple, range, ...); anything else, including
    generators and numpy arrays, raises TypeError.  Convert with list()
    first.
    """
    _check_sequence("needle", needle)
    _check_sequence("haystack", haystack)

    # Matching nothing against any prefix is free
    prev = [AlignmentCell(0, 0)] * (len(haystack) + 1)

    for i, wanted in enumerate(needle):
        curr = [AlignmentCell(i + 1, 0)]

        for j, seen in enumerate(haystack):
            cost = MATCH_COST if wanted == seen else EDIT_COST

            del_cost = prev[j + 1].distance + EDIT_COST
            ins_cost = curr[j].distance + EDIT_COST
            sub_cost = prev[j].distance + cost
            best = min(del_cost, ins_cost, sub_cost)

            if del_cost == best:
                offset = prev[j + 1].offset - 1
            elif ins_cost == best:
                offset = curr[j].offset + 1
            else:
                offset = prev[j].offset

            curr.append(AlignmentCell(best, offset))

        prev = curr

    return prev


compute_alignment = edit_distances


# ═══════════════════════════════════════════════════════════════════
#  MATCH EXTRACTION
# ═══════════════════════════════════════════════════════════════════

def extract_matches(needle_length: int, row: Sequence[AlignmentCell]) -> list[MatchResult]:
    """
    Turn a distance row into the list of globally best matches.

    Every end index tied for the smallest distance produces one
    MatchResult, in ascending end order.  Distinct indices may describe
    overlapping or even identical spans; nothing is merged.
    """
    best = row[0].distance
    indices = [0]

    for i in range(1, len(row)):
        value = row[i].distance
        if value < best:
            best = value
            indices = [i]
        elif value == best:
            indices.append(i)

    results: list[MatchResult] = []
    for i in indices:
        distance, offset = row[i]
        results.append(MatchResult(distance, i - needle_length - offset, i))

    return results


def find_matches(needle: Sequence, haystack: Sequence) -> list[MatchResult]:
    """
    Find every best approximate occurrence of `needle` in `haystack`.

        find_matches("cat", "a cat sat")
        → [MatchResult(distance=0, start=2, end=5)]

    Always returns at least one result.  The reported distance is the
    true minimum edit distance between the needle and any substring of
    the haystack, and every returned span achieves it.
    """
    row = edit_distances(needle, haystack)
    matches = extract_matches(len(needle), row)
    logger.debug(
        "needle of %d in haystack of %d: best distance %d at %d end position(s)",
        len(needle), len(haystack), matches[0].distance, len(matches),
    )
    return matches
