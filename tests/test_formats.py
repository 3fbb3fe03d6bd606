"""Tests for fuzzysub.formats — plain-data and JSON conversion of matches."""

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fuzzysub.core import AlignmentCell, MatchResult, edit_distances, find_matches
from fuzzysub.formats import (
    to_python, from_python, to_json, from_json, row_to_python, matched_text,
)


class TestPythonConversion:

    def test_to_python_shape(self):
        assert to_python([MatchResult(0, 2, 5)]) == [
            {"distance": 0, "start": 2, "end": 5}
        ]

    def test_round_trip(self):
        matches = find_matches("abc", "abxabcab")
        assert from_python(to_python(matches)) == matches

    def test_negative_start_preserved(self):
        matches = find_matches("cat", "")
        assert to_python(matches) == [{"distance": 3, "start": -3, "end": 0}]

    def test_empty_list(self):
        assert to_python([]) == []
        assert from_python([]) == []

    def test_rejects_non_list(self):
        with pytest.raises(TypeError):
            from_python({"distance": 0, "start": 0, "end": 0})

    def test_rejects_non_dict_item(self):
        with pytest.raises(TypeError):
            from_python([[0, 0, 0]])

    def test_rejects_missing_key(self):
        with pytest.raises(ValueError, match="end"):
            from_python([{"distance": 0, "start": 0}])

    @pytest.mark.parametrize("bad", ["0", 1.5, None, True])
    def test_rejects_non_integer_field(self, bad):
        with pytest.raises(TypeError):
            from_python([{"distance": bad, "start": 0, "end": 1}])


class TestJson:

    def test_to_json(self):
        text = to_json(find_matches("cat", "a cat sat"))
        assert json.loads(text) == [{"distance": 0, "start": 2, "end": 5}]

    def test_kwargs_forwarded(self):
        text = to_json([MatchResult(1, 0, 3)], sort_keys=True)
        assert text == '[{"distance": 1, "end": 3, "start": 0}]'

    def test_from_json(self):
        assert from_json('[{"distance": 1, "start": 0, "end": 3}]') == [MatchResult(1, 0, 3)]


class TestRowsAndSlices:

    def test_row_to_python(self):
        assert row_to_python(edit_distances("cat", "cap")) == [
            [3, 0], [2, -2], [1, -1], [1, 0],
        ]

    def test_row_to_python_cells(self):
        assert row_to_python([AlignmentCell(0, 0)]) == [[0, 0]]

    def test_matched_text(self):
        haystack = "a cat sat"
        (match,) = find_matches("cat", haystack)
        assert matched_text(haystack, match) == "cat"

    def test_matched_text_clamps_negative_start(self):
        match = MatchResult(3, -3, 0)
        assert matched_text("", match) == ""
        assert match.start == -3

    def test_matched_text_list(self):
        (match,) = find_matches([2, 3], [1, 2, 3, 4])
        assert matched_text([1, 2, 3, 4], match) == [2, 3]
