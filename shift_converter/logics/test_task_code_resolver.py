"""
Unit tests for task code resolution from free-form lookup sheets.
"""

import pytest

from shift_converter.logics.shift_classifier import ShiftBucket
from shift_converter.logics.task_code_resolver import (
    DEFAULT_SHIFT_RULES,
    ShiftKeywordRule,
    TaskCodeSet,
    default_task_codes,
    fallback_task_code,
    resolve_task_codes
)


class TestPositionalFallback:
    """Unlabelled marker rows fill early, middle, late in row order."""

    def test_three_unlabelled_rows(self):
        grid = [
            ["名稱", "代碼"],
            ["總控A", "T100"],
            ["總控B", "T200"],
            ["總控C", "T300"],
        ]
        result = resolve_task_codes(grid)

        assert result.early == "T100"
        assert result.middle == "T200"
        assert result.late == "T300"

    def test_fourth_unlabelled_row_is_ignored(self):
        grid = [["總控", "T1"], ["總控", "T2"], ["總控", "T3"], ["總控", "T4"]]
        result = resolve_task_codes(grid)

        assert result.to_dict() == {"early": "T1", "middle": "T2", "late": "T3"}

    def test_fallback_never_overwrites(self):
        grid = [["總控 morning", "E1"], ["總控", "X1"], ["總控", "X2"], ["總控", "X3"]]
        result = resolve_task_codes(grid)

        assert result.early == "E1"
        assert result.middle == "X1"
        assert result.late == "X2"


class TestKeywordRules:

    def test_evening_row_is_late_regardless_of_position(self):
        grid = [["總控", "L1", "evening"], ["總控", "A1"], ["總控", "A2"]]
        result = resolve_task_codes(grid)

        assert result.late == "L1"
        assert result.early == "A1"
        assert result.middle == "A2"

    @pytest.mark.parametrize("label, bucket", [
        ("總控早班", ShiftBucket.EARLY),
        ("總控 MORNING", ShiftBucket.EARLY),
        ("總控中班", ShiftBucket.MIDDLE),
        ("總控 Middle", ShiftBucket.MIDDLE),
        ("總控晚班", ShiftBucket.LATE),
        ("總控 Night", ShiftBucket.LATE),
        ("總控 evening", ShiftBucket.LATE),
    ])
    def test_keyword_languages(self, label, bucket):
        result = resolve_task_codes([[label, "CODE"]])

        assert result.get(bucket) == "CODE"

    def test_keyword_match_overwrites_earlier_assignment(self):
        grid = [["總控早", "E1"], ["總控早", "E2"]]
        result = resolve_task_codes(grid)

        assert result.early == "E2"

    def test_keyword_anywhere_in_row(self):
        grid = [["T9", "", "總控", "晚班"]]
        result = resolve_task_codes(grid)

        assert result.late == "T9"

    def test_custom_rules(self):
        rules = [ShiftKeywordRule(ShiftBucket.LATE, ("Spät",))] + list(DEFAULT_SHIFT_RULES)
        result = resolve_task_codes([["總控 spät", "L7"]], rules=rules)

        assert result.late == "L7"


class TestCandidateCode:

    def test_prefers_second_column(self):
        assert resolve_task_codes([["總控早", "E1"]]).early == "E1"

    def test_falls_back_to_first_column(self):
        assert resolve_task_codes([["總控早", ""]]).early == "總控早"
        assert resolve_task_codes([["總控早"]]).early == "總控早"

    def test_each_marker_cell_is_an_occurrence(self):
        grid = [["總控", "總控"]]
        result = resolve_task_codes(grid)

        assert result.early == "總控"
        assert result.middle == "總控"
        assert result.late is None


class TestUnmatchedSheets:

    def test_no_marker_rows_leaves_buckets_empty(self):
        result = resolve_task_codes([["代碼", "名稱"], ["A1", "其他"]])

        assert result.to_dict() == {"early": None, "middle": None, "late": None}

    def test_empty_grid(self):
        assert resolve_task_codes([]) == TaskCodeSet()

    def test_ragged_rows(self):
        result = resolve_task_codes([[], ["總控"], ["x", "總控晚", "y"]])

        assert result.early == "總控"
        assert result.late == "總控晚"


class TestDefaults:

    def test_default_task_codes(self):
        assert default_task_codes().to_dict() == {
            "early": "總控-早",
            "middle": "總控-中",
            "late": "總控-晚"
        }

    def test_code_for_uses_fallback_when_unset(self):
        codes = TaskCodeSet(early="E1")

        assert codes.code_for(ShiftBucket.EARLY) == "E1"
        assert codes.code_for(ShiftBucket.MIDDLE) == fallback_task_code(ShiftBucket.MIDDLE)
        assert codes.code_for(ShiftBucket.LATE) == "總控-晚"
