"""
Unit tests for schedule extraction over a decoded master grid.
"""

import pytest

from shift_converter.logics.schedule_extractor import OutputRecord, extract_schedule
from shift_converter.logics.task_code_resolver import TaskCodeSet


TASK_CODES = TaskCodeSet(early="T-E", middle="T-M", late="T-L")


def header(days: int = 31):
    return ["姓名"] + [str(day) for day in range(1, days + 1)]


def extract(grid, mapping=None, task_codes=TASK_CODES, year=2024, month=3):
    return extract_schedule(grid, mapping or {}, task_codes, year, month, "1050", "1150")


class TestExtractSchedule:

    def test_header_only_yields_nothing(self):
        assert extract([header()]) == []

    def test_empty_grid_yields_nothing(self):
        assert extract([]) == []

    @pytest.mark.parametrize("day", [1, 9, 15, 31])
    def test_single_cell(self, day):
        row = ["Alice"] + [""] * 31
        row[day] = "930"

        records = extract([header(), row], mapping={"Alice": "E001"})

        assert records == [OutputRecord(date=f"2024-03-{day:02d}", employeeId="E001", taskCode="T-E")]

    def test_buckets_map_to_task_codes(self):
        row = ["Alice", "930", "1100", "1200"]

        records = extract([header(), row])

        assert [r.taskCode for r in records] == ["T-E", "T-M", "T-L"]

    def test_unknown_name_is_its_own_id(self):
        records = extract([header(), ["王小明", "1000"]], mapping={"Alice": "E001"})

        assert records[0].employeeId == "王小明"

    def test_blank_name_rows_are_skipped(self):
        records = extract([header(), ["  ", "930"], ["", "1000"]])

        assert records == []

    def test_non_shift_cells_are_skipped(self):
        records = extract([header(), ["Alice", "休", "", "OFF", "1200", "9:30"]])

        assert len(records) == 1
        assert records[0].date == "2024-03-04"

    def test_columns_beyond_month_are_ignored(self):
        row = ["Alice"] + ["930"] * 31
        records = extract([header(), row], year=2023, month=2)

        assert len(records) == 28
        assert records[-1].date == "2023-02-28"

    def test_leap_february_includes_29th(self):
        row = ["Alice"] + ["930"] * 31
        records = extract([header(), row], year=2024, month=2)

        assert len(records) == 29
        assert records[-1].date == "2024-02-29"

    def test_row_major_order(self):
        grid = [
            header(),
            ["Bob", "", "1000", "1000"],
            ["Alice", "1000", "", "1000"],
        ]
        records = extract(grid, mapping={"Alice": "A", "Bob": "B"})

        assert [(r.employeeId, r.date[-2:]) for r in records] == [
            ("B", "02"), ("B", "03"), ("A", "01"), ("A", "03")
        ]

    def test_missing_task_codes_use_fallback(self):
        records = extract([header(), ["Alice", "930", "1100", "1300"]], task_codes=TaskCodeSet())

        assert [r.taskCode for r in records] == ["總控-早", "總控-中", "總控-晚"]

    def test_numeric_cells(self):
        records = extract([header(), ["Alice", 930, 1100.0]])

        assert [r.taskCode for r in records] == ["T-E", "T-M"]

    def test_idempotent(self):
        grid = [header(), ["Alice", "930", "1100"], ["Bob", "", "1300"]]

        assert extract(grid) == extract(grid)

    def test_to_dict(self):
        record = OutputRecord(date="2024-03-01", employeeId="E1", taskCode="T1")

        assert record.to_dict() == {"date": "2024-03-01", "employeeId": "E1", "taskCode": "T1"}
