"""
Unit tests for the employee name -> ID mapping.
"""

from shift_converter.logics.employee_resolver import resolve_employee_mapping


class TestResolveEmployeeMapping:

    def test_skips_header_and_incomplete_rows(self):
        grid = [["H1", "H2"], ["Alice", "E001"], ["", "E002"], ["Bob", ""]]

        assert resolve_employee_mapping(grid) == {"Alice": "E001"}

    def test_header_row_is_never_read(self):
        grid = [["Carol", "E100"]]

        assert resolve_employee_mapping(grid) == {}

    def test_trims_names_and_ids(self):
        grid = [["姓名", "工號"], ["  王小明 ", " A123 "]]

        assert resolve_employee_mapping(grid) == {"王小明": "A123"}

    def test_whitespace_only_values_are_skipped(self):
        grid = [["姓名", "工號"], ["   ", "A1"], ["Dan", "   "]]

        assert resolve_employee_mapping(grid) == {}

    def test_ragged_rows(self):
        grid = [["姓名", "工號"], [], ["Eve"], ["Frank", "F1", "extra"]]

        assert resolve_employee_mapping(grid) == {"Frank": "F1"}

    def test_duplicate_name_keeps_last_row(self):
        grid = [["姓名", "工號"], ["Gina", "G1"], ["Gina", "G2"]]

        assert resolve_employee_mapping(grid) == {"Gina": "G2"}

    def test_empty_grid(self):
        assert resolve_employee_mapping([]) == {}
