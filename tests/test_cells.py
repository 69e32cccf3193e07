from datetime import datetime

import pytest

from chord_sheet.cells import as_boolean, as_number, as_string, blank_grid, cell_text, is_blank
from chord_sheet.errors import CellValueError


class TestBlank:
    @pytest.mark.parametrize("value", [None, "", " ", "\t"])
    def test_blank_values(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", [0, False, "C", 1.5])
    def test_non_blank_values(self, value):
        assert not is_blank(value)

    def test_blank_grid(self):
        assert blank_grid(2, 3) == [["", "", ""], ["", "", ""]]


class TestCellText:
    def test_booleans_display_in_caps(self):
        assert cell_text(True) == "TRUE"
        assert cell_text(False) == "FALSE"

    def test_dates(self):
        assert cell_text(datetime(2024, 1, 2, 3, 4)) == "2024-01-02T03:04:00"

    def test_none_and_numbers(self):
        assert cell_text(None) == ""
        assert cell_text(3) == "3"
        assert as_string(2.5) == "2.5"


class TestAsNumber:
    def test_numbers_pass_through(self):
        assert as_number(3) == 3
        assert as_number(2.5) == 2.5

    def test_numeric_strings(self):
        assert as_number(" 7 ") == 7
        assert as_number("1.25") == 1.25

    @pytest.mark.parametrize("value", [None, True, "seven", datetime(2024, 1, 1)])
    def test_invalid_values_raise(self, value):
        with pytest.raises(CellValueError, match="Not a number"):
            as_number(value)


class TestAsBoolean:
    @pytest.mark.parametrize("value", [True, "TRUE", "yes", "1", 1])
    def test_truthy(self, value):
        assert as_boolean(value) is True

    @pytest.mark.parametrize("value", [None, False, "false", "No", "", 0])
    def test_falsy(self, value):
        assert as_boolean(value) is False

    def test_other_text_raises(self):
        with pytest.raises(CellValueError, match="Not a boolean"):
            as_boolean("maybe")
