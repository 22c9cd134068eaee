"""Unit tests for statgrid.cells -- tagged cells and raw conversion."""

from __future__ import annotations

import math
from datetime import date, datetime
from decimal import Decimal

import pytest

from statgrid.cells import (
    EMPTY,
    EmptyCell,
    NumberCell,
    TextCell,
    cell_at,
    format_number,
    parse_number,
    to_cell,
    to_grid,
    to_row,
)


class TestParseNumber:
    """Strict decimal parsing used by numeric coercion."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12", 12.0),
            ("  7 ", 7.0),
            ("-3.25", -3.25),
            ("+.5", 0.5),
            ("1e3", 1000.0),
        ],
    )
    def test_valid_numbers(self, text: str, expected: float) -> None:
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "12abc", "1,5", "nan", "inf", "1_000"])
    def test_rejected_strings(self, text: str) -> None:
        assert parse_number(text) is None

    def test_decimal_comma(self) -> None:
        assert parse_number(" 1,5 ", decimal_comma=True) == 1.5

    def test_decimal_comma_with_several_commas_rejected(self) -> None:
        assert parse_number("1,234,567", decimal_comma=True) is None

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12,5*", 12.5),
            (" 3,1 a", 3.1),
            ("1.234.567", 1.234),
            ("7%", 7.0),
            ("1e", 1.0),
        ],
    )
    def test_prefix_reads_leading_number(self, text: str, expected: float) -> None:
        assert parse_number(text, decimal_comma=True, prefix=True) == expected

    @pytest.mark.parametrize("text", ["", "-", "*12", "n/a", "inf"])
    def test_prefix_needs_leading_digits(self, text: str) -> None:
        assert parse_number(text, decimal_comma=True, prefix=True) is None

    def test_text_cell_prefix_coercion(self) -> None:
        cell = TextCell(value="12,5*")
        assert cell.as_number(decimal_comma=True) is None
        assert cell.as_number(decimal_comma=True, prefix=True) == 12.5


class TestFormatNumber:
    def test_integral_float_has_no_decimal_part(self) -> None:
        assert format_number(120.0) == "120"

    def test_fraction_kept(self) -> None:
        assert format_number(30.5) == "30.5"

    def test_negative_zero(self) -> None:
        assert format_number(-0.0) == "0"

    def test_infinity(self) -> None:
        assert format_number(math.inf) == "inf"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1e-7, "1e-7"),
            (2.5e-8, "2.5e-8"),
            (0.000001, "0.000001"),
            (1e21, "1e+21"),
            (1.5e21, "1.5e+21"),
            (1e20, "100000000000000000000"),
            (-0.5, "-0.5"),
            (2781.5, "2781.5"),
        ],
    )
    def test_exponent_boundaries(self, value: float, expected: str) -> None:
        assert format_number(value) == expected


class TestCellVariants:
    """Blank/empty tests and display strings for each variant."""

    def test_empty_cell(self) -> None:
        assert EMPTY.is_empty
        assert EMPTY.is_blank
        assert EMPTY.display() == ""
        assert EMPTY.as_number() is None

    def test_number_cell(self) -> None:
        cell = NumberCell(value=50)
        assert not cell.is_empty
        assert not cell.is_blank
        assert cell.display() == "50"
        assert cell.as_number() == 50.0

    def test_zero_is_filled(self) -> None:
        assert not NumberCell(value=0).is_empty

    def test_whitespace_text_is_blank_but_filled(self) -> None:
        cell = TextCell(value="   ")
        assert not cell.is_empty
        assert cell.is_blank

    def test_text_as_number_strict_by_default(self) -> None:
        assert TextCell(value="2,5").as_number() is None
        assert TextCell(value="2,5").as_number(decimal_comma=True) == 2.5

    def test_cells_are_frozen(self) -> None:
        cell = TextCell(value="x")
        with pytest.raises(Exception):  # noqa: B017
            cell.value = "y"  # type: ignore[misc]


class TestToCell:
    """Conversion of raw decoder values."""

    def test_none_and_empty_string_are_empty(self) -> None:
        assert isinstance(to_cell(None), EmptyCell)
        assert isinstance(to_cell(""), EmptyCell)

    def test_nan_is_empty(self) -> None:
        assert isinstance(to_cell(float("nan")), EmptyCell)

    def test_int_and_float_are_numbers(self) -> None:
        assert to_cell(3) == NumberCell(value=3.0)
        assert to_cell(2.5) == NumberCell(value=2.5)

    def test_decimal_is_number(self) -> None:
        assert to_cell(Decimal("1.25")) == NumberCell(value=1.25)

    def test_bool_is_text(self) -> None:
        assert to_cell(True) == TextCell(value="TRUE")
        assert to_cell(False) == TextCell(value="FALSE")

    def test_dates_are_iso_text(self) -> None:
        assert to_cell(date(2021, 3, 1)) == TextCell(value="2021-03-01")
        assert to_cell(datetime(2021, 3, 1, 8, 30)).display() == "2021-03-01T08:30:00"

    def test_string_kept_verbatim(self) -> None:
        assert to_cell("  Jakarta ") == TextCell(value="  Jakarta ")

    def test_cells_pass_through(self) -> None:
        cell = NumberCell(value=1)
        assert to_cell(cell) is cell


class TestGridConversion:
    def test_to_row_none_is_empty_row(self) -> None:
        assert to_row(None) == []

    def test_to_grid_keeps_jagged_rows(self) -> None:
        grid = to_grid([["a"], ["b", 1, None]])
        assert [len(row) for row in grid] == [1, 3]
        assert isinstance(grid[1][2], EmptyCell)

    def test_cell_at_out_of_range(self) -> None:
        row = to_row(["a"])
        assert cell_at(row, 5) is EMPTY
        assert cell_at(None, 0) is EMPTY
        assert cell_at(row, 0) == TextCell(value="a")
