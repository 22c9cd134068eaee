"""Pydantic data models and enumerations for statgrid.

This module defines the result layer shared by the pipeline stages:
per-row classifier signals, the ``DataBlock`` produced by header merging,
column profiles, and the two public outputs -- ``CleanResult`` for the
cleaning use case and ``SheetProfile`` / ``WorkbookProfile`` for profiling.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from statgrid.cells import EMPTY, Cell, Row, cell_at
from statgrid.errors import GridError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ColumnType(str, Enum):
    """Inferred type of a profiled column."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    TEXT = "text"


class DataStartReason(str, Enum):
    """Which rule chose the first data row."""

    FLOAT_VALUES = "float_values"
    DENSE_NUMERIC = "dense_numeric"
    DENSEST_ROW_FALLBACK = "densest_row_fallback"
    DEFAULT = "default"


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class RowSignals(BaseModel):
    """Counters evaluated for one scanned row."""

    index: int
    width: int
    too_narrow: bool
    filled_count: int
    numeric_count: int
    year_like_count: int
    float_count: int
    is_explicit_header: bool
    is_year_header: bool


class DataStart(BaseModel):
    """Outcome of locating the first data row."""

    index: int
    reason: DataStartReason
    max_cols: int
    scanned_rows: int


# ---------------------------------------------------------------------------
# Merged output
# ---------------------------------------------------------------------------


class DataBlock(BaseModel):
    """Grid rows from the data-start index onward, read up to ``col_count``.

    Rows keep their original content and length; positional reads beyond a
    row's end yield an empty cell.
    """

    rows: list[Row]
    col_count: int

    def __len__(self) -> int:
        return len(self.rows)

    def cell(self, row_index: int, col_index: int) -> Cell:
        if col_index >= self.col_count:
            return EMPTY
        return cell_at(self.rows[row_index], col_index)

    def padded_rows(self) -> list[Row]:
        """Rows truncated or padded with empty cells to ``col_count``."""
        return [
            [cell_at(row, c) for c in range(self.col_count)] for row in self.rows
        ]

    def preview(self, limit: int = 10) -> list[Row]:
        """The first *limit* rows, padded to ``col_count``."""
        return [
            [cell_at(row, c) for c in range(self.col_count)]
            for row in self.rows[:limit]
        ]

    def display_rows(self) -> list[list[str]]:
        """Padded rows as display strings, ready for a serializer."""
        return [[cell.display() for cell in row] for row in self.padded_rows()]


class ColumnProfile(BaseModel):
    """Display summary of one column -- not a full statistical profile."""

    name: str
    type: ColumnType
    sample_values: str


# ---------------------------------------------------------------------------
# Public outputs
# ---------------------------------------------------------------------------


class CleanResult(BaseModel):
    """Flattened headers and data rows for one sheet."""

    sheet_name: str | None = None
    headers: list[str]
    rows: DataBlock
    original_row_count: int
    skipped_row_count: int
    data_start_index: int
    header_row_count: int
    warnings: list[str] = []


class SheetProfile(BaseModel):
    """Column profiles for one sheet."""

    sheet_name: str
    columns: list[ColumnProfile]
    row_count: int
    raw_preview: list[Row]


class WorkbookProfile(BaseModel):
    """Profiles for every usable sheet of a workbook."""

    sheets: list[SheetProfile] = []
    skipped_sheets: dict[str, str] = {}
    warnings: list[str] = []
    error_details: list[GridError] = []
