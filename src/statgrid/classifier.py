"""Rule-based locator for the first data row of a raw grid.

Scans the top of a sheet and picks the first row that carries genuine data
values rather than title text or stacked column labels.  Two numeric
signals are evaluated per row, top-down, and the first match wins:

* **float values** -- the row contains non-integer numbers and is not
  mostly year labels;
* **dense numeric** -- more than half the filled cells are numbers, the row
  is not mostly year labels and it has enough filled cells.

Rows containing an explicit header keyword (region/table vocabulary used by
statistical agencies) are never selected.  When no row qualifies, the
densest row is assumed to be the header and data starts below it.

All thresholds live in :class:`~statgrid.config.GridProcessorConfig`.
"""

from __future__ import annotations

import logging

from statgrid.cells import Grid, Row
from statgrid.config import GridProcessorConfig
from statgrid.models import DataStart, DataStartReason, RowSignals

logger = logging.getLogger("statgrid")


class RowClassifier:
    """Decides which row index is the first row of actual data."""

    def __init__(self, config: GridProcessorConfig | None = None) -> None:
        self._config = config or GridProcessorConfig()

    # -- public API ----------------------------------------------------------

    def classify(self, grid: Grid) -> int:
        """Return the index of the first data row (always >= 1)."""
        return self.locate(grid).index

    def locate(self, grid: Grid) -> DataStart:
        """Locate the first data row and report which rule chose it.

        Args:
            grid: Rows of cells as produced by :func:`~statgrid.cells.to_grid`.

        Returns:
            A :class:`DataStart` with the index, the deciding rule and the
            width of the widest scanned row.
        """
        window = self.scan_window(grid)
        max_cols = self.max_cols(grid)

        found: int | None = None
        reason = DataStartReason.DEFAULT

        for index, row in enumerate(window):
            signals = self.inspect_row(row, max_cols, index=index)
            if signals.too_narrow or signals.is_explicit_header:
                logger.debug(
                    "Row %d skipped (narrow=%s, explicit_header=%s).",
                    index,
                    signals.too_narrow,
                    signals.is_explicit_header,
                )
                continue
            matched = self._match(signals)
            if matched is not None:
                found, reason = index, matched
                logger.debug("Row %d is the first data row (%s).", index, matched.value)
                break

        if found is None:
            found = self._densest_row_fallback(window)
            if found is not None:
                reason = DataStartReason.DENSEST_ROW_FALLBACK
                logger.debug(
                    "No numeric data row in first %d rows; densest row %d "
                    "taken as header.",
                    len(window),
                    found - 1,
                )

        index = found if found is not None and found >= 1 else 1
        return DataStart(
            index=index,
            reason=reason,
            max_cols=max_cols,
            scanned_rows=len(window),
        )

    def scan_window(self, grid: Grid) -> list[Row]:
        """The leading rows examined by the classifier."""
        return grid[: self._config.scan_row_limit]

    def max_cols(self, grid: Grid) -> int:
        """Width of the widest row in the scan window."""
        return max((len(row) for row in self.scan_window(grid)), default=0)

    def inspect_row(self, row: Row, max_cols: int, index: int = 0) -> RowSignals:
        """Evaluate the classification counters for a single row."""
        cfg = self._config
        too_narrow = len(row) < max_cols * cfg.narrow_row_ratio

        filled_count = sum(1 for cell in row if not cell.is_empty)
        numeric_count = 0
        year_like_count = 0
        float_count = 0
        for cell in row:
            value = cell.as_number(decimal_comma=True, prefix=True)
            if value is None:
                continue
            numeric_count += 1
            if value.is_integer():
                if cfg.year_lower_bound < value < cfg.year_upper_bound:
                    year_like_count += 1
            else:
                float_count += 1

        row_text = " ".join(cell.display().lower() for cell in row)
        is_explicit_header = any(kw in row_text for kw in cfg.header_keywords)
        is_year_header = year_like_count > filled_count * cfg.year_ratio_threshold

        return RowSignals(
            index=index,
            width=len(row),
            too_narrow=too_narrow,
            filled_count=filled_count,
            numeric_count=numeric_count,
            year_like_count=year_like_count,
            float_count=float_count,
            is_explicit_header=is_explicit_header,
            is_year_header=is_year_header,
        )

    # -- internal helpers ----------------------------------------------------

    def _match(self, signals: RowSignals) -> DataStartReason | None:
        if signals.is_year_header:
            return None
        if signals.float_count > 0:
            return DataStartReason.FLOAT_VALUES
        cfg = self._config
        if (
            signals.numeric_count > signals.filled_count * cfg.numeric_ratio_threshold
            and signals.filled_count > cfg.min_filled_for_dense_row
        ):
            return DataStartReason.DENSE_NUMERIC
        return None

    @staticmethod
    def _densest_row_fallback(window: list[Row]) -> int | None:
        """Index just below the first row with the most filled cells."""
        best: int | None = None
        max_filled = 0
        for index, row in enumerate(window):
            filled = sum(1 for cell in row if not cell.is_empty)
            if filled > max_filled:
                max_filled = filled
                best = index + 1
        return best
