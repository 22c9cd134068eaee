"""GridProcessor -- orchestrator and public API for the statgrid pipeline.

Routes one decoded sheet through the pipeline:

1. Normalize raw decoder values into cells via :func:`to_grid`.
2. Reject grids with too few rows (:class:`InsufficientDataError`).
3. Locate the first data row via :class:`RowClassifier`.
4. Collect and merge the header rows via :class:`HeaderMerger`.
5. For profiling, summarize each column via :class:`ColumnProfiler`.

``clean()`` returns the flattened headers and data rows; ``profile()``
returns column profiles; ``profile_workbook()`` profiles every sheet of a
workbook and skips the unusable ones instead of failing.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from statgrid.cells import Grid, to_grid
from statgrid.classifier import RowClassifier
from statgrid.config import GridProcessorConfig
from statgrid.errors import ErrorCode, GridError, InsufficientDataError
from statgrid.merger import HeaderMerger
from statgrid.models import (
    CleanResult,
    DataStartReason,
    SheetProfile,
    WorkbookProfile,
)
from statgrid.profiler import ColumnProfiler

logger = logging.getLogger("statgrid")

RawGrid = Iterable[Iterable[Any] | None]


class GridProcessor:
    """Top-level orchestrator for header reconstruction and profiling.

    Parameters
    ----------
    config:
        Pipeline configuration.  Uses defaults when *None*.
    """

    def __init__(self, config: GridProcessorConfig | None = None) -> None:
        self._config = config or GridProcessorConfig()
        self._classifier = RowClassifier(self._config)
        self._merger = HeaderMerger(self._config)
        self._profiler = ColumnProfiler(self._config)

    @property
    def config(self) -> GridProcessorConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def clean(self, grid: RawGrid, sheet_name: str | None = None) -> CleanResult:
        """Flatten the headers of one sheet and split off its data rows.

        Parameters
        ----------
        grid:
            Rows of raw decoder values or cells.  Rows may be jagged.
        sheet_name:
            Optional sheet name used for logging and error context.

        Returns
        -------
        CleanResult
            Final headers, the data block and row bookkeeping.

        Raises
        ------
        InsufficientDataError
            If the grid has fewer than ``min_grid_rows`` rows.
        """
        cells = self._prepare(grid, sheet_name)
        return self._clean_cells(cells, sheet_name)

    def profile(self, grid: RawGrid, sheet_name: str) -> SheetProfile:
        """Profile the columns of one sheet.

        Raises
        ------
        InsufficientDataError
            If the grid has fewer than ``min_grid_rows`` rows.
        """
        cells = self._prepare(grid, sheet_name)
        cleaned = self._clean_cells(cells, sheet_name)
        columns = self._profiler.profile_all(cleaned.headers, cleaned.rows.rows)
        return SheetProfile(
            sheet_name=sheet_name,
            columns=columns,
            row_count=len(cleaned.rows),
            raw_preview=cells[: self._config.raw_preview_rows],
        )

    def profile_workbook(self, sheets: Mapping[str, RawGrid]) -> WorkbookProfile:
        """Profile every sheet in order, skipping sheets without enough rows."""
        result = WorkbookProfile()
        for sheet_name, grid in sheets.items():
            try:
                result.sheets.append(self.profile(grid, sheet_name))
            except InsufficientDataError as exc:
                logger.warning(
                    "statgrid | sheet=%s | code=%s | detail=%s",
                    sheet_name,
                    ErrorCode.W_SHEET_SKIPPED_INSUFFICIENT.value,
                    exc.message,
                )
                result.skipped_sheets[sheet_name] = exc.message
                result.warnings.append(ErrorCode.W_SHEET_SKIPPED_INSUFFICIENT.value)
                result.error_details.append(
                    GridError(
                        code=ErrorCode.W_SHEET_SKIPPED_INSUFFICIENT,
                        message=exc.message,
                        sheet_name=sheet_name,
                        stage=exc.stage,
                        recoverable=True,
                    )
                )
        logger.info(
            "statgrid | profiled %d sheet(s), skipped %d.",
            len(result.sheets),
            len(result.skipped_sheets),
        )
        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _prepare(self, grid: RawGrid, sheet_name: str | None) -> Grid:
        cells = to_grid(grid)
        if len(cells) < self._config.min_grid_rows:
            raise InsufficientDataError(
                row_count=len(cells),
                min_rows=self._config.min_grid_rows,
                sheet_name=sheet_name,
            )
        return cells

    def _clean_cells(self, cells: Grid, sheet_name: str | None) -> CleanResult:
        start = self._classifier.locate(cells)
        candidates = self._merger.collect_candidates(cells, start.index)
        headers = self._merger.merge_candidates(candidates.rows, start.max_cols)
        block = self._merger.data_block(cells, start.index, len(headers))

        fallbacks: list[tuple[ErrorCode, str]] = []
        if start.reason == DataStartReason.DENSEST_ROW_FALLBACK:
            fallbacks.append(
                (
                    ErrorCode.W_HEADER_FALLBACK_DENSEST,
                    f"No data row in the first {start.scanned_rows} row(s); "
                    f"densest row {start.index - 1} taken as the header.",
                )
            )
        elif start.reason == DataStartReason.DEFAULT:
            fallbacks.append(
                (
                    ErrorCode.W_DATA_START_DEFAULT,
                    f"No filled row in the first {start.scanned_rows} row(s); "
                    f"data assumed to start at row {start.index}.",
                )
            )
        if candidates.first_row_fallback:
            fallbacks.append(
                (
                    ErrorCode.W_HEADER_FALLBACK_FIRST_ROW,
                    "No non-blank header row above the data; row 0 used as the header.",
                )
            )

        warnings: list[str] = []
        for code, detail in fallbacks:
            logger.warning(
                "statgrid | sheet=%s | code=%s | detail=%s",
                sheet_name,
                code.value,
                detail,
            )
            warnings.append(code.value)

        logger.info(
            "statgrid | sheet=%s | data_start=%d | reason=%s | header_rows=%d "
            "| columns=%d | data_rows=%d",
            sheet_name,
            start.index,
            start.reason.value,
            len(candidates.rows),
            len(headers),
            len(block),
        )
        return CleanResult(
            sheet_name=sheet_name,
            headers=headers,
            rows=block,
            original_row_count=len(cells),
            skipped_row_count=start.index,
            data_start_index=start.index,
            header_row_count=len(candidates.rows),
            warnings=warnings,
        )
