"""Header merging for stacked, merged-cell spreadsheet headers.

Statistical tables often spread one logical header over several rows, with
a group label written once in the left-most cell of a merged span::

    |        | Gender |        |
    | Region | Male   | Female |

:class:`HeaderMerger` collects the header rows above the first data row,
forward-fills the blank cells of every row but the last, and joins the
labels of each column into a single string (``"Gender - Male"``).
"""

from __future__ import annotations

import logging
from typing import Iterator

from pydantic import BaseModel

from statgrid.cells import Grid, Row, cell_at
from statgrid.config import GridProcessorConfig
from statgrid.models import DataBlock

logger = logging.getLogger("statgrid")


class OrderedLabels:
    """Insertion-ordered unique header labels."""

    def __init__(self) -> None:
        self._labels: list[str] = []
        self._seen: set[str] = set()

    def add(self, label: str) -> None:
        if label not in self._seen:
            self._seen.add(label)
            self._labels.append(label)

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def join(self, separator: str) -> str:
        return separator.join(self._labels)


class HeaderCandidates(BaseModel):
    """Header rows collected above the data start, top to bottom."""

    rows: list[Row]
    first_row_fallback: bool = False


class HeaderMerger:
    """Builds one flat header row from the stacked rows above the data."""

    def __init__(self, config: GridProcessorConfig | None = None) -> None:
        self._config = config or GridProcessorConfig()

    def merge(
        self, grid: Grid, data_start_index: int, max_cols: int
    ) -> tuple[list[str], DataBlock]:
        """Merge the header rows and split off the data block.

        Parameters
        ----------
        grid:
            The full sheet as rows of cells.  It is not modified.
        data_start_index:
            Index of the first data row, as returned by the classifier.
        max_cols:
            Width of the widest scanned row.

        Returns
        -------
        tuple[list[str], DataBlock]
            The final headers (one per column) and the data rows.
        """
        candidates = self.collect_candidates(grid, data_start_index)
        headers = self.merge_candidates(candidates.rows, max_cols)
        return headers, self.data_block(grid, data_start_index, len(headers))

    def collect_candidates(self, grid: Grid, data_start_index: int) -> HeaderCandidates:
        """Walk upward from the data start collecting non-blank header rows.

        A fully blank row ends the walk once a header row has been found.
        Returned rows are copies owned by the caller.
        """
        collected: list[Row] = []
        cursor = data_start_index - 1
        while cursor >= 0 and len(collected) < self._config.max_header_rows:
            if cursor >= len(grid):
                cursor -= 1
                continue
            row = grid[cursor]
            has_content = any(not cell.is_blank for cell in row)
            if not has_content and collected:
                break
            if has_content:
                collected.insert(0, list(row))
            cursor -= 1

        if not collected:
            logger.debug("No header rows above row %d; using row 0.", data_start_index)
            first = list(grid[0]) if grid else []
            return HeaderCandidates(rows=[first], first_row_fallback=True)
        return HeaderCandidates(rows=collected)

    def merge_candidates(self, candidates: list[Row], max_cols: int) -> list[str]:
        """Join the candidate rows column by column into final header strings.

        Blank cells in every row but the last inherit the already-filled
        value on their left, so a merged span labels each column it covers.
        Columns are processed strictly left to right.
        """
        cfg = self._config
        col_count = max(max_cols, len(candidates[0]) if candidates else 0)
        buffers = [_padded(row, col_count) for row in candidates]
        last = len(buffers) - 1

        headers: list[str] = []
        for col in range(col_count):
            labels = OrderedLabels()
            for position, buffer in enumerate(buffers):
                cell = buffer[col]
                if position != last and cell.is_blank and col > 0:
                    left = buffer[col - 1]
                    if not left.is_blank:
                        cell = left
                        buffer[col] = left
                if not cell.is_blank:
                    labels.add(cell.display().strip())
            if labels:
                headers.append(labels.join(cfg.header_separator))
            else:
                headers.append(cfg.placeholder_template.format(index=col + 1))

        if cfg.log_sample_data:
            logger.debug("Merged %d header row(s): %s", len(buffers), headers)
        else:
            logger.debug(
                "Merged %d header row(s) into %d column(s).", len(buffers), col_count
            )
        return headers

    @staticmethod
    def data_block(grid: Grid, data_start_index: int, col_count: int) -> DataBlock:
        """Rows from *data_start_index* to the end, in original order."""
        return DataBlock(
            rows=[list(row) for row in grid[data_start_index:]],
            col_count=col_count,
        )


def _padded(row: Row, width: int) -> Row:
    return [cell_at(row, c) for c in range(max(width, len(row)))]
