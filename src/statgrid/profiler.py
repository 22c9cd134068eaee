"""Infers a display type and a short summary for each data column."""

from __future__ import annotations

import logging

from statgrid.cells import Row, cell_at, format_number
from statgrid.config import GridProcessorConfig
from statgrid.models import ColumnProfile, ColumnType

logger = logging.getLogger("statgrid")


class ColumnProfiler:
    """Classifies columns as numeric, categorical or free text."""

    def __init__(self, config: GridProcessorConfig | None = None) -> None:
        self._config = config or GridProcessorConfig()

    def profile_all(self, headers: list[str], rows: list[Row]) -> list[ColumnProfile]:
        """Profile every column using the leading sample of *rows*."""
        sample = rows[: self._config.profile_sample_rows]
        return [self.profile(index, name, sample) for index, name in enumerate(headers)]

    def profile(
        self, column_index: int, column_name: str, sample_rows: list[Row]
    ) -> ColumnProfile:
        """Profile one column.

        Args:
            column_index: Position of the column in each row.
            column_name: Final header for the column.
            sample_rows: Data rows to inspect, already limited by the caller.

        Returns:
            A :class:`ColumnProfile`.  Columns with no values are ``text``
            with ``"-"`` as their summary.
        """
        cfg = self._config
        values = [
            cell
            for cell in (cell_at(row, column_index) for row in sample_rows)
            if not cell.is_blank
        ]

        if not values:
            return ColumnProfile(name=column_name, type=ColumnType.TEXT, sample_values="-")

        numbers = [cell.as_number() for cell in values]
        if all(n is not None for n in numbers):
            low = format_number(min(numbers))  # type: ignore[type-var]
            high = format_number(max(numbers))  # type: ignore[type-var]
            return ColumnProfile(
                name=column_name,
                type=ColumnType.NUMERIC,
                sample_values=f"{low} - {high}",
            )

        distinct: dict[str, None] = {}
        for cell in values:
            distinct.setdefault(cell.display().strip(), None)

        if len(distinct) <= cfg.categorical_max_distinct:
            samples = list(distinct)[: cfg.categorical_sample_count]
            return ColumnProfile(
                name=column_name,
                type=ColumnType.CATEGORICAL,
                sample_values=", ".join(samples),
            )

        logger.debug(
            "Column %d has %d distinct values; profiled as text.",
            column_index,
            len(distinct),
        )
        samples = [cell.display() for cell in values[: cfg.text_sample_count]]
        return ColumnProfile(
            name=column_name, type=ColumnType.TEXT, sample_values=", ".join(samples)
        )
