"""Error codes, structured error model and raisable exceptions for statgrid.

``GridError`` is a Pydantic model (data structure) used in result objects.
To raise errors in control flow, use ``GridProcessingException`` or one of
its subclasses, which wrap a ``GridError`` as the ``.error`` attribute.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Normalized error codes for the statgrid pipeline.

    Values equal their names so they are stable strings suitable for
    metrics and alerting.  ``E_`` prefix = fatal, ``W_`` prefix = warning.
    """

    # Grid errors
    E_GRID_INSUFFICIENT_ROWS = "E_GRID_INSUFFICIENT_ROWS"

    # Warnings (non-fatal)
    W_SHEET_SKIPPED_INSUFFICIENT = "W_SHEET_SKIPPED_INSUFFICIENT"
    W_HEADER_FALLBACK_DENSEST = "W_HEADER_FALLBACK_DENSEST"
    W_HEADER_FALLBACK_FIRST_ROW = "W_HEADER_FALLBACK_FIRST_ROW"
    W_DATA_START_DEFAULT = "W_DATA_START_DEFAULT"


class GridError(BaseModel):
    """Structured error with code, message, and sheet context."""

    code: ErrorCode
    message: str
    sheet_name: str | None = None
    stage: str | None = None
    recoverable: bool = False


class GridProcessingException(Exception):
    """Raisable exception wrapping a :class:`GridError` data model.

    Convenience properties delegate to the underlying error model for
    common fields (``code``, ``message``, ``stage``, ``recoverable``).
    """

    def __init__(self, **kwargs: object) -> None:
        self.error = GridError(**kwargs)  # type: ignore[arg-type]
        super().__init__(self.error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def stage(self) -> str | None:
        return self.error.stage

    @property
    def recoverable(self) -> bool:
        return self.error.recoverable


class InsufficientDataError(GridProcessingException):
    """Raised when a grid has too few rows to classify or merge."""

    def __init__(
        self,
        row_count: int,
        min_rows: int,
        sheet_name: str | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.E_GRID_INSUFFICIENT_ROWS,
            message=(
                f"Grid has {row_count} row(s); at least {min_rows} are required."
            ),
            sheet_name=sheet_name,
            stage="validate",
            recoverable=False,
        )
        self.row_count = row_count
        self.min_rows = min_rows
