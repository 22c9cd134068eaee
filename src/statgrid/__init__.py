"""statgrid -- header reconstruction and column profiling for raw sheet grids.

Public API re-exports for convenient access.
"""

from statgrid.cells import (
    EMPTY,
    Cell,
    EmptyCell,
    Grid,
    NumberCell,
    Row,
    TextCell,
    to_cell,
    to_grid,
    to_row,
)
from statgrid.classifier import RowClassifier
from statgrid.config import GridProcessorConfig
from statgrid.errors import (
    ErrorCode,
    GridError,
    GridProcessingException,
    InsufficientDataError,
)
from statgrid.merger import HeaderCandidates, HeaderMerger, OrderedLabels
from statgrid.models import (
    CleanResult,
    ColumnProfile,
    ColumnType,
    DataBlock,
    DataStart,
    DataStartReason,
    RowSignals,
    SheetProfile,
    WorkbookProfile,
)
from statgrid.processor import GridProcessor
from statgrid.profiler import ColumnProfiler

__all__ = [
    # Cells
    "Cell",
    "EmptyCell",
    "NumberCell",
    "TextCell",
    "EMPTY",
    "Row",
    "Grid",
    "to_cell",
    "to_row",
    "to_grid",
    # Pipeline
    "GridProcessor",
    "RowClassifier",
    "HeaderMerger",
    "HeaderCandidates",
    "OrderedLabels",
    "ColumnProfiler",
    # Models
    "ColumnType",
    "DataStartReason",
    "RowSignals",
    "DataStart",
    "DataBlock",
    "ColumnProfile",
    "CleanResult",
    "SheetProfile",
    "WorkbookProfile",
    # Errors
    "ErrorCode",
    "GridError",
    "GridProcessingException",
    "InsufficientDataError",
    # Config
    "GridProcessorConfig",
]
