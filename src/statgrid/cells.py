"""Tagged cell values and raw-value conversion.

A grid cell is one of three closed variants -- ``EmptyCell``,
``NumberCell`` or ``TextCell`` -- discriminated on the ``kind`` field.
Spreadsheet decoders hand over plain Python values; :func:`to_grid`
converts them into cells once, so the classifier, merger and profiler
never inspect raw runtime types.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time
from decimal import Decimal
from typing import Annotated, Any, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


# ---------------------------------------------------------------------------
# Number helpers
# ---------------------------------------------------------------------------


def parse_number(
    text: str, decimal_comma: bool = False, prefix: bool = False
) -> float | None:
    """Parse *text* as a finite decimal number, or return ``None``.

    Surrounding whitespace is ignored.  With *decimal_comma* every comma is
    read as a decimal point first (``"1,5"`` -> ``1.5``).  Words such as
    ``"nan"`` or ``"inf"`` and digit separators like ``"1_000"`` are rejected.

    With *prefix* only the leading number is read and anything after it is
    ignored, so footnoted values like ``"12,5*"`` still count (``12.5``) and
    dotted thousands like ``"1.234.567"`` read as ``1.234``.
    """
    candidate = text.strip()
    if decimal_comma:
        candidate = candidate.replace(",", ".")
    if prefix:
        match = _NUMBER_RE.match(candidate)
    else:
        match = _NUMBER_RE.fullmatch(candidate)
    if match is None:
        return None
    value = float(match.group())
    if not math.isfinite(value):
        return None
    return value


def format_number(value: float) -> str:
    """Render *value* the way a spreadsheet shows it: ``120`` not ``120.0``.

    Uses the shortest round-trip digits.  Exponent notation kicks in below
    ``1e-6`` and from ``1e21`` up, written without zero padding (``1e-7``,
    ``1.5e+21``).
    """
    if not math.isfinite(value):
        return repr(value)
    if value == 0:
        return "0"
    if value < 0:
        return "-" + format_number(-value)
    _, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + int(exponent)
    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return "0." + "0" * -n + digits
    power = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


# ---------------------------------------------------------------------------
# Cell variants
# ---------------------------------------------------------------------------


class EmptyCell(BaseModel):
    """A cell with no value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["empty"] = "empty"

    @property
    def is_empty(self) -> bool:
        return True

    @property
    def is_blank(self) -> bool:
        return True

    def display(self) -> str:
        return ""

    def as_number(
        self, decimal_comma: bool = False, prefix: bool = False
    ) -> float | None:
        return None


class NumberCell(BaseModel):
    """A native numeric cell."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: float

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def is_blank(self) -> bool:
        return False

    def display(self) -> str:
        return format_number(self.value)

    def as_number(
        self, decimal_comma: bool = False, prefix: bool = False
    ) -> float | None:
        return self.value if math.isfinite(self.value) else None


class TextCell(BaseModel):
    """A text cell.  Whitespace-only text is blank but not empty."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    value: str

    @property
    def is_empty(self) -> bool:
        return self.value == ""

    @property
    def is_blank(self) -> bool:
        return not self.value.strip()

    def display(self) -> str:
        return self.value

    def as_number(
        self, decimal_comma: bool = False, prefix: bool = False
    ) -> float | None:
        return parse_number(self.value, decimal_comma=decimal_comma, prefix=prefix)


Cell = Annotated[Union[EmptyCell, NumberCell, TextCell], Field(discriminator="kind")]
Row = list[Cell]
Grid = list[Row]

EMPTY = EmptyCell()


# ---------------------------------------------------------------------------
# Conversion from decoder output
# ---------------------------------------------------------------------------


def to_cell(value: Any) -> EmptyCell | NumberCell | TextCell:
    """Convert a raw decoder value into a cell.

    ``None``, ``""`` and NaN become empty; booleans become ``TRUE``/``FALSE``
    text; dates and times become ISO text.  Cells pass through unchanged.
    """
    if isinstance(value, (EmptyCell, NumberCell, TextCell)):
        return value
    if value is None:
        return EMPTY
    if isinstance(value, bool):
        return TextCell(value="TRUE" if value else "FALSE")
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
        if math.isnan(number):
            return EMPTY
        return NumberCell(value=number)
    if isinstance(value, (datetime, date, time)):
        return TextCell(value=value.isoformat())
    text = value if isinstance(value, str) else str(value)
    if text == "":
        return EMPTY
    return TextCell(value=text)


def to_row(values: Iterable[Any] | None) -> Row:
    """Convert one raw row.  A missing row becomes an empty row."""
    if values is None:
        return []
    return [to_cell(v) for v in values]


def to_grid(rows: Iterable[Iterable[Any] | None]) -> Grid:
    """Convert a raw jagged grid (list of lists) into rows of cells."""
    return [to_row(r) for r in rows]


def cell_at(row: Row | None, index: int) -> EmptyCell | NumberCell | TextCell:
    """Return ``row[index]``, or :data:`EMPTY` when the row or cell is missing."""
    if row is None or index < 0 or index >= len(row):
        return EMPTY
    return row[index]
