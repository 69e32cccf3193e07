"""Cell values and typed cell adapters.

A cell holds one of a closed set of value types. Typed accessors convert
explicitly and fail loudly instead of coercing whatever they find.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from chord_sheet.errors import CellValueError

CellValue = str | int | float | bool | datetime | None
Grid = list[list[CellValue]]

T = TypeVar("T")
Adapter = Callable[[CellValue], T]

TRUE_STRINGS = frozenset({"true", "yes", "1"})
FALSE_STRINGS = frozenset({"false", "no", "0", ""})


def is_blank(value: CellValue) -> bool:
    """Check whether a cell is visually empty.

    Examples
    --------
    >>> is_blank(None), is_blank("  "), is_blank(0)
    (True, True, False)
    """
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def cell_text(value: CellValue) -> str:
    """Return the text a cell displays."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def as_string(value: CellValue) -> str:
    return cell_text(value)


def as_number(value: CellValue) -> int | float:
    """Convert a cell to a number.

    Raises
    ------
    CellValueError
        If the value is blank, boolean, a date, or non-numeric text.
    """
    if isinstance(value, bool) or isinstance(value, datetime) or value is None:
        msg = f"Not a number: {value!r}"
        raise CellValueError(msg)
    if isinstance(value, (int, float)):
        return value
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        msg = f"Not a number: {value!r}"
        raise CellValueError(msg) from None


def as_boolean(value: CellValue) -> bool:
    """Convert a cell to a boolean (checkbox cells hold real booleans).

    Raises
    ------
    CellValueError
        If the value cannot be read as a boolean.
    """
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
    msg = f"Not a boolean: {value!r}"
    raise CellValueError(msg)


def blank_grid(height: int, width: int) -> Grid:
    return [["" for _ in range(width)] for _ in range(height)]
