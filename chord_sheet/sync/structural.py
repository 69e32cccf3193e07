"""Structural change detection from stamped indexes.

The lyrics sheet carries a dense 1..N index in its first row and first
column. When the user inserts or deletes rows or columns, the host moves
the stamped cells along with the content: inserted lines show up as blank
stamps and deleted lines as gaps in the sequence. Comparing the stamps
against themselves is enough to replay the same edit on the chords grid.

Examples
--------
>>> detect_changes([1, None, 2, 4], start=1, end=4)
[StructuralChange(position=3, span=-1), StructuralChange(position=2, span=1)]
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from chord_sheet.cells import CellValue, Grid

if TYPE_CHECKING:
    from chord_sheet.spaces import Space

logger = logging.getLogger(__name__)

# Chord row plus lyric row
ROWS_PER_LINE = 2


@dataclass(frozen=True)
class StructuralChange:
    """An insertion or deletion of whole lines.

    Parameters
    ----------
    position : int
        1-based position, relative to the start of the working area,
        in pre-change coordinates.
    span : int
        Number of lines inserted (positive) or deleted (negative).
    """

    position: int
    span: int

    @property
    def is_insertion(self) -> bool:
        return self.span > 0


def _stamp(value: CellValue) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _raw_changes(indexes: Sequence[int | None]) -> list[tuple[int, int, int]]:
    """Yield ``(first, last, sign)`` ranges in absolute stamp coordinates, right to left."""
    changes: list[tuple[int, int, int]] = []
    index = len(indexes) - 1
    while index >= 0:
        value = indexes[index]
        if value is None:
            run_end = index
            while index >= 0 and indexes[index] is None:
                index -= 1
            length = run_end - index
            # leading runs have no stamped predecessor
            first = indexes[index] + 1 if index >= 0 else 1
            changes.append((first, first + length - 1, 1))
            continue

        if index == 0:
            expected = 1
        elif indexes[index - 1] is not None:
            expected = indexes[index - 1] + 1
        else:
            expected = value
        if value > expected:
            changes.append((expected, value - 1, -1))
        index -= 1
    return changes


def detect_changes(indexes: Sequence[int | None], start: int, end: int) -> list[StructuralChange]:
    """Detect inserted and deleted lines from a stamped index sequence.

    Parameters
    ----------
    indexes : Sequence[int | None]
        Stamps as currently found on the sheet; ``None`` marks a line
        inserted since the last stamping.
    start, end : int
        1-based inclusive bounds of the working area in stamp coordinates.
        Changes outside them are ignored and those straddling them are
        clipped.

    Returns
    -------
    list[StructuralChange]
        Changes ordered by descending position, so applying them in order
        never shifts a position that is still pending.

    Examples
    --------
    >>> detect_changes([1, 3, 5], 1, 5)
    [StructuralChange(position=4, span=-1), StructuralChange(position=2, span=-1)]
    >>> detect_changes([1, None, 2, 3, 4], 3, 5)
    []
    """
    changes: list[StructuralChange] = []
    for first, last, sign in _raw_changes(indexes):
        low, high = max(first, start), min(last, end)
        if low > high:
            continue
        changes.append(StructuralChange(position=low - start + 1, span=sign * (high - low + 1)))
    if changes:
        logger.debug("Detected structural changes: %s", changes)
    return changes


def _apply(grid: Grid, changes: Sequence[StructuralChange], axis: int, unit: int) -> Grid:
    if not grid:
        return []
    values = np.array(grid, dtype=object)

    for change in changes:
        size = values.shape[axis]
        at = min(max(0, (change.position - 1) * unit), size)
        count = abs(change.span) * unit
        if change.is_insertion:
            values = np.insert(values, [at] * count, "", axis=axis)
        else:
            values = np.delete(values, np.arange(at, min(at + count, size)), axis=axis)
    return values.tolist()


def apply_structural_column_changes(grid: Grid, changes: Sequence[StructuralChange]) -> Grid:
    """Replay column changes on a grid; inserted cells are blank strings.

    The input grid is never modified.

    Examples
    --------
    >>> grid = [["A", "B", "C", "D"], ["1", "2", "3", "4"]]
    >>> apply_structural_column_changes(
    ...     grid, [StructuralChange(4, 1), StructuralChange(2, -1)]
    ... )
    [['A', 'C', '', 'D'], ['1', '3', '', '4']]
    """
    return _apply(grid, changes, axis=1, unit=1)


def apply_structural_row_changes(grid: Grid, changes: Sequence[StructuralChange]) -> Grid:
    """Replay lyric line changes on a chords grid, two rows per line."""
    return _apply(grid, changes, axis=0, unit=ROWS_PER_LINE)


def read_stamps(space: Space) -> list[int | None]:
    """Stamped indexes of a one-row or one-column space, in order."""
    return [_stamp(cell) for row in space.get_values() for cell in row]


def restamp(space: Space) -> list[int | None]:
    """Read the current stamps, then write a dense ``1..N`` sequence.

    Returns
    -------
    list[int | None]
        The stamps found before rewriting.
    """
    stamps = read_stamps(space)
    if not stamps:
        return stamps
    numbers = list(range(1, len(stamps) + 1))
    if space.height == 1:
        space.set_values([numbers])
    else:
        space.set_values([[number] for number in numbers])
    return stamps
