"""Section detection on the chords grid.

The chords grid alternates chord rows (even indexes) and lyric rows (odd
indexes). Detection runs in two passes:

1. Split the grid into vertical super-columns, starting a new one at every
   column where some lyric row begins its text.
2. Split each super-column into sections at fully blank chord/lyric row
   pairs.

Examples
--------
>>> grid = [
...     ["C", "", "", "G"],
...     ["Hello", "", "World", ""],
... ]
>>> [s.area for s in detect_sections(grid)]
[Area(0, 0, 3, 2), Area(2, 0, 3, 2)]
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from chord_sheet.cells import Grid, cell_text, is_blank
from chord_sheet.layout.models import Section, SectionColumn

logger = logging.getLogger(__name__)


def blank_mask(values: Grid) -> NDArray[np.bool_]:
    """Boolean mask of blank cells, shaped (rows, columns)."""
    if not values or not values[0]:
        return np.zeros((len(values), 0), dtype=bool)
    return np.array([[is_blank(cell) for cell in row] for row in values], dtype=bool)


def split_into_section_columns(values: Grid) -> list[SectionColumn]:
    """Split the grid into super-columns at lyric start boundaries.

    Chord-only and blank columns never start a super-column. Blank columns
    before the first content are discarded.

    Parameters
    ----------
    values : Grid
        Rectangular chords grid.

    Returns
    -------
    list[SectionColumn]
        Super-columns from left to right.
    """
    blank = blank_mask(values)
    if blank.size == 0:
        return []

    lyric_content = ~blank[1::2].all(axis=0)
    width = blank.shape[1]

    # Scan right to left; each lyric start closes the segment to its right
    columns: list[SectionColumn] = []
    end = width
    for column in range(width - 1, 0, -1):
        if lyric_content[column]:
            columns.append(_section_column(values, column, end))
            end = column

    occupied = np.flatnonzero(~blank[:, :end].all(axis=0))
    if occupied.size:
        columns.append(_section_column(values, int(occupied[0]), end))

    columns.reverse()
    return columns


def _section_column(values: Grid, start: int, end: int) -> SectionColumn:
    return SectionColumn(offset=start, values=[row[start:end] for row in values])


def split_into_sections(values: Grid) -> list[Section]:
    """Split a super-column into sections at empty row pairs.

    A row pair is empty when both its chord row and its lyric row are
    blank. Leading and trailing empty pairs are dropped.

    Parameters
    ----------
    values : Grid
        Rows of one super-column, starting with a chord row.

    Returns
    -------
    list[Section]
        Sections in top-to-bottom order, with ``column=0``.

    Examples
    --------
    >>> split_into_sections([["C"], ["Hi"], [""], [""], ["D"], ["Yo"]])
    [Section(start_row=0, end_row=2, width=2, column=0), Section(start_row=4, end_row=6, width=2, column=0)]
    """
    blank = blank_mask(values)
    row_count = len(values)
    sections: list[Section] = []
    start: int | None = None

    for row in range(0, row_count, 2):
        if blank[row : row + 2].all():
            if start is not None:
                sections.append(_section(values, start, row))
                start = None
        elif start is None:
            start = row

    if start is not None:
        sections.append(_section(values, start, row_count))
    return sections


def _section(values: Grid, start: int, end: int) -> Section:
    return Section(
        start_row=start,
        end_row=end,
        width=calculate_section_width(values[start:end]),
    )


def calculate_section_width(values: Grid) -> int:
    """Columns needed to display a section.

    Lyric text and chord names overflow their cells; two characters fit
    in one cell. Chord rows (even) reach up to their rightmost chord plus
    its overflow, lyric rows (odd) up to the end of their text.

    Examples
    --------
    >>> calculate_section_width([["", "", "", "C"], ["Hi", "", "", ""]])
    5
    >>> calculate_section_width([[""]])
    1
    """
    width = 1
    for index, row in enumerate(values):
        filled = [(column, cell_text(cell)) for column, cell in enumerate(row) if not is_blank(cell)]
        if not filled:
            continue
        if index % 2 == 0:
            column, text = filled[-1]
            width = max(width, column + 1 + math.ceil(len(text) / 2))
        else:
            width = max(width, *(column + math.ceil(len(text) / 2) for column, text in filled))
    return width


def detect_sections(values: Grid) -> list[Section]:
    """Detect every section of the chords grid.

    Returns
    -------
    list[Section]
        Sections in absolute grid coordinates, ordered by super-column
        (left to right) and then top to bottom.
    """
    sections = [
        Section(
            start_row=section.start_row,
            end_row=section.end_row,
            width=section.width,
            column=column.offset,
        )
        for column in split_into_section_columns(values)
        for section in split_into_sections(column.values)
    ]
    logger.debug("Detected %d sections", len(sections))
    return sections
