"""Greedy page layout for song sections.

Sections are placed in input order, which is song order, in a single
left-to-right pass without backtracking:

- a section stacks under the previous one while the column height and
  the widened column still fit the page;
- otherwise it opens a new column, or a new page when the column would
  not fit next to the existing ones;
- once a page is complete, leftover horizontal space is spread evenly
  over the gaps between its columns.

Examples
--------
>>> from chord_sheet.geometry import Area
>>> config = LayoutConfig(page_width=45, page_height=50, header_height=5)
>>> calculate_positions([Area(0, 0, 10, 10), Area(0, 0, 10, 10)], config)
[Point(x=0, y=5), Point(x=0, y=15)]
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, TypeVar

from chord_sheet.errors import LayoutError
from chord_sheet.geometry import Point
from chord_sheet.layout.models import LayoutConfig, LayoutPlan

logger = logging.getLogger(__name__)


class Sized(Protocol):
    """Anything with a width and a height in grid cells."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


S = TypeVar("S", bound=Sized)


def _check_fits(index: int, section: Sized, config: LayoutConfig) -> None:
    if section.width > config.available_width:
        msg = (
            f"Section {index + 1} is {section.width} columns wide, "
            f"but a page only holds {config.available_width}"
        )
        raise LayoutError(msg, index)
    if section.height > config.available_height:
        msg = (
            f"Section {index + 1} is {section.height} rows tall, "
            f"but a page only holds {config.available_height}"
        )
        raise LayoutError(msg, index)


def _used_width(widths: list[int], config: LayoutConfig) -> int:
    """Width taken by finished columns, including the gap after them."""
    if not widths:
        return 0
    return sum(widths) + len(widths) * config.horizontal_padding


def _pack(sections: Sequence[Sized], config: LayoutConfig) -> list[list[list[int]]]:
    pages: list[list[list[int]]] = []
    columns: list[list[int]] = []
    widths: list[int] = []
    column: list[int] = []
    column_width = column_height = 0
    page = 0

    for index, section in enumerate(sections):
        _check_fits(index, section, config)

        if column:
            stacked_height = column_height + config.vertical_padding + section.height
            stacked_width = _used_width(widths, config) + max(column_width, section.width)
            if stacked_height <= config.height_on(page) and stacked_width <= config.available_width:
                column.append(index)
                column_width = max(column_width, section.width)
                column_height = stacked_height
                continue
            columns.append(column)
            widths.append(column_width)

        fits_width = _used_width(widths, config) + section.width <= config.available_width
        if not (fits_width and section.height <= config.height_on(page)):
            logger.debug("Section %d starts page %d", index, page + 2)
            pages.append(columns)
            columns, widths = [], []
            page += 1

        column = [index]
        column_width, column_height = section.width, section.height

    if column:
        columns.append(column)
        pages.append(columns)
    return pages


def _justified_padding(widths: list[int], config: LayoutConfig) -> int:
    if len(widths) < 2:
        return config.horizontal_padding
    gaps = len(widths) - 1
    extra = config.available_width - sum(widths) - gaps * config.horizontal_padding
    return config.horizontal_padding + extra // gaps


def plan_layout(sections: Sequence[Sized], config: LayoutConfig) -> LayoutPlan:
    """Assign every section a page, a column and a position.

    Parameters
    ----------
    sections : Sequence[Sized]
        Section rectangles in song order.
    config : LayoutConfig
        Page geometry.

    Returns
    -------
    LayoutPlan
        Pages as columns of section indexes, and one position per section.
        Positions are relative to the first page's top-left corner.

    Raises
    ------
    LayoutError
        If a section is wider than a page or taller than a page without
        header. Nothing is laid out in that case.
    """
    pages = _pack(sections, config)
    positions: list[Point | None] = [None] * len(sections)

    for page, columns in enumerate(pages):
        widths = [max(sections[i].width for i in column) for column in columns]
        padding = _justified_padding(widths, config)
        origin = config.origin_of(page)
        x = origin.x
        for column, width in zip(columns, widths):
            y = origin.y
            for index in column:
                positions[index] = Point(x, y)
                y += sections[index].height + config.vertical_padding
            x += width + padding

    logger.debug("Laid out %d sections on %d pages", len(sections), len(pages))
    return LayoutPlan(
        pages=tuple(tuple(tuple(column) for column in columns) for columns in pages),
        positions=tuple(p for p in positions if p is not None),
    )


def calculate_layout(sections: Sequence[S], config: LayoutConfig) -> list[list[list[S]]]:
    """Group sections into pages of columns.

    Returns
    -------
    list[list[list[S]]]
        For each page, its columns left to right, each listing the input
        sections top to bottom. Empty input gives an empty list.
    """
    return [
        [[sections[index] for index in column] for column in columns]
        for columns in _pack(sections, config)
    ]


def calculate_positions(sections: Sequence[Sized], config: LayoutConfig) -> list[Point]:
    """Top-left position of every section, in input order."""
    return list(plan_layout(sections, config).positions)
