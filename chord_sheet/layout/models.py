"""Data models for section detection and page layout."""

from __future__ import annotations

from dataclasses import dataclass

from chord_sheet.cells import Grid
from chord_sheet.errors import ConfigurationError
from chord_sheet.geometry import Area, Point


@dataclass(frozen=True)
class SectionColumn:
    """A vertical super-column of the chords grid.

    Parameters
    ----------
    offset : int
        Column index of the super-column in the source grid.
    values : Grid
        The super-column's cells, all rows.
    """

    offset: int
    values: Grid

    @property
    def width(self) -> int:
        return len(self.values[0]) if self.values else 0


@dataclass(frozen=True)
class Section:
    """A contiguous run of non-empty chord/lyric row pairs.

    Parameters
    ----------
    start_row : int
        First row (a chord row), inclusive.
    end_row : int
        Row after the last one, exclusive.
    width : int
        Columns needed to show every chord and lyric of the section.
    column : int
        First column. Zero for sections local to a super-column.

    Examples
    --------
    >>> Section(start_row=4, end_row=8, width=6, column=10).area
    Area(10, 4, 6, 4)
    """

    start_row: int
    end_row: int
    width: int
    column: int = 0

    @property
    def height(self) -> int:
        return self.end_row - self.start_row

    @property
    def area(self) -> Area:
        return Area(self.column, self.start_row, self.width, self.height)


@dataclass(frozen=True)
class LayoutConfig:
    """Page geometry for the layout engine, in grid cells.

    Parameters
    ----------
    page_width : int
        Full width of one page; pages sit side by side at this stride.
    page_height : int
        Full height of one page.
    header_height : int
        Rows reserved at the top of the first page only.
    horizontal_padding : int
        Minimum gap between adjacent columns.
    vertical_padding : int
        Exact gap between stacked sections.
    margin_left, margin_right, margin_top, margin_bottom : int
        Content margins of every page.

    Raises
    ------
    ConfigurationError
        If no content fits on a page or a spacing value is negative.
    """

    page_width: int
    page_height: int
    header_height: int = 0
    horizontal_padding: int = 0
    vertical_padding: int = 0
    margin_left: int = 0
    margin_right: int = 0
    margin_top: int = 0
    margin_bottom: int = 0

    def __post_init__(self) -> None:
        spacing = (
            self.header_height,
            self.horizontal_padding,
            self.vertical_padding,
            self.margin_left,
            self.margin_right,
            self.margin_top,
            self.margin_bottom,
        )
        if any(value < 0 for value in spacing):
            msg = f"Negative spacing in {self}"
            raise ConfigurationError(msg)
        if self.available_width <= 0 or self.available_height <= 0:
            msg = f"No room for content on a {self.page_width}x{self.page_height} page"
            raise ConfigurationError(msg)

    @property
    def available_width(self) -> int:
        return self.page_width - self.margin_left - self.margin_right

    @property
    def available_height(self) -> int:
        """Content height of a page without the header."""
        return self.page_height - self.margin_top - self.margin_bottom

    def height_on(self, page: int) -> int:
        """Content height of a given page (0-indexed)."""
        return self.available_height - (self.header_height if page == 0 else 0)

    def origin_of(self, page: int) -> Point:
        """Top-left corner of a page's content, relative to the first page."""
        return Point(
            page * self.page_width + self.margin_left,
            self.margin_top + (self.header_height if page == 0 else 0),
        )


@dataclass(frozen=True)
class LayoutPlan:
    """Result of laying sections out on pages.

    Parameters
    ----------
    pages : tuple[tuple[tuple[int, ...], ...], ...]
        For each page, its columns, each a tuple of section indexes in
        top-to-bottom order.
    positions : tuple[Point, ...]
        Top-left corner of every input section, in input order.
    """

    pages: tuple[tuple[tuple[int, ...], ...], ...]
    positions: tuple[Point, ...]

    @property
    def page_count(self) -> int:
        """Number of pages; an empty layout still prints one page."""
        return max(1, len(self.pages))
