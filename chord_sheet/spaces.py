"""Coordinate projection over a host document.

A :class:`Space` is a lazy view of a rectangular region of a sheet. Root
spaces cover a whole sheet; sub-spaces are defined by a projection
function applied to their parent's area on every access, so they always
reflect the parent's current geometry and never go stale after the host
resizes a sheet. Nothing is read from or written to the host until
:meth:`Space.get_values` / :meth:`Space.set_values` is called.

Examples
--------
>>> from chord_sheet.host import MemoryDocument, MemorySheet
>>> doc = MemoryDocument()
>>> _ = doc.add_sheet(MemorySheet("Chords", [[None] * 4] * 3, frozen_rows=1))
>>> chords = SheetSpace(doc, "Chords")
>>> chords.main.area
Area(0, 1, 4, 2)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from functools import cached_property
from typing import TYPE_CHECKING, Generic, TypeVar

from chord_sheet.cells import Adapter, CellValue, Grid, as_boolean, as_string, is_blank
from chord_sheet.config import WorkbookConfig
from chord_sheet.errors import ConfigurationError, GeometryError
from chord_sheet.geometry import EMPTY, ORIGIN, Area, Point

if TYPE_CHECKING:
    from chord_sheet.host import Document, Level, Sheet

T = TypeVar("T")
Projection = Callable[[Area], Area]

_MISSING = object()


class Space(ABC):
    """A rectangular region of one sheet."""

    @property
    @abstractmethod
    def area(self) -> Area:
        """Absolute area on the sheet, recomputed on every access."""

    @property
    @abstractmethod
    def sheet(self) -> Sheet:
        """The host sheet this space lives on."""

    @property
    def x(self) -> int:
        return self.area.x

    @property
    def y(self) -> int:
        return self.area.y

    @property
    def width(self) -> int:
        return self.area.width

    @property
    def height(self) -> int:
        return self.area.height

    @property
    def start(self) -> Point:
        return self.area.start

    @property
    def end(self) -> Point:
        return self.area.end

    @property
    def is_empty(self) -> bool:
        return self.area.is_empty

    def get_values(self) -> Grid:
        area = self.area
        return [] if area.is_empty else self.sheet.read(area)

    def set_values(self, values: Grid) -> None:
        """Write a grid anchored at this space's top-left corner.

        The grid may be larger than the space; the host grows as needed.
        Writing to an empty space is a no-op.
        """
        area = self.area
        if area.is_empty or not values:
            return
        self.sheet.write(area.start.by(Point(len(values[0]), len(values))), values)

    def sub(self, projection: Projection) -> SubSpace:
        return SubSpace(self, projection)

    def cell(
        self,
        adapter: Adapter[T],
        projection: Projection,
        default: T | None = None,
    ) -> CellSpace[T]:
        return CellSpace(self, adapter, projection, default)


class SheetSpace(Space):
    """The whole surface of one sheet.

    Parameters
    ----------
    document : Document
        Host document.
    name : str
        Sheet name.

    Raises
    ------
    ConfigurationError
        If the document has no sheet with that name.
    """

    def __init__(self, document: Document, name: str) -> None:
        sheet = document.sheet(name)
        if sheet is None:
            msg = f'Sheet "{name}" not found'
            raise ConfigurationError(msg)
        self.document = document
        self._sheet = sheet

    @property
    def sheet(self) -> Sheet:
        return self._sheet

    @property
    def name(self) -> str:
        return self._sheet.name

    @property
    def area(self) -> Area:
        return ORIGIN.by(Point(self._sheet.column_count, self._sheet.row_count))

    @property
    def frozen_rows(self) -> SubSpace:
        return self.sub(lambda area: area.rows(self._sheet.frozen_row_count))

    @property
    def frozen_columns(self) -> SubSpace:
        return self.sub(lambda area: area.columns(self._sheet.frozen_column_count))

    @property
    def unfrozen(self) -> SubSpace:
        """Everything right of the frozen columns and below the frozen rows."""
        return self.sub(
            lambda area: area.crop(
                left=self._sheet.frozen_column_count,
                top=self._sheet.frozen_row_count,
            )
        )

    @property
    def main(self) -> SubSpace:
        """The working area of the sheet."""
        return self.unfrozen

    def named_area(self, name: str, default: Area | object = _MISSING) -> Area:
        """Resolve a named region of the document.

        Raises
        ------
        ConfigurationError
            If the region is missing and no default was supplied.
        """
        area = self.document.named_area(name)
        if area is not None:
            return area
        if default is _MISSING:
            msg = f'Named range "{name}" not found'
            raise ConfigurationError(msg)
        return default  # type: ignore[return-value]

    def last_row_with_content(self) -> int:
        """Number of working rows up to the last row holding content."""
        return max(0, self._sheet.last_row_with_content - self._sheet.frozen_row_count)


class SubSpace(Space):
    """A region derived from a parent space by a projection.

    The projection receives the parent's current area; the result must
    not have a negative origin.
    """

    def __init__(self, parent: Space, projection: Projection) -> None:
        self.parent = parent
        self.projection = projection
        # fail fast on an invalid projection
        _ = self.area

    @property
    def sheet(self) -> Sheet:
        return self.parent.sheet

    @property
    def area(self) -> Area:
        area = self.projection(self.parent.area)
        if area.x < 0 or area.y < 0:
            msg = f"Invalid area for sub-space: {area}"
            raise GeometryError(msg)
        return area


class CellSpace(Space, Generic[T]):
    """A single logical cell with a typed accessor.

    Parameters
    ----------
    parent : Space
        Owning space.
    adapter : Adapter[T]
        Explicit conversion from the stored value.
    projection : Projection
        Maps the parent's area to the cell's area. The result must be 1x1,
        or an area the host reports as one merged cell.
    default : T | None
        Returned instead of converting when the cell is blank.
    """

    def __init__(
        self,
        parent: Space,
        adapter: Adapter[T],
        projection: Projection,
        default: T | None = None,
    ) -> None:
        self.parent = parent
        self.adapter = adapter
        self.projection = projection
        self.default = default
        _ = self.area

    @property
    def sheet(self) -> Sheet:
        return self.parent.sheet

    @property
    def area(self) -> Area:
        area = self.projection(self.parent.area)
        single = area.width == 1 and area.height == 1
        if area.x < 0 or area.y < 0 or not (single or (not area.is_empty and self.sheet.is_merged(area))):
            msg = f"Cell space must be 1x1, got {area}"
            raise GeometryError(msg)
        return area

    @property
    def anchor(self) -> Area:
        """The top-left cell, where a merged cell keeps its value."""
        return self.area.columns(1).rows(1)

    def get_value(self) -> T:
        raw: CellValue = self.sheet.read(self.anchor)[0][0]
        if is_blank(raw) and self.default is not None:
            return self.default
        return self.adapter(raw)

    def set_value(self, value: CellValue) -> None:
        self.sheet.write(self.anchor, [[value]])


class LyricsSheet(SheetSpace):
    """The lyrics sheet: one row per lyric line, a reserved tray on the right."""

    def __init__(self, document: Document, config: WorkbookConfig) -> None:
        super().__init__(document, config.lyrics_sheet)
        self.config = config

    @property
    def main(self) -> SubSpace:
        return self.unfrozen.sub(lambda area: area.crop(right=self.side_tray.width))

    @property
    def side_tray(self) -> SubSpace:
        return self.sub(
            lambda _: self.unfrozen.area.columns(
                -self.named_area(self.config.side_tray_range, EMPTY).width
            )
        )

    @property
    def index_column(self) -> SubSpace:
        """First column, holding the stamped row indexes."""
        return self.sub(lambda area: area.columns(1))

    @property
    def index_row(self) -> SubSpace:
        """First row, holding the stamped column indexes."""
        return self.sub(lambda area: area.rows(1))


class ChordsSheet(SheetSpace):
    """The chords sheet: each lyric row expands to a chord row and a lyric row."""

    def __init__(self, document: Document, config: WorkbookConfig) -> None:
        super().__init__(document, config.chords_sheet)
        self.config = config

    @property
    def header(self) -> SubSpace:
        return self.sub(lambda _: self.named_area(self.config.chords_header_range))

    @property
    def key(self) -> CellSpace[str]:
        return self.cell(as_string, lambda _: self.named_area(self.config.key_range))

    @property
    def autotranspose(self) -> CellSpace[bool]:
        return self.cell(
            as_boolean, lambda _: self.named_area(self.config.autotranspose_range)
        )


class PrintSheet(SheetSpace):
    """The printable sheet: pages laid side by side, one header, one footer."""

    def __init__(self, document: Document, config: WorkbookConfig) -> None:
        super().__init__(document, config.print_sheet)
        self.config = config

    @property
    def header(self) -> SubSpace:
        return self.sub(lambda _: self.named_area(self.config.print_header_range))

    @property
    def footer(self) -> SubSpace:
        return self.sub(lambda _: self.named_area(self.config.print_footer_range))

    @property
    def title(self) -> CellSpace[str] | None:
        area = self.named_area(self.config.title_range, EMPTY)
        if area.is_empty:
            return None
        return self.cell(as_string, lambda _: self.named_area(self.config.title_range))


class Workbook:
    """Explicit handle on a host document.

    Replaces global "active document" state: every flow receives the
    workbook it operates on.

    Parameters
    ----------
    document : Document
        Host document.
    config : WorkbookConfig | None
        Names and spacing; defaults to :class:`WorkbookConfig`.
    """

    def __init__(self, document: Document, config: WorkbookConfig | None = None) -> None:
        self.document = document
        self.config = config or WorkbookConfig()

    @cached_property
    def lyrics(self) -> LyricsSheet:
        return LyricsSheet(self.document, self.config)

    @cached_property
    def chords(self) -> ChordsSheet:
        return ChordsSheet(self.document, self.config)

    @cached_property
    def print(self) -> PrintSheet:
        return PrintSheet(self.document, self.config)

    def get(self, name: str) -> SheetSpace:
        """Return the sheet space for a sheet name.

        Raises
        ------
        ConfigurationError
            If ``name`` is not one of the workbook's sheets.
        """
        for sheet_name, attribute in (
            (self.config.lyrics_sheet, "lyrics"),
            (self.config.chords_sheet, "chords"),
            (self.config.print_sheet, "print"),
        ):
            if name == sheet_name:
                return getattr(self, attribute)
        msg = f'Unknown sheet: "{name}"'
        raise ConfigurationError(msg)

    def notify(self, title: str, message: str = "", level: Level = "info") -> None:
        self.document.notify(title, message, level)
