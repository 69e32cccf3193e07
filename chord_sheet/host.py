"""Host document interface and an in-memory implementation.

The core never talks to a spreadsheet directly. It reads and writes
rectangular regions through the :class:`Sheet` and :class:`Document`
protocols below. :class:`MemoryDocument` implements them over nested
lists; it backs the test-suite and the command line tool.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Literal, Protocol

from chord_sheet.cells import CellValue, Grid, is_blank
from chord_sheet.errors import GeometryError
from chord_sheet.geometry import Area

logger = logging.getLogger(__name__)

Level = Literal["info", "success", "warning", "error"]


class Sheet(Protocol):
    """One grid of a host document."""

    @property
    def name(self) -> str: ...

    @property
    def row_count(self) -> int: ...

    @property
    def column_count(self) -> int: ...

    @property
    def frozen_row_count(self) -> int: ...

    @property
    def frozen_column_count(self) -> int: ...

    @property
    def last_row_with_content(self) -> int: ...

    def read(self, area: Area) -> Grid: ...

    def write(self, area: Area, values: Grid) -> None: ...

    def is_merged(self, area: Area) -> bool: ...


class Document(Protocol):
    """A host document: named sheets plus named regions."""

    @property
    def name(self) -> str: ...

    def sheet(self, name: str) -> Sheet | None: ...

    def named_area(self, name: str) -> Area | None: ...

    def notify(self, title: str, message: str = "", level: Level = "info") -> None: ...


class MemorySheet:
    """A sheet stored as a rectangular list of rows.

    Reads outside the stored extent return ``None`` cells; writes outside
    it grow the sheet. Structural edits leave inserted cells blank, which
    is how a spreadsheet host behaves.

    Parameters
    ----------
    name : str
        Sheet name.
    values : Grid | None
        Initial content; ragged rows are padded with ``None``.
    frozen_rows, frozen_columns : int
        Header sizes.
    merged : list[Area] | None
        Areas the host treats as single merged cells.
    """

    def __init__(
        self,
        name: str,
        values: Grid | None = None,
        *,
        frozen_rows: int = 0,
        frozen_columns: int = 0,
        merged: list[Area] | None = None,
    ) -> None:
        self._name = name
        self._rows: Grid = [list(row) for row in values or []]
        self._width = max((len(row) for row in self._rows), default=0)
        for row in self._rows:
            row.extend([None] * (self._width - len(row)))
        self.frozen_rows = frozen_rows
        self.frozen_columns = frozen_columns
        self.merged = list(merged or [])

    @property
    def name(self) -> str:
        return self._name

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        return self._width

    @property
    def frozen_row_count(self) -> int:
        return self.frozen_rows

    @property
    def frozen_column_count(self) -> int:
        return self.frozen_columns

    @property
    def last_row_with_content(self) -> int:
        """1-based index of the last row holding a non-blank cell (0 if none)."""
        for index in range(len(self._rows) - 1, -1, -1):
            if any(not is_blank(cell) for cell in self._rows[index]):
                return index + 1
        return 0

    @property
    def values(self) -> Grid:
        """A copy of the full content."""
        return [list(row) for row in self._rows]

    def read(self, area: Area) -> Grid:
        return [
            [self._cell(row, column) for column in range(area.x, area.x + area.width)]
            for row in range(area.y, area.y + area.height)
        ]

    def write(self, area: Area, values: Grid) -> None:
        if len(values) != area.height or any(len(row) != area.width for row in values):
            msg = f"Values do not match {area}"
            raise GeometryError(msg)
        if area.x < 0 or area.y < 0:
            msg = f"Cannot write to {area}"
            raise GeometryError(msg)
        self._grow(area.y + area.height, area.x + area.width)
        for offset, row in enumerate(values):
            self._rows[area.y + offset][area.x : area.x + area.width] = row

    def is_merged(self, area: Area) -> bool:
        return area in self.merged

    def insert_rows(self, before: int, count: int = 1) -> None:
        """Insert blank rows before the 0-indexed row ``before``."""
        for _ in range(count):
            self._rows.insert(before, [None] * self._width)

    def delete_rows(self, start: int, count: int = 1) -> None:
        del self._rows[start : start + count]

    def insert_columns(self, before: int, count: int = 1) -> None:
        for row in self._rows:
            row[before:before] = [None] * count
        self._width += count

    def delete_columns(self, start: int, count: int = 1) -> None:
        removed = max(0, min(count, self._width - start))
        for row in self._rows:
            del row[start : start + count]
        self._width -= removed

    def _cell(self, row: int, column: int) -> CellValue:
        if 0 <= row < len(self._rows) and 0 <= column < self._width:
            return self._rows[row][column]
        return None

    def _grow(self, height: int, width: int) -> None:
        if width > self._width:
            for row in self._rows:
                row.extend([None] * (width - self._width))
            self._width = width
        while len(self._rows) < height:
            self._rows.append([None] * self._width)

    def to_dict(self) -> dict[str, Any]:
        return {
            "values": self.values,
            "frozen_rows": self.frozen_rows,
            "frozen_columns": self.frozen_columns,
            "merged": [[a.x, a.y, a.width, a.height] for a in self.merged],
        }

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> MemorySheet:
        return cls(
            name,
            data.get("values", []),
            frozen_rows=data.get("frozen_rows", 0),
            frozen_columns=data.get("frozen_columns", 0),
            merged=[Area(*area) for area in data.get("merged", [])],
        )


@dataclass(frozen=True)
class Notification:
    """A message the host would show to the user."""

    title: str
    message: str
    level: Level


@dataclass
class MemoryDocument:
    """A document holding :class:`MemorySheet` objects and named regions.

    Named regions are stored as absolute areas. Unlike a spreadsheet host
    they do not move when rows or columns are inserted.
    """

    name: str = "Untitled"
    sheets: dict[str, MemorySheet] = field(default_factory=dict)
    named_areas: dict[str, Area] = field(default_factory=dict)
    notifications: list[Notification] = field(default_factory=list)

    def add_sheet(self, sheet: MemorySheet) -> MemorySheet:
        self.sheets[sheet.name] = sheet
        return sheet

    def sheet(self, name: str) -> MemorySheet | None:
        return self.sheets.get(name)

    def named_area(self, name: str) -> Area | None:
        return self.named_areas.get(name)

    def notify(self, title: str, message: str = "", level: Level = "info") -> None:
        logger.info("%s: %s %s", level, title, message)
        self.notifications.append(Notification(title=title, message=message, level=level))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "sheets": {name: sheet.to_dict() for name, sheet in self.sheets.items()},
            "named_ranges": {
                name: [area.x, area.y, area.width, area.height]
                for name, area in self.named_areas.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MemoryDocument:
        """Load a document from its JSON form.

        Examples
        --------
        >>> doc = MemoryDocument.from_dict({
        ...     "name": "Song",
        ...     "sheets": {"Lyrics": {"values": [["1"]], "frozen_rows": 1}},
        ...     "named_ranges": {"Key": [2, 0, 1, 1]},
        ... })
        >>> doc.sheet("Lyrics").frozen_row_count, doc.named_area("Key")
        (1, Area(2, 0, 1, 1))
        """
        return cls(
            name=data.get("name", "Untitled"),
            sheets={
                name: MemorySheet.from_dict(name, sheet)
                for name, sheet in data.get("sheets", {}).items()
            },
            named_areas={name: Area(*area) for name, area in data.get("named_ranges", {}).items()},
        )
