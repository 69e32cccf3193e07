"""Shared workbook fixtures."""

from collections.abc import Callable

import pytest

from chord_sheet.cells import Grid
from chord_sheet.geometry import Area
from chord_sheet.host import MemoryDocument, MemorySheet
from chord_sheet.spaces import Workbook

# Lyrics working area is columns 3-5 of rows 3-4; columns 6-7 are the tray
LYRICS: Grid = [
    ["1", "2", "3", "4", "5", "6", "7", "8"],
    ["2", " ", " ", " ", " ", " ", " ", " "],
    ["3", " ", " ", " ", " ", " ", " ", " "],
    ["4", " ", " ", "A", "B", "C", "t", "x"],
    ["5", " ", " ", "D", "E", "F", "u", "y"],
]

# Chords working area is columns 2-4 of rows 2-5
CHORDS: Grid = [
    ["1", "2", "3", "4", "5"],
    ["2", " ", " ", " ", " "],
    ["3", " ", " ", " ", " "],
    ["4", " ", "a", "b", "c"],
    ["5", " ", " ", " ", " "],
    ["6", " ", "d", "e", "f"],
]

SIDE_TRAY = Area(6, 0, 2, 5)

BookFactory = Callable[..., Workbook]


def build_book(
    lyrics: Grid = LYRICS,
    chords: Grid = CHORDS,
    *,
    lyrics_frozen: tuple[int, int] = (3, 3),
    chords_frozen: tuple[int, int] = (2, 2),
    named: dict[str, Area] | None = None,
    printed: MemorySheet | None = None,
) -> Workbook:
    doc = MemoryDocument(name="Song", named_areas={"Side_Tray": SIDE_TRAY, **(named or {})})
    doc.add_sheet(
        MemorySheet("Lyrics", lyrics, frozen_rows=lyrics_frozen[0], frozen_columns=lyrics_frozen[1])
    )
    doc.add_sheet(
        MemorySheet("Chords", chords, frozen_rows=chords_frozen[0], frozen_columns=chords_frozen[1])
    )
    if printed is not None:
        doc.add_sheet(printed)
    return Workbook(doc)


@pytest.fixture
def make_book() -> BookFactory:
    return build_book


@pytest.fixture
def book() -> Workbook:
    return build_book()


def sheet_values(book: Workbook, name: str) -> Grid:
    sheet = book.document.sheet(name)
    assert isinstance(sheet, MemorySheet)
    return sheet.values
