"""Tests for the host entry points."""

import pytest
from conftest import sheet_values

from chord_sheet.geometry import Area
from chord_sheet.hooks import (
    EditEvent,
    on_change,
    on_edit,
    on_open,
    print_song,
    transpose_down,
    transpose_up,
)
from chord_sheet.host import MemorySheet, Notification

KEY = Area(0, 0, 1, 1)
AUTO_TRANSPOSE = Area(1, 0, 1, 1)

STAMPED_LYRICS = [
    [1, 2, 3, 4, 5],
    [2, "", "", "", ""],
    [3, "", "", "", ""],
    [4, "", "", "one", "two"],
    [5, "", "", "three", "four"],
]
STAMPED_CHORDS = [
    ["", "", "", ""],
    ["", "", "", ""],
    ["", "", "C", "G"],
    ["", "", "one", "two"],
    ["", "", "Am", "F"],
    ["", "", "three", "four"],
]


@pytest.fixture
def song(make_book):
    return make_book(
        chords=[["C", True, ""], ["Am", "", "G/B"], ["la", "", "li"]],
        chords_frozen=(1, 0),
        named={"Key": KEY, "Auto_Transpose": AUTO_TRANSPOSE},
    )


@pytest.fixture
def stamped(make_book):
    return make_book(
        lyrics=STAMPED_LYRICS,
        chords=STAMPED_CHORDS,
        named={"Side_Tray": Area(0, 0, 0, 0)},
    )


class TestOnOpen:
    """Test the open hook."""

    def test_writes_title(self, make_book) -> None:
        book = make_book(
            printed=MemorySheet("Print", [["", "", ""]]),
            named={"Title": Area(1, 0, 1, 1)},
        )
        on_open(book)
        assert sheet_values(book, "Print") == [["", "Song", ""]]

    def test_without_title_range(self, make_book) -> None:
        book = make_book(printed=MemorySheet("Print", [["", ""]]))
        on_open(book)
        assert sheet_values(book, "Print") == [["", ""]]
        assert book.document.notifications == []

    def test_missing_print_sheet_is_reported(self, book) -> None:
        assert on_open(book) is None
        assert book.document.notifications == [
            Notification(
                title="Unexpected error in onOpen hook",
                message='Sheet "Print" not found',
                level="warning",
            )
        ]


class TestOnEdit:
    """Test edit dispatch."""

    def test_lyrics_edit_syncs_to_chords(self, book) -> None:
        on_edit(book, EditEvent("Lyrics", Area(3, 3, 3, 2)))
        assert sheet_values(book, "Chords")[3] == ["4", " ", "A", "B", "C"]
        assert sheet_values(book, "Chords")[5] == ["6", " ", "D", "E", "F"]

    def test_chords_edit_restores_lyrics(self, book) -> None:
        book.document.sheet("Chords").write(Area(2, 3, 1, 1), [["typo"]])
        on_edit(book, EditEvent("Chords", Area(2, 3, 1, 1)))
        assert sheet_values(book, "Chords")[3] == ["4", " ", "A", "b", "c"]

    def test_key_edit_transposes(self, song) -> None:
        song.document.sheet("Chords").write(KEY, [["D"]])
        on_edit(song, EditEvent("Chords", KEY, "C"))
        assert sheet_values(song, "Chords") == [
            ["D", True, ""],
            ["Bm", "", "A/C#"],
            ["la", "", "li"],
        ]

    def test_other_sheets_are_ignored(self, book) -> None:
        before = sheet_values(book, "Chords")
        on_edit(book, EditEvent("Print", Area(0, 0, 5, 5)))
        assert sheet_values(book, "Chords") == before
        assert book.document.notifications == []

    def test_non_library_errors_propagate(self, book) -> None:
        with pytest.raises(AttributeError):
            on_edit(book, None)


class TestOnChange:
    """Test the change hook."""

    def test_structural_change_replays_rows(self, stamped) -> None:
        lyrics = stamped.document.sheet("Lyrics")
        lyrics.insert_rows(4)
        lyrics.write(Area(3, 4, 2, 1), [["new", "line"]])

        on_change(stamped, "INSERT_ROW")

        values = sheet_values(stamped, "Chords")
        assert len(values) == 8
        assert values[5] == ["", "", "new", "line"]
        assert values[6][2:] == ["Am", "F"]

    def test_other_changes_are_ignored(self, stamped) -> None:
        stamped.document.sheet("Lyrics").insert_rows(4)
        on_change(stamped, "FORMAT")
        assert [row[0] for row in sheet_values(stamped, "Lyrics")] == [1, 2, 3, 4, None, 5]
        assert sheet_values(stamped, "Chords") == STAMPED_CHORDS


class TestTransposeHooks:
    """Test the transpose menu entries."""

    def test_up(self, song) -> None:
        transpose_up(song)
        assert sheet_values(song, "Chords")[:2] == [["C#", True, ""], ["A#m", "", "G#/C"]]

    def test_down(self, song) -> None:
        transpose_down(song)
        assert sheet_values(song, "Chords")[:2] == [["B", True, ""], ["G#m", "", "F#/A#"]]

    def test_without_key_range(self, make_book) -> None:
        book = make_book(chords=[["", ""], ["Am", "G/B"], ["la", "li"]], chords_frozen=(1, 0))
        transpose_up(book)
        assert sheet_values(book, "Chords")[1] == ["A#m", "G#/C"]
        assert book.document.notifications == []


class TestPrintSong:
    """Test the print menu entry."""

    def test_reports_page_count(self, make_book) -> None:
        book = make_book(
            printed=MemorySheet("Print", [[""] * 10 for _ in range(12)]),
            named={"Print_Header": Area(0, 0, 10, 2), "Print_Footer": Area(0, 11, 10, 1)},
        )
        assert print_song(book) == 1
        assert book.document.notifications == [
            Notification(title="Print", message="1 page ready", level="success")
        ]

    def test_missing_print_sheet_is_reported(self, book) -> None:
        assert print_song(book) is None
        (notification,) = book.document.notifications
        assert notification.title == "Print failed"
        assert notification.level == "warning"
