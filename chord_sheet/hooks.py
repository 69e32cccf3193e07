"""Entry points called by the host document.

Each hook runs one flow against an explicit :class:`Workbook`. Library
errors never escape a hook: they are logged and reported to the user as a
single warning notification.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from chord_sheet.cells import CellValue
from chord_sheet.config import STRUCTURAL_CHANGES
from chord_sheet.errors import ChordSheetError
from chord_sheet.geometry import EMPTY, Area
from chord_sheet.layout import render_print_sheet
from chord_sheet.spaces import Workbook
from chord_sheet.sync import (
    disable_autotranspose_if_key_invalid,
    handle_key_change,
    sync_lyrics_from_chords,
    sync_lyrics_to_chords,
    sync_structure,
    transpose_all_chords,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")


@dataclass(frozen=True)
class EditEvent:
    """A user edit reported by the host.

    Parameters
    ----------
    sheet_name : str
        Name of the edited sheet.
    area : Area
        Edited region, in absolute coordinates of that sheet.
    old_value : CellValue
        Previous value, reported by the host for single-cell edits only.
    """

    sheet_name: str
    area: Area
    old_value: CellValue = None


def _guarded(title: str) -> Callable[[Callable[..., R]], Callable[..., R | None]]:
    """Report library errors through the host instead of raising them."""

    def decorator(func: Callable[..., R]) -> Callable[..., R | None]:
        @functools.wraps(func)
        def wrapper(book: Workbook, *args: object) -> R | None:
            try:
                return func(book, *args)
            except ChordSheetError as error:
                logger.warning("%s: %s", title, error, exc_info=True)
                book.notify(title, str(error), level="warning")
                return None

        return wrapper

    return decorator


def update_document_title(book: Workbook) -> None:
    """Write the document name into the print sheet's title cell, if any."""
    if book.print.named_area(book.config.title_range, EMPTY).is_empty:
        return
    title = book.print.title
    if title is not None:
        title.set_value(book.document.name)


@_guarded("Unexpected error in onOpen hook")
def on_open(book: Workbook) -> None:
    update_document_title(book)


@_guarded("Unexpected error in onEdit hook")
def on_edit(book: Workbook, event: EditEvent) -> None:
    """Dispatch an edit to the flows of the edited sheet."""
    if event.sheet_name == book.config.lyrics_sheet:
        sync_lyrics_to_chords(book, event.area)
    elif event.sheet_name == book.config.chords_sheet:
        handle_key_change(book, event.area, event.old_value)
        disable_autotranspose_if_key_invalid(book, event.area)
        sync_lyrics_from_chords(book, event.area)


@_guarded("Unexpected error in onChange hook")
def on_change(book: Workbook, change_type: str) -> None:
    """Replay structural edits of the lyrics sheet on the chords sheet."""
    if change_type in STRUCTURAL_CHANGES:
        sync_structure(book)


@_guarded("Transpose failed")
def transpose_up(book: Workbook) -> None:
    transpose_all_chords(book, 1)


@_guarded("Transpose failed")
def transpose_down(book: Workbook) -> None:
    transpose_all_chords(book, -1)


@_guarded("Print failed")
def print_song(book: Workbook) -> int:
    """Render the print sheet and report the page count."""
    pages = render_print_sheet(book)
    book.notify("Print", f"{pages} page{'s' if pages != 1 else ''} ready", level="success")
    return pages
