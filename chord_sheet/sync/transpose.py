"""Sheet-wide transposition of the chords grid."""

from __future__ import annotations

import logging

from chord_sheet.cells import CellValue, cell_text, is_blank
from chord_sheet.chords import mark_as_invalid, parse_chord, parse_key
from chord_sheet.geometry import EMPTY, Area
from chord_sheet.spaces import Workbook

logger = logging.getLogger(__name__)


def _transpose_cell(value: CellValue, semitones: int) -> CellValue:
    if is_blank(value):
        return value
    parsed = parse_chord(cell_text(value))
    return mark_as_invalid(value) if parsed is None else str(parsed.transpose(semitones))


def _named(book: Workbook, name: str) -> Area:
    return book.chords.named_area(name, EMPTY)


def transpose_all_chords(book: Workbook, semitones: int, update_key: bool = True) -> None:
    """Transpose every chord of the chords sheet.

    Parameters
    ----------
    book : Workbook
        Workbook to update.
    semitones : int
        Signed shift; zero is a no-op.
    update_key : bool
        Also transpose the key cell, when the workbook has one. Cells that
        are not chords, the key included, are prefixed with ``!`` instead.
    """
    if semitones == 0:
        return
    chords = book.chords

    if update_key and not _named(book, book.config.key_range).is_empty:
        key = chords.key
        text = key.get_value()
        if not is_blank(text):
            key.set_value(_transpose_cell(text, semitones))

    area = chords.main.area.resize_to(y=chords.last_row_with_content())
    if area.is_empty:
        return
    space = chords.sub(lambda _: area)
    values = space.get_values()
    for row in range(0, len(values), 2):
        values[row] = [_transpose_cell(cell, semitones) for cell in values[row]]
    space.set_values(values)
    logger.info("Transposed %s by %+d semitones", chords.name, semitones)


def handle_key_change(book: Workbook, area: Area, old_value: CellValue) -> None:
    """Transpose the song after the key cell was edited.

    Only acts when the edit touched the key cell, auto-transpose is on,
    and both the old and the new key are valid.
    """
    key_area = _named(book, book.config.key_range)
    if key_area.is_empty or not key_area.overlaps_with(area):
        return
    if _named(book, book.config.autotranspose_range).is_empty:
        return
    if not book.chords.autotranspose.get_value():
        return

    new_key = parse_key(book.chords.key.get_value())
    old_key = parse_key(cell_text(old_value))
    if new_key is None or old_key is None:
        logger.debug("Key change %r -> invalid key, not transposing", old_value)
        return
    transpose_all_chords(book, (new_key - old_key) % 12, update_key=False)


def disable_autotranspose_if_key_invalid(book: Workbook, area: Area) -> None:
    """Switch auto-transpose off when it was turned on with an invalid key."""
    autotranspose_area = _named(book, book.config.autotranspose_range)
    if autotranspose_area.is_empty or not autotranspose_area.overlaps_with(area):
        return
    autotranspose = book.chords.autotranspose
    if not autotranspose.get_value():
        return

    key = book.chords.key.get_value() if not _named(book, book.config.key_range).is_empty else ""
    if parse_key(key) is None:
        logger.info("Key %r is not valid, disabling auto-transpose", key)
        autotranspose.set_value(False)
