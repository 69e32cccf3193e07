"""Keep the lyric rows of the chords sheet in sync with the lyrics sheet.

Lyric line ``i`` of the lyrics working area is shown on row ``2 * i + 1``
of the chords working area, under its chord row ``2 * i``. Columns map one
to one. Edits on either side are projected through those two rules.
"""

from __future__ import annotations

import logging

from chord_sheet.cells import Grid
from chord_sheet.geometry import Area
from chord_sheet.spaces import Workbook
from chord_sheet.sync.structural import (
    StructuralChange,
    apply_structural_column_changes,
    apply_structural_row_changes,
    detect_changes,
    restamp,
)

logger = logging.getLogger(__name__)


def _replace_lyric_rows(target: Grid, lyrics: Grid) -> Grid:
    for offset, row in enumerate(lyrics):
        target[offset * 2 + 1] = row
    return target


def sync_lyrics_to_chords(book: Workbook, area: Area) -> None:
    """Copy an edited region of the lyrics sheet onto the chords sheet.

    Parameters
    ----------
    book : Workbook
        Workbook to update.
    area : Area
        Edited region of the lyrics sheet, in absolute coordinates. Only
        its part inside the lyrics working area is copied.

    Notes
    -----
    The chords sheet grows when the projected region reaches past its
    current extent. Chord rows inside the region are written back
    unchanged.
    """
    lyrics_main = book.lyrics.main.area
    source = lyrics_main.intersect(area)
    if source.is_empty:
        return

    target_area = (
        source.relative_to(lyrics_main.start).scale(y=2).translate(book.chords.main.start)
    )
    target = book.chords.sub(lambda _: target_area)
    lyrics = book.lyrics.sub(lambda _: source).get_values()

    logger.debug("Syncing lyrics %r to chords %r", source, target_area)
    target.set_values(_replace_lyric_rows(target.get_values(), lyrics))


def sync_lyrics_from_chords(book: Workbook, area: Area) -> None:
    """Restore lyric rows of the chords sheet touched by an edit.

    Lyrics are owned by the lyrics sheet: any chord/lyric row pair that
    intersects the edited region gets its lyric row rewritten from there.

    Examples
    --------
    An edit on a single chord row restores the lyric row just below it,
    since both belong to the same pair.
    """
    chords_main = book.chords.main.area
    edited = chords_main.intersect(area)
    if edited.is_empty:
        return

    pairs = edited.relative_to(chords_main.start).scale(y=0.5)
    source = book.lyrics.sub(lambda _: pairs.translate(book.lyrics.main.start))
    target = book.chords.sub(lambda _: pairs.scale(y=2).translate(chords_main.start))

    logger.debug("Restoring lyric rows %r from lyrics", target.area)
    target.set_values(_replace_lyric_rows(target.get_values(), source.get_values()))


def _pad(values: Grid, height: int, width: int) -> Grid:
    """Blank-fill a grid that shrank back to its former size."""
    width = max(width, max((len(row) for row in values), default=0))
    padded = [list(row) + [""] * (width - len(row)) for row in values]
    padded.extend([""] * width for _ in range(height - len(padded)))
    return padded


def _pre_edit_end(
    stamps: list[int | None], post_end: int, boundary_stamp: int | None = None
) -> int:
    """Last working line in stamp coordinates, as it was before the edit.

    Deleted lines are gone from the post-edit geometry. The stamp of the
    first line after the working area still tells where it ended; without
    one, the highest surviving stamp does.
    """
    if boundary_stamp is not None:
        return boundary_stamp - 1
    return max([post_end, *(stamp for stamp in stamps if stamp is not None)])


def _working_changes(stamps: list[int | None], start: int, end: int) -> list[StructuralChange]:
    """Changes inside ``start..end``; insertions may also append right after ``end``."""
    deletions = [c for c in detect_changes(stamps, start, end) if not c.is_insertion]
    insertions = [c for c in detect_changes(stamps, start, end + 1) if c.is_insertion]
    return sorted(deletions + insertions, key=lambda change: change.position, reverse=True)


def sync_structure(book: Workbook) -> None:
    """Replay row and column insertions/deletions of the lyrics sheet.

    Reads the stamped indexes of the lyrics sheet (restamping them for the
    next run), applies the detected changes to the chords working area,
    and finally re-syncs every lyric row.

    Notes
    -----
    Stamps are pre-edit coordinates, so the working area is bounded by its
    pre-edit end: the stamp of the first side tray column when there is a
    tray, otherwise the highest surviving stamp.
    """
    lyrics = book.lyrics
    column_stamps = restamp(lyrics.index_row)
    row_stamps = restamp(lyrics.index_column)

    frozen_columns = lyrics.sheet.frozen_column_count
    frozen_rows = lyrics.sheet.frozen_row_count
    main = lyrics.main.area

    boundary = frozen_columns + main.width
    tray_stamp = None
    if not lyrics.side_tray.is_empty and boundary < len(column_stamps):
        tray_stamp = column_stamps[boundary]
    column_end = _pre_edit_end(column_stamps[:boundary], boundary, tray_stamp)
    row_end = _pre_edit_end(row_stamps, frozen_rows + main.height)

    column_changes = _working_changes(column_stamps, frozen_columns + 1, column_end)
    row_changes = _working_changes(row_stamps, frozen_rows + 1, row_end)

    if column_changes or row_changes:
        target = book.chords.main
        values = target.get_values()
        height = len(values)
        width = len(values[0]) if values else 0
        values = apply_structural_column_changes(values, column_changes)
        values = apply_structural_row_changes(values, row_changes)
        logger.info(
            "Applied %d column and %d row changes to %s",
            len(column_changes),
            len(row_changes),
            book.chords.name,
        )
        target.set_values(_pad(values, height, width))

    sync_lyrics_to_chords(book, lyrics.main.area.resize_to(y=lyrics.last_row_with_content()))
