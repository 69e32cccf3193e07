"""Synchronisation between the lyrics and chords sheets.

Examples
--------
>>> from chord_sheet.sync import StructuralChange, apply_structural_row_changes
>>> apply_structural_row_changes([["C"], ["la"]], [StructuralChange(1, 1)])
[[''], [''], ['C'], ['la']]
"""

from chord_sheet.sync.content import sync_lyrics_from_chords, sync_lyrics_to_chords, sync_structure
from chord_sheet.sync.structural import (
    StructuralChange,
    apply_structural_column_changes,
    apply_structural_row_changes,
    detect_changes,
    restamp,
)
from chord_sheet.sync.transpose import (
    disable_autotranspose_if_key_invalid,
    handle_key_change,
    transpose_all_chords,
)

__all__ = [
    "StructuralChange",
    "apply_structural_column_changes",
    "apply_structural_row_changes",
    "detect_changes",
    "disable_autotranspose_if_key_invalid",
    "handle_key_change",
    "restamp",
    "sync_lyrics_from_chords",
    "sync_lyrics_to_chords",
    "sync_structure",
    "transpose_all_chords",
]
