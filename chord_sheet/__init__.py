"""Song sheets with lyrics and chords kept in sync.

A song workbook has a lyrics sheet (one row per lyric line), a chords
sheet (a chord row above every lyric line) and a print sheet. This
library keeps the chords sheet in step with the lyrics sheet, transposes
chords, and lays the song out on printable pages.

Examples
--------
>>> from chord_sheet import Area, transpose
>>> transpose("F#m7", 2)
'G#m7'
>>> Area(0, 0, 4, 4).intersect(Area(2, 2, 4, 4))
Area(2, 2, 2, 2)
"""

from chord_sheet.chords import parse_chord, parse_key, semitone_distance, transpose
from chord_sheet.config import WorkbookConfig
from chord_sheet.errors import (
    CellValueError,
    ChordSheetError,
    ConfigurationError,
    GeometryError,
    LayoutError,
    ScaleError,
)
from chord_sheet.geometry import EMPTY, ORIGIN, Area, Point
from chord_sheet.host import MemoryDocument, MemorySheet
from chord_sheet.spaces import Workbook

__version__ = "0.1.0"

__all__ = [
    "EMPTY",
    "ORIGIN",
    "Area",
    "CellValueError",
    "ChordSheetError",
    "ConfigurationError",
    "GeometryError",
    "LayoutError",
    "MemoryDocument",
    "MemorySheet",
    "Point",
    "ScaleError",
    "Workbook",
    "WorkbookConfig",
    "parse_chord",
    "parse_key",
    "semitone_distance",
    "transpose",
]
