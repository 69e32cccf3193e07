"""Workbook configuration.

Sheet names, named regions and print spacing used by the sync and print
flows. Defaults match the workbook template; every value can be
overridden through :meth:`WorkbookConfig.from_mapping`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from chord_sheet.errors import ConfigurationError

LYRICS_SHEET_NAME = "Lyrics"
CHORDS_SHEET_NAME = "Chords"
PRINT_SHEET_NAME = "Print"

SIDE_TRAY_RANGE_NAME = "Side_Tray"
CHORDS_HEADER_RANGE_NAME = "Chords_Header"
KEY_RANGE_NAME = "Key"
AUTOTRANSPOSE_RANGE_NAME = "Auto_Transpose"
PRINT_HEADER_RANGE_NAME = "Print_Header"
PRINT_FOOTER_RANGE_NAME = "Print_Footer"
TITLE_RANGE_NAME = "Title"

# Host change types that may have moved rows or columns
STRUCTURAL_CHANGES = frozenset({"INSERT_ROW", "INSERT_COLUMN", "REMOVE_ROW", "REMOVE_COLUMN", "OTHER"})


@dataclass(frozen=True)
class WorkbookConfig:
    """Names and print spacing for one workbook.

    Parameters
    ----------
    lyrics_sheet, chords_sheet, print_sheet : str
        Sheet names.
    side_tray_range : str
        Named region of reserved columns at the right of the lyrics sheet.
    chords_header_range, key_range, autotranspose_range : str
        Named regions of the chords sheet header.
    print_header_range, print_footer_range, title_range : str
        Named regions of the print sheet.
    horizontal_padding, vertical_padding : int
        Minimum gap between printed columns / stacked sections.
    margin_left, margin_right, margin_top, margin_bottom : int
        Page content margins, in cells.
    """

    lyrics_sheet: str = LYRICS_SHEET_NAME
    chords_sheet: str = CHORDS_SHEET_NAME
    print_sheet: str = PRINT_SHEET_NAME
    side_tray_range: str = SIDE_TRAY_RANGE_NAME
    chords_header_range: str = CHORDS_HEADER_RANGE_NAME
    key_range: str = KEY_RANGE_NAME
    autotranspose_range: str = AUTOTRANSPOSE_RANGE_NAME
    print_header_range: str = PRINT_HEADER_RANGE_NAME
    print_footer_range: str = PRINT_FOOTER_RANGE_NAME
    title_range: str = TITLE_RANGE_NAME
    horizontal_padding: int = 2
    vertical_padding: int = 1
    margin_left: int = 1
    margin_right: int = 1
    margin_top: int = 1
    margin_bottom: int = 0

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> WorkbookConfig:
        """Build a config from a plain mapping, rejecting unknown keys.

        Examples
        --------
        >>> WorkbookConfig.from_mapping({"vertical_padding": 0}).vertical_padding
        0
        """
        known = {f.name: f.type for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            msg = f"Unknown configuration keys: {', '.join(unknown)}"
            raise ConfigurationError(msg)
        for key, value in data.items():
            expected = int if known[key] == "int" else str
            if not isinstance(value, expected) or isinstance(value, bool):
                msg = f"Configuration key {key!r} must be {expected.__name__}, got {value!r}"
                raise ConfigurationError(msg)
        return cls(**data)

    @classmethod
    def from_file(cls, path: str | Path) -> WorkbookConfig:
        return cls.from_mapping(json.loads(Path(path).read_text()))
