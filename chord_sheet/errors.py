"""Error taxonomy for chord-sheet.

Every error raised by the library derives from :class:`ChordSheetError`,
so host-facing entry points can catch a single base class at their
boundary.
"""

from __future__ import annotations


class ChordSheetError(Exception):
    """Base class for all chord-sheet errors."""


class ConfigurationError(ChordSheetError, LookupError):
    """A required sheet, named region or setting is missing or invalid."""


class GeometryError(ChordSheetError, ValueError):
    """A region was built with an invalid shape or origin."""


class ScaleError(GeometryError):
    """A scale or resize factor produced non-integral coordinates."""


class CellValueError(ChordSheetError, ValueError):
    """A typed cell accessor could not convert the stored value."""


class LayoutError(ChordSheetError, ValueError):
    """A section cannot be placed on any page.

    Parameters
    ----------
    message : str
        Human readable description.
    index : int | None
        Position of the offending section in the layout input.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
