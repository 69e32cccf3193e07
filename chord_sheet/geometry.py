"""Immutable 2D coordinate and rectangle value types.

Every region of a document (a whole sheet, its frozen header, a single
cell, a detected section) is expressed as an :class:`Area`. Areas never
mutate: each operation returns a new value, and the constructor itself
normalises negative sizes, so every produced area has a non-negative
width and height.

Examples
--------
>>> Area(5, 5, -2, -3)
Area(3, 2, 2, 3)
>>> Area(0, 0, 4, 4).intersect(Area(2, 2, 4, 4))
Area(2, 2, 2, 2)
>>> Point(1, 1).by(Point(-1, 2))
Area(0, 1, 1, 2)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from chord_sheet.errors import ScaleError


def _integral(value: float, name: str) -> int:
    """Return ``value`` as an int, rejecting non-integral numbers."""
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    msg = f"Non-integral {name}: {value!r}"
    raise ScaleError(msg)


def _finite(factor: float) -> float:
    if not isinstance(factor, (int, float)) or not math.isfinite(factor):
        msg = f"Invalid scale factor: {factor!r}"
        raise ScaleError(msg)
    return factor


@dataclass(frozen=True)
class Point:
    """A position or size vector on the grid.

    Parameters
    ----------
    x : int
        Column coordinate (0-indexed).
    y : int
        Row coordinate (0-indexed).
    """

    x: int
    y: int

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> Point:
        """Multiply both coordinates; the result must stay integral.

        Raises
        ------
        ScaleError
            If the factor is not finite or a coordinate becomes fractional.
        """
        factor = _finite(factor)
        return Point(_integral(self.x * factor, "x"), _integral(self.y * factor, "y"))

    @property
    def neg(self) -> Point:
        return self.scale(-1)

    def by(self, size: Point) -> Area:
        """Build the area spanned from this point by a (signed) size.

        A negative component extends the area backward from this corner.

        Examples
        --------
        >>> Point(4, 4).by(Point(-2, 3))
        Area(2, 4, 2, 3)
        """
        return Area(self.x, self.y, size.x, size.y)

    def to(self, other: Point) -> Area:
        """Build the area between this point and ``other``, in any order."""
        return self.by(other.sub(self))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


ORIGIN = Point(0, 0)


def X(x: int) -> Point:  # noqa: N802
    """Horizontal vector."""
    return Point(x, 0)


def Y(y: int) -> Point:  # noqa: N802
    """Vertical vector."""
    return Point(0, y)


@dataclass(frozen=True)
class Area:
    """A rectangle on the grid with non-negative size.

    Parameters
    ----------
    x, y : int
        Top-left corner (0-indexed column and row).
    width, height : int
        Size. A negative value is absorbed by shifting the corresponding
        origin coordinate back and taking the absolute value.

    Raises
    ------
    ScaleError
        If any component is not integral.
    """

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        x = _integral(self.x, "x")
        y = _integral(self.y, "y")
        width = _integral(self.width, "width")
        height = _integral(self.height, "height")
        if width < 0:
            x, width = x + width, -width
        if height < 0:
            y, height = y + height, -height
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)

    @property
    def start(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Point:
        return Point(self.width, self.height)

    @property
    def end(self) -> Point:
        return self.start.add(self.size)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def copy(
        self,
        *,
        x: int | None = None,
        y: int | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> Area:
        return Area(
            self.x if x is None else x,
            self.y if y is None else y,
            self.width if width is None else width,
            self.height if height is None else height,
        )

    def translate(self, offset: Point | None = None, *, x: int = 0, y: int = 0) -> Area:
        """Move the area by an offset, given as a point or as ``x``/``y``."""
        if offset is not None:
            x, y = offset.x, offset.y
        return self.copy(x=self.x + x, y=self.y + y)

    def translate_to(self, *, x: int | None = None, y: int | None = None) -> Area:
        return self.copy(x=x, y=y)

    def scale(self, *, x: float = 1, y: float = 1) -> Area:
        """Scale position and size, rounding partial cells outward.

        The start is floored and the end is ceiled, so a scaled area always
        covers every cell its fractional image touches.

        Examples
        --------
        >>> Area(1, 3, 2, 2).scale(y=0.5)
        Area(1, 1, 2, 2)
        >>> Area(1, 1, 3, 2).scale(y=2)
        Area(1, 2, 3, 4)
        """
        x, y = _finite(x), _finite(y)
        new_x = math.floor(self.x * x)
        new_y = math.floor(self.y * y)
        return Area(
            new_x,
            new_y,
            math.ceil((self.x + self.width) * x) - new_x,
            math.ceil((self.y + self.height) * y) - new_y,
        )

    def resize_by(self, *, x: float = 1, y: float = 1) -> Area:
        """Multiply the size only; the result must stay integral."""
        x, y = _finite(x), _finite(y)
        return self.copy(width=self.width * x, height=self.height * y)

    def resize(self, *, x: int = 0, y: int = 0) -> Area:
        """Grow (or shrink) the size by a delta."""
        return self.copy(width=self.width + x, height=self.height + y)

    def resize_to(self, *, x: int | None = None, y: int | None = None) -> Area:
        return self.copy(width=x, height=y)

    def columns(self, count: int) -> Area:
        """Select the first ``count`` columns, or the last ``-count`` if negative."""
        if count >= 0:
            return self.copy(width=min(count, self.width))
        return self.copy(x=self.x + max(0, self.width + count), width=min(-count, self.width))

    def rows(self, count: int) -> Area:
        """Select the first ``count`` rows, or the last ``-count`` if negative."""
        if count >= 0:
            return self.copy(height=min(count, self.height))
        return self.copy(y=self.y + max(0, self.height + count), height=min(-count, self.height))

    def relative_to(self, origin: Point) -> Area:
        return self.translate(origin.neg)

    def overlaps_with(self, other: Area) -> bool:
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def intersect(self, other: Area) -> Area:
        """Return the common part of both areas, or :data:`EMPTY`."""
        if not self.overlaps_with(other):
            return EMPTY
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        return Area(
            x,
            y,
            min(self.x + self.width, other.x + other.width) - x,
            min(self.y + self.height, other.y + other.height) - y,
        )

    def crop(self, *, left: int = 0, top: int = 0, right: int = 0, bottom: int = 0) -> Area:
        return Area(
            self.x + left,
            self.y + top,
            self.width - left - right,
            self.height - top - bottom,
        )

    def __repr__(self) -> str:
        return f"Area({self.x}, {self.y}, {self.width}, {self.height})"


EMPTY = Area(0, 0, 0, 0)
