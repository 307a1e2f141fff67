"""An n-dimensional point with element-wise arithmetic."""

from __future__ import annotations

from functools import total_ordering
from numbers import Number
from typing import Iterable, Iterator


def _format_coord(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@total_ordering
class Point:
    """A point whose coordinates are held in order, one per dimension."""

    __slots__ = ("_coords",)

    def __init__(self, coords: Iterable[Number]) -> None:
        self._coords = list(coords)

    @classmethod
    def origin(cls, dimensions: int) -> Point:
        """Return the point with every coordinate zero."""
        if dimensions < 0:
            raise ValueError("dimensions must not be negative")
        return cls([0] * dimensions)

    @property
    def coords(self) -> tuple:
        return tuple(self._coords)

    def dimensions(self) -> int:
        return len(self._coords)

    def _axis(self, index: int, name: str) -> Number:
        if index >= len(self._coords):
            raise AttributeError(
                f"a {len(self._coords)}-dimensional point has no {name} coordinate"
            )
        return self._coords[index]

    @property
    def x(self) -> Number:
        return self._axis(0, "x")

    @property
    def y(self) -> Number:
        return self._axis(1, "y")

    @property
    def z(self) -> Number:
        return self._axis(2, "z")

    def _check_same_dimensions(self, other: Point) -> None:
        if len(self._coords) != len(other._coords):
            raise ValueError(
                f"cannot combine points of {len(self._coords)} "
                f"and {len(other._coords)} dimensions"
            )

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        self._check_same_dimensions(other)
        return Point(a + b for a, b in zip(self._coords, other._coords))

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        self._check_same_dimensions(other)
        return Point(a - b for a, b in zip(self._coords, other._coords))

    def __getitem__(self, index: int) -> Number:
        return self._coords[index]

    def __setitem__(self, index: int, value: Number) -> None:
        self._coords[index] = value

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._coords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._coords == other._coords

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._coords < other._coords

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return "(" + ", ".join(_format_coord(c) for c in self._coords) + ")"

    def __repr__(self) -> str:
        return f"Point({self._coords!r})"