"""A structured two-dimensional grid filled point by point."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GridPoint2D:
    """A grid node: its (i, j) index and its (x, y) position."""

    i: int
    j: int
    x: float
    y: float


class Grid2D:
    """An nx by ny grid whose nodes are added with i varying fastest."""

    def __init__(self, nx: int, ny: int) -> None:
        if nx < 1 or ny < 1:
            raise ValueError("grid dimensions must be at least 1")
        self.nx = nx
        self.ny = ny
        self._points: list[GridPoint2D] = []

    @property
    def points(self) -> tuple[GridPoint2D, ...]:
        return tuple(self._points)

    def add_point(self, x: float, y: float) -> None:
        """Add a node at the next free index; ignored once the grid is full."""
        ij = self._next_ij()
        if ij is None:
            return
        i, j = ij
        self._points.append(GridPoint2D(i, j, x, y))

    def num_pts(self) -> int:
        return len(self._points)

    def extents(self) -> tuple[float, float, float, float]:
        """Return (min_x, max_x, min_y, max_y), always taking in the origin."""
        min_x = max_x = min_y = max_y = 0.0
        for point in self._points:
            if point.x < min_x:
                min_x = point.x
            elif point.x > max_x:
                max_x = point.x
            if point.y < min_y:
                min_y = point.y
            elif point.y > max_y:
                max_y = point.y
        return min_x, max_x, min_y, max_y

    def _next_ij(self) -> tuple[int, int] | None:
        if not self._points:
            return 0, 0
        last = self._points[-1]
        if last.i == self.nx - 1 and last.j == self.ny - 1:
            return None
        if last.i == self.nx - 1:
            return 0, last.j + 1
        return last.i + 1, last.j