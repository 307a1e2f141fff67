"""Straight lines and polynomials in the plane."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass
from typing import Callable, Iterable

_ROOT_MAX_ITERS = 1000
_ROOT_TOL = 1e-12
_REAL_ROOT_TOL = 1e-8


@dataclass(frozen=True)
class Cartesian2D:
    """A point given by its x and y coordinates."""

    x: float
    y: float


class StraightLine2D:
    """The line y = m*x + c."""

    __slots__ = ("m", "c")

    def __init__(self, m: float, c: float) -> None:
        self.m = float(m)
        self.c = float(c)

    @classmethod
    def from_cartesian_points(cls, p1: Cartesian2D, p2: Cartesian2D) -> StraightLine2D:
        """Return the line through two points; a vertical line cannot be built."""
        dx = p2.x - p1.x
        if dx == 0:
            raise ValueError("points share an x coordinate: the line is vertical")
        m = (p2.y - p1.y) / dx
        return cls(m, p1.y - m * p1.x)

    def eqn(self) -> Callable[[float], float]:
        """Return the line as a function of x."""
        m, c = self.m, self.c
        return lambda x: m * x + c

    def solve(self, x: float) -> float:
        return self.eqn()(x)

    def __str__(self) -> str:
        if self.m != 0.0 and self.c != 0.0:
            return f"y = {self.m:.2f}x + {self.c:.2f}"
        if self.m != 0.0:
            return f"y = {self.m:.2f}x"
        if self.c != 0.0:
            return f"y = {self.c:.2f}"
        return "y = 0"

    __repr__ = __str__


class Polynomial:
    """A polynomial with coefficients in descending order of power."""

    __slots__ = ("coefs",)

    def __init__(self, coefs: Iterable[float]) -> None:
        self.coefs = tuple(float(c) for c in coefs)
        if not self.coefs:
            raise ValueError("a polynomial needs at least one coefficient")

    def order(self) -> int:
        return len(self.coefs) - 1

    def roots(self) -> list[complex]:
        """Return every complex root, found by Durand-Kerner iteration."""
        n = self.order()
        if n == 0:
            return []

        leading = self.coefs[0]
        monic = [complex(c / leading, 0.0) for c in self.coefs]
        roots = [cmath.rect(1.0, 2.0 * math.pi * k / n) for k in range(n)]

        for _ in range(_ROOT_MAX_ITERS):
            converged = True
            new_roots = []
            for i, r_i in enumerate(roots):
                p_val = complex(1.0, 0.0)
                for coef in monic[1:]:
                    p_val = p_val * r_i + coef
                prod = complex(1.0, 0.0)
                for j, r_j in enumerate(roots):
                    if j != i:
                        prod *= r_i - r_j
                delta = p_val / prod
                new_roots.append(r_i - delta)
                if abs(delta) > _ROOT_TOL:
                    converged = False
            roots = new_roots
            if converged:
                break
        return roots

    def real_roots(self) -> list[float]:
        """Return the real parts of the roots whose imaginary part is negligible."""
        return [r.real for r in self.roots() if abs(r.imag) < _REAL_ROOT_TOL]

    def eqn(self) -> Callable[[float], float]:
        """Return the polynomial as a function of x."""
        coefs = self.coefs

        def evaluate(x: float) -> float:
            y = 0.0
            for coef in coefs:
                y = y * x + coef
            return y

        return evaluate

    def solve(self, x: float) -> float:
        return self.eqn()(x)

    def __str__(self) -> str:
        order = self.order()
        parts: list[str] = []
        for power, coef in zip(range(order, -1, -1), self.coefs):
            if coef == 0.0:
                continue
            if not parts:
                parts.append("y = -" if coef < 0.0 else "y = ")
            else:
                parts.append(" + " if coef > 0.0 else " - ")
            magnitude = abs(coef)
            if power == 0:
                parts.append(f"{magnitude:.2f}")
            elif power == 1:
                parts.append(f"{magnitude:.2f}x")
            else:
                parts.append(f"{magnitude:.2f}x^{power}")
        return "".join(parts) if parts else "y = 0"

    __repr__ = __str__