"""Immutable 2D point with complex-number arithmetic.

Every vertex, coefficient and arm tip in the engine is a Point. Arithmetic is
plain IEEE-754 double math, identical to the builtin ``complex`` type.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import NDArray

Scalar = Union[int, float]


@dataclass(frozen=True, slots=True)
class Point:
    """A 2D point (x, y) read as the complex number x + iy."""

    x: float = 0.0
    y: float = 0.0

    # ── constructors ──

    @classmethod
    def ei(cls, phi: float) -> Point:
        """Unit phasor e^(i·phi)."""
        return cls(math.cos(phi), math.sin(phi))

    @classmethod
    def from_complex(cls, z: complex) -> Point:
        return cls(float(z.real), float(z.imag))

    # ── arithmetic ──

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Point | Scalar) -> Point:
        if isinstance(other, Point):
            return Point(
                self.x * other.x - self.y * other.y,
                self.y * other.x + self.x * other.y,
            )
        if isinstance(other, (int, float)):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> Point:
        if isinstance(other, (int, float)):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Scalar) -> Point:
        """Divide by a real scalar. Division by zero yields ±inf/NaN, never raises."""
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Point(_ieee_div(self.x, other), _ieee_div(self.y, other))

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __abs__(self) -> float:
        return self.magnitude()

    def __complex__(self) -> complex:
        return complex(self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    # ── queries ──

    def conjugate(self) -> Point:
        return Point(self.x, -self.y)

    def squared_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.squared_magnitude())

    def is_degenerate(self) -> bool:
        """True if either component is NaN or infinite."""
        return not (math.isfinite(self.x) and math.isfinite(self.y))

    def or_zero(self) -> Point:
        """Collapse a degenerate value to ZERO; return self otherwise."""
        return ZERO if self.is_degenerate() else self

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ZERO = Point(0.0, 0.0)
I = Point(0.0, 1.0)


def _ieee_div(a: float, b: float) -> float:
    # x/0 → ±inf, 0/0 → nan
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(a) / b)


def finite_or_zero(values: NDArray[np.complex128]) -> NDArray[np.complex128]:
    """Vectorized ``Point.or_zero``: any element with a NaN or infinite part → 0."""
    values = np.asarray(values, dtype=np.complex128)
    return np.where(np.isfinite(values.real) & np.isfinite(values.imag), values, 0.0 + 0.0j)


def to_complex_array(path) -> NDArray[np.complex128]:
    """Coerce a path (Points, complex numbers, (x, y) pairs or an N×2 array) to complex128."""
    if isinstance(path, np.ndarray):
        if np.iscomplexobj(path):
            return path.astype(np.complex128).ravel()
        arr = np.asarray(path, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"Expected an N×2 point array, got shape {arr.shape}")
        return arr[:, 0] + 1j * arr[:, 1]

    out: list[complex] = []
    for p in path:
        if isinstance(p, Point):
            out.append(complex(p.x, p.y))
        elif isinstance(p, complex):
            out.append(p)
        else:
            x, y = p
            out.append(complex(float(x), float(y)))
    return np.array(out, dtype=np.complex128)
