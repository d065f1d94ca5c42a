"""Evaluate a coefficient table at a sample time.

Each slot contributes c_s · e^(i·(2π·t·f_s + π)) for f_s ≠ 0 and c_0 for the
zero frequency. The half-turn on every nonzero frequency pairs with the sign
convention of transform.py and must not be applied to c_0.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from epicycles.core.index import unindex
from epicycles.core.point import ZERO, Point
from epicycles.core.table import CoefficientTable


def _terms(table: CoefficientTable, t: float) -> Iterator[Point]:
    # Period is 1; reducing first keeps t and t + 1 bit-identical.
    t = t % 1.0
    for slot in range(len(table)):
        f = unindex(slot)
        phase = 2 * math.pi * t * f + (math.pi if f != 0 else 0.0)
        yield table.at_slot(slot) * Point.ei(phase)


class ArmChain:
    """Tip positions of the rotating arms at one instant, in slot order.

    Iterating is lazy and can be repeated; each pass re-evaluates the terms.
    The last tip is the traced point.
    """

    def __init__(self, table: CoefficientTable, t: float, origin: Point = ZERO) -> None:
        self.table = table
        self.t = t
        self.origin = origin

    def __iter__(self) -> Iterator[Point]:
        tip = ZERO
        for term in _terms(self.table, self.t):
            tip = tip + term
            yield tip + self.origin

    def __len__(self) -> int:
        return len(self.table)

    def __repr__(self) -> str:
        return f"ArmChain(depth={self.table.depth}, t={self.t})"


def arm_chain(table: CoefficientTable, t: float, origin: Point = ZERO) -> ArmChain:
    return ArmChain(table, t, origin)


def reconstruct(table: CoefficientTable, t: float) -> Point:
    """Position of the traced curve at time t."""
    position = ZERO
    for term in _terms(table, t):
        position = position + term
    return position


def trajectory(table: CoefficientTable, times: ArrayLike) -> NDArray[np.complex128]:
    """Vectorized ``reconstruct`` over many sample times, as complex numbers."""
    times = np.asarray(times, dtype=np.float64) % 1.0
    freqs = table.frequencies
    phase = 2 * np.pi * np.outer(times, freqs) + np.where(freqs != 0, np.pi, 0.0)
    return np.exp(1j * phase) @ table.coefficients
