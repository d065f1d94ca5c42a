"""Read-only container for extracted Fourier coefficients."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from epicycles.core.index import index, slot_frequencies, table_size, unindex
from epicycles.core.point import Point


@dataclass(frozen=True, eq=False)
class CoefficientTable:
    """Dense coefficients in slot order (frequencies 0, 1, -1, 2, -2, ...).

    The backing array is flagged read-only, so a table can be shared between
    threads evaluating different frames without copying.
    """

    coefficients: NDArray[np.complex128]

    def __post_init__(self) -> None:
        coefficients = np.asarray(self.coefficients, dtype=np.complex128)
        if coefficients.ndim != 1 or len(coefficients) % 2 != 1:
            raise ValueError(f"Coefficient table must be 1-D with an odd size, got shape {coefficients.shape}")
        if coefficients.flags.writeable:
            coefficients = coefficients.copy()
            coefficients.flags.writeable = False
        object.__setattr__(self, "coefficients", coefficients)

    @property
    def depth(self) -> int:
        return len(self.coefficients) // 2

    @property
    def frequencies(self) -> NDArray[np.int64]:
        return slot_frequencies(self.depth)

    def __len__(self) -> int:
        return len(self.coefficients)

    def __getitem__(self, frequency: int) -> Point:
        if abs(frequency) > self.depth:
            raise IndexError(f"Frequency {frequency} outside table depth {self.depth}")
        return self.at_slot(index(frequency))

    def at_slot(self, slot: int) -> Point:
        return Point.from_complex(self.coefficients[slot])

    def __iter__(self) -> Iterator[tuple[int, Point]]:
        for slot in range(len(self.coefficients)):
            yield unindex(slot), self.at_slot(slot)

    def truncate(self, depth: int) -> CoefficientTable:
        """Table holding only frequencies in [-depth, depth]."""
        if depth < 0 or depth > self.depth:
            raise ValueError(f"Cannot truncate depth-{self.depth} table to depth {depth}")
        return CoefficientTable(self.coefficients[: table_size(depth)])

    def to_list(self) -> list[dict[str, Any]]:
        """JSON-friendly records, one per slot."""
        return [
            {
                "frequency": freq,
                "x": c.x,
                "y": c.y,
                "magnitude": c.magnitude(),
            }
            for freq, c in self
        ]
