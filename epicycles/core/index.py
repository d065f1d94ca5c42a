"""Signed-frequency ↔ storage-slot map.

Coefficient tables are stored densely in the order 0, 1, -1, 2, -2, ...
so that truncating a table to a smaller depth is a prefix slice.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def index(frequency: int) -> int:
    """Slot of a signed frequency: 0 → 0, m > 0 → 2m-1, m < 0 → 2|m|."""
    if frequency > 0:
        return 2 * frequency - 1
    return -2 * frequency


def unindex(slot: int) -> int:
    """Signed frequency stored in ``slot``. Inverse of ``index``."""
    if slot % 2 == 1:
        return (slot + 1) // 2
    return -(slot // 2)


def table_size(depth: int) -> int:
    return 2 * depth + 1


def slot_frequencies(depth: int) -> NDArray[np.int64]:
    """Frequencies of every slot of a depth-``depth`` table, in slot order."""
    slots = np.arange(table_size(depth), dtype=np.int64)
    return np.where(slots % 2 == 1, (slots + 1) // 2, -(slots // 2))
