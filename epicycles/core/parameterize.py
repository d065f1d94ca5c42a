"""Arc-length parameterization of a polyline."""

from __future__ import annotations

import logging
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)


class ArcLength(NamedTuple):
    # times[0] == 0, times[-1] == 1, increments proportional to chord length
    times: NDArray[np.float64]
    length: float


def chord_lengths(path: NDArray[np.complex128]) -> NDArray[np.float64]:
    return np.abs(np.diff(path))


def arc_length_times(path: NDArray[np.complex128]) -> ArcLength:
    """Map each vertex to a time in [0, 1] proportional to the distance travelled.

    A path of zero total length has no meaningful arc length; its vertices are
    spread uniformly instead so every chord velocity downstream is zero.
    """
    n = len(path)
    if n < 2:
        raise ValueError(f"Arc-length parameterization needs at least 2 points, got {n}")

    chords = chord_lengths(path)
    length = float(np.sum(chords))

    if length == 0.0:
        logger.warning("Path of %d points has zero length; using uniform times", n)
        return ArcLength(np.linspace(0.0, 1.0, n), 0.0)

    times = np.concatenate([[0.0], np.cumsum(chords / length)])
    return ArcLength(times, length)
