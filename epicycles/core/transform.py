"""Closed-form Fourier coefficients of a piecewise-linear closed curve.

A polyline parameterized by arc length is piecewise linear in t, so its second
derivative is a train of impulses at the vertices, each weighted by the jump in
velocity there. The Fourier coefficients of an impulse train are a plain sum
of phasors, and integrating twice in the frequency domain divides by (2πim)².
That gives every coefficient exactly, with no resampling:

    c(m)  =  k·(P[n-1] - P[0]) + k² · Σ p[i]·e^(-2πi·m·t[i])
    c(-m) = -k·(P[n-1] - P[0]) + k² · Σ p[i]·e^(+2πi·m·t[i])      k = i / 2πm

The first term accounts for the gap between the path's end and start when the
path is treated as one period. The sign convention of these coefficients is
matched by a half-turn in reconstruct.py.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from epicycles.core.index import index, table_size
from epicycles.core.parameterize import arc_length_times
from epicycles.core.point import finite_or_zero, to_complex_array
from epicycles.core.table import CoefficientTable

logger = logging.getLogger(__name__)

# Running phasors lose unit magnitude slowly under repeated multiplication.
PHASOR_RENORMALIZE_EVERY = 256


def velocity_jumps(path: NDArray[np.complex128], times: NDArray[np.float64]) -> NDArray[np.complex128]:
    """Velocity discontinuity at each vertex, n-1 entries.

    Entry 0 is the wrap-around jump (last chord velocity minus first chord
    velocity) at t = 0. Entry i ≥ 1 is v_left - v_right at interior vertex i.
    Chords of zero duration have zero velocity.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        velocity = finite_or_zero(np.diff(path) / np.diff(times))

    jumps = np.empty(len(path) - 1, dtype=np.complex128)
    jumps[0] = velocity[-1] - velocity[0]
    jumps[1:] = velocity[:-1] - velocity[1:]
    return jumps


def mean_position(path: NDArray[np.complex128], times: NDArray[np.float64]) -> complex:
    """Trapezoidal integral of position over t ∈ [0, 1]."""
    return complex(np.sum((path[1:] + path[:-1]) * np.diff(times) * 0.5))


def transform(path: Iterable | NDArray, depth: int) -> CoefficientTable:
    """Fourier coefficients for frequencies -depth..depth of a polyline.

    ``path`` may be a sequence of Points, complex numbers or (x, y) pairs, or
    an N×2 array. Raises ValueError for fewer than two points or a negative
    depth.
    """
    if isinstance(depth, bool) or not isinstance(depth, (int, np.integer)):
        raise ValueError(f"Depth must be an integer, got {depth!r}")
    if depth < 0:
        raise ValueError(f"Depth must be non-negative, got {depth}")

    z = to_complex_array(path)
    n = len(z)
    if n < 2:
        raise ValueError(f"Transform needs at least 2 points, got {n}")

    start = time.perf_counter()
    times, length = arc_length_times(z)
    jumps = velocity_jumps(z, times)

    c = np.zeros(table_size(depth), dtype=np.complex128)
    c[index(0)] = mean_position(z, times)

    gap = z[-1] - z[0]
    step = np.exp(-2j * np.pi * times[:-1])
    phasor = step.copy()

    for m in range(1, depth + 1):
        k = 1j / (2 * np.pi * m)
        c[index(m)] = k * gap + k * k * np.sum(jumps * phasor)
        c[index(-m)] = -k * gap + k * k * np.sum(jumps * np.conj(phasor))

        phasor = phasor * step
        if m % PHASOR_RENORMALIZE_EVERY == 0:
            phasor = phasor / np.abs(phasor)

    table = CoefficientTable(finite_or_zero(c))
    logger.debug(
        "Transform: %d points, length %.3f, depth %d in %.1fms",
        n,
        length,
        depth,
        (time.perf_counter() - start) * 1000,
    )
    return table
