"""Numeric engine: arc-length parameterization, closed-form Fourier
coefficients of a polyline, and epicycle reconstruction."""

from epicycles.core.index import index, slot_frequencies, unindex
from epicycles.core.parameterize import ArcLength, arc_length_times
from epicycles.core.point import ZERO, Point, finite_or_zero
from epicycles.core.reconstruct import ArmChain, arm_chain, reconstruct, trajectory
from epicycles.core.table import CoefficientTable
from epicycles.core.transform import transform

__all__ = [
    "ArcLength",
    "ArmChain",
    "CoefficientTable",
    "Point",
    "ZERO",
    "arc_length_times",
    "arm_chain",
    "finite_or_zero",
    "index",
    "reconstruct",
    "slot_frequencies",
    "trajectory",
    "transform",
    "unindex",
]
