"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest


TRIANGLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20">
  <path d="M0 0 L10 0 L10 10 Z" fill="none" stroke="black"/>
</svg>'''

CURVE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M2 12 C2 4 22 4 22 12 S2 20 2 12" fill="none" stroke="black"/>
</svg>'''

COMPOUND_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="50">
  <path d="M0 0 L1 0 M5 5 L6 5"/>
  <polygon points="10,10 20,10 20,20"/>
</svg>'''

EMPTY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">
  <rect x="1" y="1" width="5" height="5"/>
</svg>'''

UNIT_SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)]


def regular_polygon(n: int, radius: float = 1.0) -> np.ndarray:
    """Closed regular n-gon starting at (radius, 0), counter-clockwise."""
    theta = 2 * np.pi * np.arange(n + 1) / n
    pts = np.column_stack([radius * np.cos(theta), radius * np.sin(theta)])
    pts[-1] = pts[0]
    return pts


@pytest.fixture
def unit_square() -> list[tuple[float, float]]:
    return list(UNIT_SQUARE)


@pytest.fixture
def polygon64() -> np.ndarray:
    return regular_polygon(64)


@pytest.fixture
def triangle_svg() -> str:
    return TRIANGLE_SVG


@pytest.fixture
def curve_svg() -> str:
    return CURVE_SVG


@pytest.fixture
def compound_svg() -> str:
    return COMPOUND_SVG
