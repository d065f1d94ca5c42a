"""Exceptions raised outside the numeric core."""

from __future__ import annotations


class EpicycleError(Exception):
    """Base class for recoverable input/output failures."""


class SvgParseError(EpicycleError):
    """The input SVG could not be read or holds no drawable polyline."""


class RenderError(EpicycleError):
    """An output file or frame could not be produced."""
