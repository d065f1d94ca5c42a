"""SVG parser — facade over svgpathtools + ElementTree.

Converts raw SVG text → SvgDocument holding one polyline per sub-path.
Straight segments keep their endpoints; curves are flattened into chords.
"""

from __future__ import annotations

import logging
import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Line, Path, parse_path

from epicycles.config import settings
from epicycles.errors import SvgParseError

logger = logging.getLogger(__name__)

# Plain number, optionally with "px" (the only unit safe to offset)
_PLAIN_SIZE_RE = re.compile(r"^\s*([-+]?\d*\.?\d+(?:[eE][-+]?\d+)?)\s*(?:px)?\s*$")
_POINTS_SPLIT_RE = re.compile(r"[\s,]+")

# Upper bound on chords per curved segment.
_MAX_CHORDS_PER_SEGMENT = 2000


@dataclass
class SvgDocument:
    """Root canvas attributes and extracted polylines of one SVG file."""

    width: str = ""
    height: str = ""
    view_box: tuple[float, float, float, float] | None = None
    # One Nx2 array per sub-path, in document order
    polylines: list[NDArray[np.float64]] = field(default_factory=list)

    def path(self, merge: bool = False) -> NDArray[np.float64]:
        """First polyline, or every polyline concatenated when ``merge``."""
        if not self.polylines:
            raise SvgParseError("No lines found in file")
        if merge:
            return np.concatenate(self.polylines, axis=0)
        return self.polylines[0]

    def canvas_size(self, offset: tuple[float, float] = (0.0, 0.0)) -> tuple[str, str]:
        """Width and height attribute values, grown by ``offset`` if nonzero."""
        width, height = self.width, self.height
        if not width and self.view_box is not None:
            width = _format_number(self.view_box[2])
        if not height and self.view_box is not None:
            height = _format_number(self.view_box[3])
        width = width or "100%"
        height = height or "100%"

        dx, dy = offset
        if dx == 0.0 and dy == 0.0:
            return width, height
        return _grow(width, dx, "Width"), _grow(height, dy, "Height")


def parse_svg(svg_text: str, curve_step: float | None = None) -> SvgDocument:
    """Parse raw SVG text into an SvgDocument."""
    step = curve_step if curve_step is not None else settings.curve_step
    if step <= 0:
        raise ValueError(f"curve_step must be positive, got {step}")

    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SvgParseError(f"Could not parse .svg file: {e}") from e

    if _strip_ns(root.tag) != "svg":
        raise SvgParseError(f"Root element is <{_strip_ns(root.tag)}>, expected <svg>")

    doc = SvgDocument(
        width=root.get("width", "").strip(),
        height=root.get("height", "").strip(),
        view_box=_parse_view_box(root.get("viewBox")),
    )

    for elem in root.iter():
        tag = _strip_ns(elem.tag)
        if tag == "path":
            d = elem.get("d")
            if not d:
                continue
            try:
                path = parse_path(d)
            except Exception as e:
                logger.warning("Failed to parse path: %s", e)
                continue
            for sub in path.continuous_subpaths():
                pts = flatten_path(sub, step)
                if len(pts) >= 2:
                    doc.polylines.append(pts)
        elif tag in ("polyline", "polygon"):
            pts = _parse_points(elem.get("points", ""))
            if tag == "polygon" and len(pts) >= 2:
                pts = np.vstack([pts, pts[:1]])
            if len(pts) >= 2:
                doc.polylines.append(pts)

    if not doc.polylines:
        raise SvgParseError("No lines found in file")

    logger.info(
        "Parsed SVG: %d polylines, %d vertices, canvas %s×%s",
        len(doc.polylines),
        sum(len(p) for p in doc.polylines),
        doc.width or "?",
        doc.height or "?",
    )
    return doc


def flatten_path(path: Path, step: float) -> NDArray[np.float64]:
    """Polyline through a continuous svgpathtools path.

    Lines contribute their end point; other segments are split into
    ceil(length / step) chords.
    """
    if len(path) == 0:
        return np.empty((0, 2))

    points: list[complex] = [path[0].start]
    for seg in path:
        if isinstance(seg, Line):
            points.append(seg.end)
            continue
        try:
            length = seg.length()
        except Exception as e:
            logger.warning("Could not measure %s, using its chord: %s", type(seg).__name__, e)
            points.append(seg.end)
            continue
        chords = min(_MAX_CHORDS_PER_SEGMENT, max(2, math.ceil(length / step)))
        for t in np.linspace(0.0, 1.0, chords + 1)[1:]:
            points.append(seg.point(t))

    arr = np.array(points, dtype=np.complex128)
    return np.column_stack([arr.real, arr.imag])


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _parse_view_box(value: str | None) -> tuple[float, float, float, float] | None:
    if not value:
        return None
    parts = value.replace(",", " ").split()
    if len(parts) != 4:
        return None
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError:
        return None
    return (x, y, w, h)


def _parse_points(value: str) -> NDArray[np.float64]:
    tokens = [t for t in _POINTS_SPLIT_RE.split(value.strip()) if t]
    try:
        numbers = [float(t) for t in tokens]
    except ValueError:
        logger.warning("Skipping malformed points attribute: %r", value[:40])
        return np.empty((0, 2))
    if len(numbers) % 2:
        numbers = numbers[:-1]
    return np.array(numbers, dtype=np.float64).reshape(-1, 2)


def _grow(size: str, delta: float, label: str) -> str:
    m = _PLAIN_SIZE_RE.match(size)
    if not m:
        raise SvgParseError(f"{label} with value {size} is not supported with offset due to units")
    return _format_number(float(m.group(1)) + delta)


def _format_number(value: float) -> str:
    return str(int(value)) if value == int(value) else repr(value)
