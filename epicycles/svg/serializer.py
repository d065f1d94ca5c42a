"""Write SVG markup for epicycle animations and single frames."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from epicycles.core.point import Point

# Traced curve and arm chain colors
TRACE_STROKE = "#0022e4"
ARM_STROKE = "#000"

_SVG_NS = "http://www.w3.org/2000/svg"


def path_data(points: Iterable[Point], precision: int = 3) -> str:
    """``M x y L x y ...`` through the points; ``M 0.0 0.0`` when empty."""
    parts: list[str] = []
    for p in points:
        cmd = "L" if parts else "M"
        parts.append(f"{cmd} {p.x:.{precision}f} {p.y:.{precision}f}")
    return " ".join(parts) if parts else "M 0.0 0.0"


def join_frames(values: Iterable[str]) -> str:
    """SMIL ``values`` / ``keyTimes`` list."""
    return ";".join(values)


def key_times(frame_count: int) -> str:
    return join_frames(repr(frame / frame_count) for frame in range(frame_count + 1))


def animated_svg(
    arm_frames: Sequence[Sequence[Point]],
    traced: Sequence[Point],
    width: str,
    height: str,
    duration: float,
    stroke_width: float = 1.5,
    background: str = "none",
) -> str:
    """One SVG that animates the arm chain and draws the traced curve.

    ``arm_frames[f]`` is the arm chain at t = f / (len(arm_frames) - 1) and
    ``traced[f]`` its last tip. The traced curve grows once; the arms loop.
    """
    frame_count = len(arm_frames) - 1
    if frame_count < 1:
        raise ValueError("An animation needs at least two frames")

    times = key_times(frame_count)
    arm_values = join_frames(path_data(arms) for arms in arm_frames)
    trace_values = join_frames(path_data(traced[: f + 1]) for f in range(len(traced)))
    final_trace = path_data(traced)

    lines = [
        f'<svg xmlns="{_SVG_NS}" width="{width}" height="{height}">',
        "  <g>",
        f'    <rect width="100%" height="100%" fill="{background}"/>',
        f'    <path d="{final_trace}" stroke-width="{stroke_width}" stroke="{TRACE_STROKE}" fill="none">',
        f'      <animate attributeName="d" values="{trace_values}" keyTimes="{times}"'
        f' dur="{duration}s" begin="0s" repeatCount="1"/>',
        "    </path>",
        f'    <path d="" stroke-width="{stroke_width}" stroke="{ARM_STROKE}" fill="none">',
        f'      <animate attributeName="d" values="{arm_values}" keyTimes="{times}"'
        f' dur="{duration}s" begin="0s" repeatCount="indefinite"/>',
        "    </path>",
        "  </g>",
        "</svg>",
    ]
    return "\n".join(lines)


def frame_svg(
    arms: Sequence[Point],
    traced: Sequence[Point],
    width: str,
    height: str,
    stroke_width: float = 1.5,
    background: str = "none",
) -> str:
    """Static snapshot: the curve traced so far plus the current arm chain."""
    lines = [
        f'<svg xmlns="{_SVG_NS}" width="{width}" height="{height}">',
        f'  <rect width="100%" height="100%" fill="{background}"/>',
        f'  <path d="{path_data(traced)}" stroke-width="{stroke_width}" stroke="{TRACE_STROKE}" fill="none"/>',
        f'  <path d="{path_data(arms)}" stroke-width="{stroke_width}" stroke="{ARM_STROKE}" fill="none"/>',
        "</svg>",
    ]
    return "\n".join(lines)
