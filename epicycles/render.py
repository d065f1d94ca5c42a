"""Render a coefficient table as an animation in one of the output modes.

Frames are independent, so directory and GIF modes fan frame work out to a
thread pool. Every frame is finished before ``render`` returns.
"""

from __future__ import annotations

import io
import logging
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from epicycles.config import settings
from epicycles.core.point import ZERO, Point
from epicycles.core.reconstruct import arm_chain
from epicycles.core.table import CoefficientTable
from epicycles.core.transform import transform
from epicycles.errors import RenderError
from epicycles.models.options import AnimationOptions, OutputMode
from epicycles.svg.parser import SvgDocument, parse_svg
from epicycles.svg.serializer import animated_svg, frame_svg

logger = logging.getLogger(__name__)


@dataclass
class FrameSet:
    """Arm chains for t = 0, 1/F, ..., 1 and the point each one traces."""

    arms: list[list[Point]] = field(default_factory=list)
    traced: list[Point] = field(default_factory=list)

    @property
    def frame_count(self) -> int:
        return len(self.arms) - 1


def compute_frames(table: CoefficientTable, frame_count: int, origin: Point = ZERO) -> FrameSet:
    if frame_count < 1:
        raise ValueError(f"frame_count must be at least 1, got {frame_count}")
    arms = [list(arm_chain(table, frame / frame_count, origin)) for frame in range(frame_count + 1)]
    return FrameSet(arms=arms, traced=[chain[-1] for chain in arms])


def render_svg_to_png(svg: str, scale: float | None = None) -> bytes:
    """Render SVG string to PNG bytes using cairosvg."""
    import cairosvg

    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            scale=scale if scale is not None else settings.png_scale,
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise RenderError(f"Failed to rasterize frame: {e}") from e


def render(
    table: CoefficientTable,
    document: SvgDocument,
    options: AnimationOptions,
    output: Path,
) -> Path:
    """Write ``table``'s animation to ``output`` in ``options.mode``."""
    start = time.perf_counter()
    width, height = document.canvas_size(options.offset)
    frames = compute_frames(table, options.frames, Point(*options.offset))

    writer = _WRITERS[options.mode]
    try:
        writer(frames, width, height, options, output)
    except OSError as e:
        raise RenderError(f"Failed to write {output}: {e}") from e

    logger.info(
        "Rendered %s (%s, %d frames) in %.0fms",
        output,
        options.mode.value,
        frames.frame_count + 1,
        (time.perf_counter() - start) * 1000,
    )
    return output


def animate(svg_text: str, options: AnimationOptions, output: Path) -> Path:
    """Parse, transform and render in one call."""
    document = parse_svg(svg_text)
    path = document.path(merge=options.merge)
    table = transform(path, options.depth)
    return render(table, document, options, output)


def animate_to_string(svg_text: str, options: AnimationOptions) -> str:
    """Animated SVG markup for ``svg_text`` without touching the filesystem."""
    document = parse_svg(svg_text)
    table = transform(document.path(merge=options.merge), options.depth)
    width, height = document.canvas_size(options.offset)
    frames = compute_frames(table, options.frames, Point(*options.offset))
    return animated_svg(
        frames.arms,
        frames.traced,
        width,
        height,
        options.duration,
        options.stroke_width,
        options.background,
    )


# ── per-mode writers ──


def _write_svg(frames: FrameSet, width: str, height: str, options: AnimationOptions, output: Path) -> None:
    svg = animated_svg(
        frames.arms,
        frames.traced,
        width,
        height,
        options.duration,
        options.stroke_width,
        options.background,
    )
    output.write_text(svg, encoding="utf-8")


def _frame_markup(frames: FrameSet, frame: int, width: str, height: str, options: AnimationOptions) -> str:
    return frame_svg(
        frames.arms[frame],
        frames.traced[: frame + 1],
        width,
        height,
        options.stroke_width,
        options.background,
    )


def _write_frame_directory(
    frames: FrameSet, width: str, height: str, options: AnimationOptions, output: Path
) -> None:
    output.mkdir(parents=True, exist_ok=True)
    as_png = options.mode is OutputMode.PNGS

    def write_one(frame: int) -> None:
        svg = _frame_markup(frames, frame, width, height, options)
        if as_png:
            (output / f"frame-{frame}.png").write_bytes(render_svg_to_png(svg))
        else:
            (output / f"frame-{frame}.svg").write_text(svg, encoding="utf-8")

    _run_all(write_one, range(frames.frame_count + 1))


def _write_gif(frames: FrameSet, width: str, height: str, options: AnimationOptions, output: Path) -> None:
    from PIL import Image

    pngs: dict[int, bytes] = {}

    def rasterize(frame: int) -> None:
        pngs[frame] = render_svg_to_png(_frame_markup(frames, frame, width, height, options))

    _run_all(rasterize, range(frames.frame_count + 1))

    images = [Image.open(io.BytesIO(pngs[f])).convert("RGBA") for f in sorted(pngs)]
    frame_ms = max(1, round(options.duration * 1000 / frames.frame_count))
    images[0].save(
        output,
        format="GIF",
        save_all=True,
        append_images=images[1:],
        duration=frame_ms,
        loop=0,
        disposal=2,
    )


def _run_all(fn: Callable[[int], None], frames: range) -> None:
    """Run ``fn`` for every frame on the worker pool; re-raise the first failure."""
    with ThreadPoolExecutor(max_workers=max(1, settings.render_workers)) as pool:
        futures = [pool.submit(fn, frame) for frame in frames]
        for future in as_completed(futures):
            future.result()


_WRITERS: dict[OutputMode, Callable[[FrameSet, str, str, AnimationOptions, Path], None]] = {
    OutputMode.SVG: _write_svg,
    OutputMode.SVGS: _write_frame_directory,
    OutputMode.PNGS: _write_frame_directory,
    OutputMode.GIF: _write_gif,
}
