"""Tests for the command-line entry point."""

import xml.etree.ElementTree as ET

import pytest

from epicycles.cli import build_parser, main, options_from_args
from epicycles.models.options import OutputMode
from tests.conftest import TRIANGLE_SVG


@pytest.fixture
def drawing(tmp_path):
    path = tmp_path / "drawing.svg"
    path.write_text(TRIANGLE_SVG, encoding="utf-8")
    return path


def test_default_output_next_to_input(drawing):
    assert main([str(drawing), "-d", "4", "-f", "6"]) == 0
    out = drawing.parent / "drawing.svg_.svg"
    assert out.exists()
    ET.fromstring(out.read_text(encoding="utf-8"))


def test_explicit_output_and_style(drawing, tmp_path):
    out = tmp_path / "anim.svg"
    code = main([str(drawing), "-o", str(out), "-d", "2", "-f", "3", "--sw", "3", "--back", "#fff", "--dur", "5"])
    assert code == 0
    text = out.read_text(encoding="utf-8")
    assert 'stroke-width="3.0"' in text
    assert 'fill="#fff"' in text
    assert 'dur="5.0s"' in text


def test_frame_directory_mode(drawing, tmp_path):
    out = tmp_path / "frames"
    assert main([str(drawing), "-m", "svgs", "-o", str(out), "-d", "2", "-f", "2"]) == 0
    assert len(list(out.glob("frame-*.svg"))) == 3


def test_invalid_options_exit_2(drawing):
    assert main([str(drawing), "-d", "-1"]) == 2
    assert main([str(drawing), "-f", "0"]) == 2


def test_missing_file_exit_1(tmp_path):
    assert main([str(tmp_path / "nope.svg")]) == 1


def test_unparseable_svg_exit_1(tmp_path):
    bad = tmp_path / "bad.svg"
    bad.write_text("not xml at all", encoding="utf-8")
    assert main([str(bad), "-d", "1", "-f", "1"]) == 1


def test_offset_with_units_exit_1(tmp_path):
    src = tmp_path / "mm.svg"
    src.write_text(
        '<svg xmlns="http://www.w3.org/2000/svg" width="5cm" height="5cm"><path d="M0 0 L1 1"/></svg>',
        encoding="utf-8",
    )
    assert main([str(src), "--offset", "1", "1", "-d", "1", "-f", "1"]) == 1


def test_unset_flags_use_configured_defaults():
    args = build_parser().parse_args(["x.svg", "--merge", "-m", "gif", "--offset", "2", "3"])
    options = options_from_args(args)
    assert options.mode is OutputMode.GIF
    assert options.merge
    assert options.offset == (2.0, 3.0)
    assert options.depth == 100
    assert options.frames == 600


def test_mode_choices_are_enforced():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["x.svg", "-m", "mp4"])
