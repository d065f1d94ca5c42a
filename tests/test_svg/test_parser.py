"""Tests for SVG parser."""

import numpy as np
import pytest

from epicycles.errors import SvgParseError
from epicycles.svg.parser import parse_svg
from tests.conftest import COMPOUND_SVG, CURVE_SVG, EMPTY_SVG, TRIANGLE_SVG


def test_parse_triangle():
    doc = parse_svg(TRIANGLE_SVG)
    assert doc.width == "20"
    assert doc.height == "20"
    assert len(doc.polylines) == 1
    np.testing.assert_allclose(doc.path(), [[0, 0], [10, 0], [10, 10], [0, 0]])


def test_curves_are_flattened():
    doc = parse_svg(CURVE_SVG, curve_step=0.5)
    pts = doc.path()
    assert len(pts) > 20
    np.testing.assert_allclose(pts[0], [2, 12])
    np.testing.assert_allclose(pts[-1], [2, 12], atol=1e-9)


def test_smaller_step_gives_more_vertices():
    coarse = parse_svg(CURVE_SVG, curve_step=4.0).path()
    fine = parse_svg(CURVE_SVG, curve_step=0.25).path()
    assert len(fine) > len(coarse)


def test_compound_path_and_polygon():
    doc = parse_svg(COMPOUND_SVG)
    assert len(doc.polylines) == 3
    np.testing.assert_allclose(doc.polylines[0], [[0, 0], [1, 0]])
    np.testing.assert_allclose(doc.polylines[1], [[5, 5], [6, 5]])
    # polygon is closed back to its first vertex
    np.testing.assert_allclose(doc.polylines[2], [[10, 10], [20, 10], [20, 20], [10, 10]])


def test_merge_concatenates_in_document_order():
    doc = parse_svg(COMPOUND_SVG)
    assert len(doc.path()) == 2
    assert len(doc.path(merge=True)) == 8


def test_no_lines_raises():
    with pytest.raises(SvgParseError, match="No lines"):
        parse_svg(EMPTY_SVG)


def test_invalid_xml_raises():
    with pytest.raises(SvgParseError):
        parse_svg("<svg><path d='M0 0 L1 1'></svg")


def test_non_svg_root_raises():
    with pytest.raises(SvgParseError):
        parse_svg("<html><path d='M0 0 L1 1'/></html>")


def test_degenerate_paths_are_skipped():
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg">'
        '<path d=""/><path d="M0 0"/><path d="M0 0 L3 4"/>'
        "</svg>"
    )
    doc = parse_svg(svg)
    assert len(doc.polylines) == 1
    np.testing.assert_allclose(doc.path(), [[0, 0], [3, 4]])


def test_canvas_size_from_viewbox():
    doc = parse_svg(CURVE_SVG)
    assert doc.canvas_size() == ("24", "24")


def test_canvas_offset():
    doc = parse_svg(TRIANGLE_SVG)
    assert doc.canvas_size((5, 2.5)) == ("25", "22.5")


def test_canvas_offset_rejects_units():
    svg = '<svg xmlns="http://www.w3.org/2000/svg" width="20mm" height="20mm"><path d="M0 0 L1 1"/></svg>'
    doc = parse_svg(svg)
    assert doc.canvas_size() == ("20mm", "20mm")
    with pytest.raises(SvgParseError, match="units"):
        doc.canvas_size((1, 1))
