"""Tests for perpendicular offset routing."""

from __future__ import annotations

import pytest

from crowsfoot.layout.anchors import ResolvedAnchor, resolve_endpoints
from crowsfoot.layout.routing import build_raw_path, route_edge
from crowsfoot.layout.routing.common import path_segments
from crowsfoot.parser.model import AnchorSide, Edge, Node


def _anchor(point, side: AnchorSide) -> ResolvedAnchor:
    return ResolvedAnchor(point, side.direction, side.angle, side)


def _route(nodes, source_anchor, target_anchor, **kwargs):
    edge = Edge("e", "a", "b", source_anchor=source_anchor, target_anchor=target_anchor)
    return route_edge(nodes, edge, **kwargs)


A = Node("a", x=0, y=0)


def test_side_to_side_aligned_is_straight():
    nodes = {"a": A, "b": Node("b", x=400, y=0)}
    raw = _route(nodes, "right", "left")
    assert raw.points == [(200, 75), (230, 75), (370, 75), (400, 75)]
    assert all(y == 75 for _, y in raw.points)


def test_side_to_side_routes_horizontal_then_vertical():
    nodes = {"a": A, "b": Node("b", x=400, y=300)}
    raw = _route(nodes, "right", "left")
    assert raw.points == [(200, 75), (230, 75), (370, 75), (370, 375), (400, 375)]


def test_top_bottom_routes_vertical_then_horizontal():
    nodes = {"a": A, "b": Node("b", x=300, y=300)}
    raw = _route(nodes, "bottom", "top")
    assert raw.points == [(100, 150), (100, 180), (100, 270), (400, 270), (400, 300)]


def test_top_bottom_aligned_is_straight():
    nodes = {"a": A, "b": Node("b", x=0, y=300)}
    raw = _route(nodes, "bottom", "top")
    assert raw.points == [(100, 150), (100, 180), (100, 270), (100, 300)]


def test_mixed_side_source_goes_horizontal_first():
    nodes = {"a": A, "b": Node("b", x=400, y=300)}
    raw = _route(nodes, "right", "top")
    assert raw.points == [(200, 75), (230, 75), (500, 75), (500, 270), (500, 300)]


def test_mixed_top_bottom_source_goes_vertical_first():
    nodes = {"a": A, "b": Node("b", x=400, y=300)}
    raw = _route(nodes, "bottom", "left")
    assert raw.points == [(100, 150), (100, 180), (100, 375), (370, 375), (400, 375)]


def test_small_offset_difference_is_not_a_corner():
    # Offsets 0.5px apart: no routing corner, only the jog into the target offset
    source = _anchor((0.0, 0.0), AnchorSide.RIGHT)
    target = _anchor((200.0, 0.5), AnchorSide.LEFT)
    raw = build_raw_path(source, target)
    assert raw.points == [(0.0, 0.0), (30.0, 0.0), (170.0, 0.0), (170.0, 0.5), (200.0, 0.5)]


@pytest.mark.parametrize("source_anchor", ["top", "bottom", "left", "right", "left-top"])
@pytest.mark.parametrize("target_anchor", ["top", "bottom", "left", "right", "top-right"])
def test_path_endpoints_are_connection_points(source_anchor, target_anchor):
    nodes = {"a": A, "b": Node("b", x=350, y=220, width=120, height=90)}
    edge = Edge("e", "a", "b", source_anchor=source_anchor, target_anchor=target_anchor)
    source, target = resolve_endpoints(nodes, edge)
    raw = route_edge(nodes, edge)
    assert raw.points[0] == source.point
    assert raw.points[-1] == target.point


@pytest.mark.parametrize("source_anchor", ["top", "bottom", "left", "right"])
@pytest.mark.parametrize("target_anchor", ["top", "bottom", "left", "right"])
def test_no_zero_length_segments(source_anchor, target_anchor):
    nodes = {"a": A, "b": Node("b", x=0, y=400)}
    raw = _route(nodes, source_anchor, target_anchor)
    for p, q in zip(raw.points, raw.points[1:]):
        assert p != q


def test_zero_offset_collapses_duplicates():
    nodes = {"a": A, "b": Node("b", x=400, y=0)}
    raw = _route(nodes, "right", "left", perpendicular_offset=0.0)
    assert raw.points == [(200, 75), (400, 75)]


def test_custom_offset():
    nodes = {"a": A, "b": Node("b", x=400, y=0)}
    raw = _route(nodes, "right", "left", perpendicular_offset=50.0)
    assert raw.source_offset == (250, 75)
    assert raw.target_offset == (350, 75)


def test_label_point_is_midpoint_of_offsets():
    nodes = {"a": A, "b": Node("b", x=400, y=300)}
    raw = _route(nodes, "right", "left")
    assert raw.label_point == (300, 225)


def test_unknown_node_routes_from_origin():
    nodes = {"b": Node("b", x=400, y=0)}
    raw = _route(nodes, "right", "left")
    assert raw.points[0] == (0.0, 0.0)
    assert raw.points[-1] == (400, 75)


def test_segments_follow_points():
    nodes = {"a": A, "b": Node("b", x=400, y=300)}
    raw = _route(nodes, "right", "left")
    segments = path_segments(raw.points)
    assert len(segments) == len(raw.points) - 1
    assert segments[0].start == raw.points[0]
    assert segments[-1].end == raw.points[-1]
