"""Tests for hop-over arc insertion."""

from __future__ import annotations

import pytest

from crowsfoot.layout.routing import (
    Intersection,
    LineTo,
    MoveTo,
    QuadTo,
    find_intersections,
    insert_hop_arcs,
)
from crowsfoot.layout.routing.common import Segment
from crowsfoot.layout.routing.hops import hop_normal

PATH = [(100.0, 50.0), (130.0, 50.0), (270.0, 50.0), (300.0, 50.0)]
CROSSER = [(200.0, -100.0), (200.0, -70.0), (200.0, 170.0), (200.0, 200.0)]


def test_no_intersections_keeps_raw_path():
    path = insert_hop_arcs(PATH, [])
    assert path.points() == PATH
    assert path.arc_count == 0
    assert isinstance(path.commands[0], MoveTo)


def test_single_hop_geometry():
    hits = find_intersections(PATH, [CROSSER])
    path = insert_hop_arcs(PATH, hits)

    cmds = path.commands
    assert [type(c) for c in cmds] == [MoveTo, LineTo, LineTo, QuadTo, LineTo, LineTo]
    assert cmds[2].point == pytest.approx((179.0, 50.0))
    assert cmds[3].control == pytest.approx((200.0, 60.0))
    assert cmds[3].point == pytest.approx((221.0, 50.0))
    assert cmds[4].point == (270.0, 50.0)


def test_arc_bulges_counter_clockwise_of_travel():
    assert hop_normal(Segment((0.0, 0.0), (10.0, 0.0))) == pytest.approx((0.0, 1.0))
    assert hop_normal(Segment((0.0, 0.0), (0.0, 10.0))) == pytest.approx((-1.0, 0.0))
    assert hop_normal(Segment((10.0, 0.0), (0.0, 0.0))) == pytest.approx((0.0, -1.0))


def test_zero_length_segment_normal():
    assert hop_normal(Segment((5.0, 5.0), (5.0, 5.0))) == (0.0, 1.0)


def test_endpoints_unchanged_by_hops():
    hits = find_intersections(PATH, [CROSSER])
    assert hits
    path = insert_hop_arcs(PATH, hits)
    assert path.start == PATH[0]
    assert path.end == PATH[-1]


def test_window_clamped_at_segment_end():
    # Crossing at t=0.88 on the last segment: window end clamps to 1.0
    points = [(0.0, 0.0), (100.0, 0.0)]
    hits = [Intersection(0, (88.0, 0.0), 0.88)]
    path = insert_hop_arcs(points, hits)
    assert isinstance(path.commands[-1], QuadTo)
    assert path.end == (100.0, 0.0)


def test_window_clamped_at_segment_start():
    points = [(0.0, 0.0), (100.0, 0.0)]
    hits = [Intersection(0, (12.0, 0.0), 0.12)]
    path = insert_hop_arcs(points, hits)
    assert [type(c) for c in path.commands] == [MoveTo, QuadTo, LineTo]
    assert path.start == (0.0, 0.0)


def test_multiple_hops_on_one_segment_in_order():
    points = [(0.0, 0.0), (100.0, 0.0)]
    hits = [
        Intersection(0, (70.0, 0.0), 0.7),
        Intersection(0, (30.0, 0.0), 0.3),
    ]
    path = insert_hop_arcs(points, hits)
    arcs = [c for c in path.commands if isinstance(c, QuadTo)]
    assert [a.control[0] for a in arcs] == pytest.approx([30.0, 70.0])


def test_overlapping_windows_keep_separate_arcs():
    points = [(0.0, 0.0), (100.0, 0.0)]
    hits = [
        Intersection(0, (40.0, 0.0), 0.4),
        Intersection(0, (45.0, 0.0), 0.45),
    ]
    path = insert_hop_arcs(points, hits)
    assert path.arc_count == 2


def test_custom_hop_height():
    hits = find_intersections(PATH, [CROSSER])
    path = insert_hop_arcs(PATH, hits, hop_height=4.0)
    arc = next(c for c in path.commands if isinstance(c, QuadTo))
    assert arc.control == pytest.approx((200.0, 54.0))


def test_degenerate_path_returned_unmodified():
    path = insert_hop_arcs([(5.0, 5.0)], [Intersection(0, (5.0, 5.0), 0.5)])
    assert path.points() == [(5.0, 5.0)]


def test_svg_path_string():
    hits = find_intersections(PATH, [CROSSER])
    d = insert_hop_arcs(PATH, hits).to_svg()
    assert d.startswith("M 100 50")
    assert "Q 200 60 221 50" in d
    assert d.endswith("L 300 50")
