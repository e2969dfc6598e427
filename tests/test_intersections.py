"""Tests for crossing detection between connectors."""

from __future__ import annotations

import pytest

from crowsfoot.layout.routing import find_intersections, peer_raw_paths, segment_intersection
from crowsfoot.parser.model import Edge, Node


class TestSegmentIntersection:
    def test_perpendicular_crossing(self):
        hit = segment_intersection((100, 100), (100, 200), (50, 150), (150, 150))
        assert hit is not None
        point, t, u = hit
        assert point == pytest.approx((100, 150))
        assert t == pytest.approx(0.5)
        assert u == pytest.approx(0.5)

    def test_parallel_segments(self):
        assert segment_intersection((0, 0), (100, 0), (0, 10), (100, 10)) is None

    def test_collinear_segments_are_parallel(self):
        assert segment_intersection((0, 0), (100, 0), (50, 0), (150, 0)) is None

    def test_lines_cross_outside_segments(self):
        assert segment_intersection((0, 0), (10, 0), (20, -5), (20, 5)) is None

    def test_touching_at_endpoint(self):
        hit = segment_intersection((0, 0), (10, 0), (10, -5), (10, 5))
        assert hit is not None
        assert hit[1] == pytest.approx(1.0)


class TestFindIntersections:
    def test_crossing_found_on_each_connector(self):
        a = [(100.0, 100.0), (100.0, 200.0)]
        b = [(50.0, 150.0), (150.0, 150.0)]

        on_a = find_intersections(a, [b])
        on_b = find_intersections(b, [a])

        assert len(on_a) == 1
        assert len(on_b) == 1
        assert on_a[0].segment_index == 0
        assert on_a[0].t == pytest.approx(0.5)
        assert on_b[0].t == pytest.approx(0.5)
        assert on_a[0].point == pytest.approx((100, 150))

    def test_parallel_connectors_do_not_intersect(self):
        a = [(0.0, 0.0), (100.0, 0.0), (100.0, 50.0)]
        b = [(0.0, 10.0), (90.0, 10.0)]
        assert find_intersections(a, [b]) == []

    @pytest.mark.parametrize("x", [102.0, 105.0, 195.0, 198.0])
    def test_crossings_near_segment_ends_are_ignored(self, x):
        own = [(100.0, 0.0), (200.0, 0.0)]
        peer = [(x, -10.0), (x, 10.0)]
        assert find_intersections(own, [peer]) == []

    def test_results_sorted_by_segment_then_t(self):
        own = [(0.0, 0.0), (100.0, 0.0), (100.0, 100.0)]
        peers = [
            [(70.0, -10.0), (70.0, 10.0)],
            [(30.0, -10.0), (30.0, 10.0)],
            [(90.0, 50.0), (110.0, 50.0)],
        ]
        hits = find_intersections(own, peers)
        assert [(h.segment_index, round(h.t, 6)) for h in hits] == [
            (0, 0.3),
            (0, 0.7),
            (1, 0.5),
        ]

    def test_no_peers(self):
        assert find_intersections([(0.0, 0.0), (10.0, 0.0)], []) == []


class TestPeerRawPaths:
    def _diagram(self):
        nodes = {
            "a": Node("a", x=0, y=0),
            "b": Node("b", x=400, y=0),
            "c": Node("c", x=200, y=-300),
            "d": Node("d", x=200, y=300),
        }
        edges = [
            Edge("ab", "a", "b", "right", "left"),
            Edge("cd", "c", "d", "bottom", "top"),
            Edge("plain", "c", "d", "bottom", "top", kind="simple"),
        ]
        return nodes, edges

    def test_excludes_self_and_other_kinds(self):
        nodes, edges = self._diagram()
        peers = peer_raw_paths(nodes, edges, edges[0])
        assert len(peers) == 1
        assert peers[0][0] == (300, -150)
        assert peers[0][-1] == (300, 300)

    def test_simple_connectors_only_see_simple_peers(self):
        nodes, edges = self._diagram()
        assert peer_raw_paths(nodes, edges, edges[2]) == []
