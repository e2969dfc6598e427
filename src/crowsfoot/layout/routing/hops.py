"""Hop-over arcs at connector crossings.

Around each crossing the straight run is cut for a window of
``t +- window`` and replaced with a quadratic curve whose control point
sits ``hop_height`` off the segment. The bulge always goes to the
counter-clockwise side of the segment direction, so every hop on a
connector bends the same way relative to its travel.

Closely spaced crossings can produce overlapping windows; each crossing
still gets its own arc.
"""

from __future__ import annotations

import math
from collections import defaultdict

from crowsfoot.layout.constants import HOP_OVER_HEIGHT, HOP_WINDOW
from crowsfoot.layout.routing.common import (
    ConnectorPath,
    Intersection,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    QuadTo,
    Segment,
    path_segments,
)


def hop_normal(seg: Segment) -> Point:
    """Unit normal rotated 90 degrees counter-clockwise from the segment."""
    dx = seg.end[0] - seg.start[0]
    dy = seg.end[1] - seg.start[1]
    length = math.hypot(dx, dy)
    if length == 0:
        return (0.0, 1.0)
    return (-dy / length, dx / length)


def insert_hop_arcs(
    points: list[Point],
    intersections: list[Intersection],
    hop_height: float = HOP_OVER_HEIGHT,
    window: float = HOP_WINDOW,
) -> ConnectorPath:
    """Rewrite a raw path with a hop arc at every intersection.

    The start and end points of the result are the raw path's own
    endpoints; only interior geometry changes.
    """
    segments = path_segments(points)
    if not segments or not intersections:
        return ConnectorPath.from_points(points)

    by_segment: dict[int, list[Intersection]] = defaultdict(list)
    for hit in intersections:
        by_segment[hit.segment_index].append(hit)
    for hits in by_segment.values():
        hits.sort(key=lambda h: h.t)

    commands: list[PathCommand] = [MoveTo(segments[0].start)]
    for index, seg in enumerate(segments):
        hits = by_segment.get(index)
        if not hits:
            commands.append(LineTo(seg.end))
            continue

        nx, ny = hop_normal(seg)
        after_t = 1.0
        for hit in hits:
            before_t = max(0.0, hit.t - window)
            after_t = min(1.0, hit.t + window)
            control = (hit.point[0] + nx * hop_height, hit.point[1] + ny * hop_height)
            before = seg.point_at(before_t)
            if commands[-1].point != before:
                commands.append(LineTo(before))
            commands.append(QuadTo(control, seg.point_at(after_t)))

        if after_t < 1.0:
            commands.append(LineTo(seg.end))

    return ConnectorPath(commands)
