"""Shared types and helpers for connector routing."""

from __future__ import annotations

from dataclasses import dataclass, field

Point = tuple[float, float]


@dataclass(frozen=True)
class Segment:
    """A straight piece of a polyline, from ``start`` to ``end``."""

    start: Point
    end: Point

    def point_at(self, t: float) -> Point:
        """Interpolate along the segment.

        ``t`` of exactly 0 or 1 returns the stored endpoint itself so
        clamped positions never drift by a rounding error.
        """
        if t <= 0.0:
            return self.start
        if t >= 1.0:
            return self.end
        return (
            self.start[0] + t * (self.end[0] - self.start[0]),
            self.start[1] + t * (self.end[1] - self.start[1]),
        )


@dataclass(frozen=True)
class Intersection:
    """A crossing of another connector on one of this path's segments."""

    segment_index: int
    point: Point
    t: float


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class QuadTo:
    """Quadratic curve through ``control`` ending at ``point``."""

    control: Point
    point: Point


PathCommand = MoveTo | LineTo | QuadTo


@dataclass
class ConnectorPath:
    """Drawable connector path: one MoveTo followed by lines and arcs."""

    commands: list[PathCommand] = field(default_factory=list)

    @classmethod
    def from_points(cls, points: list[Point]) -> ConnectorPath:
        if not points:
            return cls()
        return cls([MoveTo(points[0])] + [LineTo(p) for p in points[1:]])

    @property
    def start(self) -> Point | None:
        return self.commands[0].point if self.commands else None

    @property
    def end(self) -> Point | None:
        return self.commands[-1].point if self.commands else None

    @property
    def arc_count(self) -> int:
        return sum(1 for c in self.commands if isinstance(c, QuadTo))

    def points(self) -> list[Point]:
        """Return the on-path points, dropping arc control points."""
        return [c.point for c in self.commands]

    def to_svg(self) -> str:
        """Render as an SVG path ``d`` attribute."""
        parts = []
        for cmd in self.commands:
            if isinstance(cmd, MoveTo):
                parts.append(f"M {_fmt(cmd.point[0])} {_fmt(cmd.point[1])}")
            elif isinstance(cmd, LineTo):
                parts.append(f"L {_fmt(cmd.point[0])} {_fmt(cmd.point[1])}")
            else:
                parts.append(
                    f"Q {_fmt(cmd.control[0])} {_fmt(cmd.control[1])} "
                    f"{_fmt(cmd.point[0])} {_fmt(cmd.point[1])}"
                )
        return " ".join(parts)

    def to_dict(self) -> list[dict]:
        out: list[dict] = []
        for cmd in self.commands:
            if isinstance(cmd, MoveTo):
                out.append({"cmd": "M", "point": list(cmd.point)})
            elif isinstance(cmd, LineTo):
                out.append({"cmd": "L", "point": list(cmd.point)})
            else:
                out.append(
                    {"cmd": "Q", "control": list(cmd.control), "point": list(cmd.point)}
                )
        return out


@dataclass(frozen=True)
class RawPath:
    """A routed path before hop-over arcs are inserted."""

    points: list[Point]
    source_offset: Point
    target_offset: Point

    @property
    def label_point(self) -> Point:
        """Midpoint of the routing run between the two offset points."""
        return (
            (self.source_offset[0] + self.target_offset[0]) / 2,
            (self.source_offset[1] + self.target_offset[1]) / 2,
        )


def path_segments(points: list[Point]) -> list[Segment]:
    """Split a polyline into consecutive segments."""
    return [Segment(points[i], points[i + 1]) for i in range(len(points) - 1)]


def _fmt(value: float) -> str:
    """Format a coordinate compactly for SVG output."""
    rounded = round(value, 3)
    if rounded == int(rounded):
        return str(int(rounded))
    return str(rounded)
