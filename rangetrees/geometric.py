"""
Geometric value types shared by every tree.

Points, intervals, segments, windows and vertical query lines. All of them
are immutable and compare/hash by value, so they can be used as dict keys
in the per-node point -> segment maps.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union

Number = Union[int, float]


class Axis(Enum):
    """Coordinate axis a structure is ordered by."""
    X = "x"
    Y = "y"


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def coordinate(self, axis: Axis) -> int:
        return self.x if axis is Axis.X else self.y


@dataclass(frozen=True)
class Interval:
    """
    One-dimensional interval with independently open or closed ends.

    Unbounded ends are expressed with -inf/+inf and are always open.
    """
    start: Number
    end: Number
    closed_start: bool = True
    closed_end: bool = True

    def is_empty(self) -> bool:
        if self.start > self.end:
            return True
        if self.start == self.end:
            return not (self.closed_start and self.closed_end)
        return False

    def contains_value(self, value: Number) -> bool:
        if value < self.start or value > self.end:
            return False
        if value == self.start and not self.closed_start:
            return False
        if value == self.end and not self.closed_end:
            return False
        return True

    def contains(self, other: 'Interval') -> bool:
        """True if every value of `other` lies in this interval."""
        if other.is_empty():
            return True
        if self.is_empty():
            return False
        if other.start < self.start:
            return False
        if other.start == self.start and other.closed_start and not self.closed_start:
            return False
        if other.end > self.end:
            return False
        if other.end == self.end and other.closed_end and not self.closed_end:
            return False
        return True

    def intersection(self, other: 'Interval') -> 'Interval':
        # At a shared bound the result is closed only if both sides are.
        if self.start == other.start:
            start, closed_start = self.start, self.closed_start and other.closed_start
        elif self.start > other.start:
            start, closed_start = self.start, self.closed_start
        else:
            start, closed_start = other.start, other.closed_start

        if self.end == other.end:
            end, closed_end = self.end, self.closed_end and other.closed_end
        elif self.end < other.end:
            end, closed_end = self.end, self.closed_end
        else:
            end, closed_end = other.end, other.closed_end

        return Interval(start, end, closed_start, closed_end)

    def intersects(self, other: 'Interval') -> bool:
        return not self.intersection(other).is_empty()

    def union_with_neighbor(self, right: 'Interval') -> 'Interval':
        """Union with the interval immediately to the right of this one."""
        return Interval(self.start, right.end, self.closed_start, right.closed_end)


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point

    @property
    def x_interval(self) -> Interval:
        """Closed x-extent of the segment."""
        return Interval(min(self.start.x, self.end.x), max(self.start.x, self.end.x))

    @property
    def y_interval(self) -> Interval:
        return Interval(min(self.start.y, self.end.y), max(self.start.y, self.end.y))

    def is_horizontal(self) -> bool:
        return self.start.y == self.end.y

    def is_vertical(self) -> bool:
        return self.start.x == self.end.x


class _VerticalEdge(NamedTuple):
    x: Number
    start_y: Number
    end_y: Number


class _HorizontalEdge(NamedTuple):
    start_x: Number
    end_x: Number
    y: Number


def _vertical_edges_meet(edge1: _VerticalEdge, edge2: _VerticalEdge) -> bool:
    if edge1.x != edge2.x:
        return False
    return not (edge1.start_y > edge2.end_y or edge2.start_y > edge1.end_y)


def _horizontal_edges_meet(edge1: _HorizontalEdge, edge2: _HorizontalEdge) -> bool:
    if edge1.y != edge2.y:
        return False
    return not (edge1.start_x > edge2.end_x or edge2.start_x > edge1.end_x)


def _edges_cross(horizontal: _HorizontalEdge, vertical: _VerticalEdge) -> bool:
    return not (horizontal.y > vertical.end_y or vertical.start_y > horizontal.y or
                horizontal.start_x > vertical.x or vertical.x > horizontal.end_x)


@dataclass(frozen=True)
class Window:
    """Axis-aligned rectangle, inclusive on all four bounds."""
    start_x: Number
    start_y: Number
    end_x: Number
    end_y: Number

    def start(self, axis: Axis) -> Number:
        return self.start_x if axis is Axis.X else self.start_y

    def end(self, axis: Axis) -> Number:
        return self.end_x if axis is Axis.X else self.end_y

    def is_empty(self) -> bool:
        return self.start_x > self.end_x or self.start_y > self.end_y

    def is_point_in_x_window(self, point: Point) -> bool:
        return self.start_x <= point.x <= self.end_x

    def is_point_in_y_window(self, point: Point) -> bool:
        return self.start_y <= point.y <= self.end_y

    def is_point_in_axis_window(self, point: Point, axis: Axis) -> bool:
        return self.start(axis) <= point.coordinate(axis) <= self.end(axis)

    def is_point_in_window(self, point: Point) -> bool:
        return self.is_point_in_x_window(point) and self.is_point_in_y_window(point)

    def contains(self, region: 'Window') -> bool:
        return (self.start_x <= region.start_x and region.end_x <= self.end_x and
                self.start_y <= region.start_y and region.end_y <= self.end_y)

    def _vertical_edges(self) -> tuple[_VerticalEdge, _VerticalEdge]:
        return (_VerticalEdge(self.start_x, self.start_y, self.end_y),
                _VerticalEdge(self.end_x, self.start_y, self.end_y))

    def _horizontal_edges(self) -> tuple[_HorizontalEdge, _HorizontalEdge]:
        return (_HorizontalEdge(self.start_x, self.end_x, self.start_y),
                _HorizontalEdge(self.start_x, self.end_x, self.end_y))

    def intersects(self, region: 'Window') -> bool:
        """True if the two rectangles share at least one point."""
        if self.is_empty() or region.is_empty():
            return False
        if self.contains(region) or region.contains(self):
            return True

        verticals, horizontals = self._vertical_edges(), self._horizontal_edges()
        other_verticals, other_horizontals = region._vertical_edges(), region._horizontal_edges()
        return (
            any(_vertical_edges_meet(a, b) for a in verticals for b in other_verticals) or
            any(_horizontal_edges_meet(a, b) for a in horizontals for b in other_horizontals) or
            any(_edges_cross(h, v) for h in other_horizontals for v in verticals) or
            any(_edges_cross(h, v) for h in horizontals for v in other_verticals)
        )

    def split_by_line(self, point: Point, axis: Axis) -> tuple['Window', 'Window']:
        """
        Split by the vertical (Axis.X) or horizontal (Axis.Y) line through `point`.

        Both halves keep the dividing line, so they are not disjoint.
        """
        if axis is Axis.X:
            return (Window(self.start_x, self.start_y, point.x, self.end_y),
                    Window(point.x, self.start_y, self.end_x, self.end_y))
        return (Window(self.start_x, self.start_y, self.end_x, point.y),
                Window(self.start_x, point.y, self.end_x, self.end_y))


@dataclass(frozen=True)
class QueryLine:
    """Vertical query segment at `x` spanning [start_y, end_y]."""
    x: Number
    start_y: Number
    end_y: Number

    def is_empty(self) -> bool:
        return self.start_y > self.end_y

    def as_window(self) -> Window:
        return Window(self.x, self.start_y, self.x, self.end_y)
