"""
Interval tree for horizontal segments.

Each node keeps the segments that cross its median start-x, indexed twice:
a 2D range tree over their start points and one over their end points.
A vertical query line left of the median can only be reached by segments
starting at or before it, so the start tree is asked; right of the median
the end tree is asked.
"""

import math
from typing import Callable, Iterable, Optional, Sequence

from . import range_tree_2d
from .debug import debug_print
from .errors import InvalidInputError
from .geometric import Point, QueryLine, Segment, Window
from .utils import (
    check_non_decreasing, check_same_members, check_unique, filter_in_order,
    segment_end_key, segment_start_key, sorted_by_end, sorted_by_start,
    sorted_by_y, truncated_mean
)


def _debug_print(msg: str) -> None:
    debug_print("INTERVAL", msg)


class IntervalNode:
    """Node holding the segments that cross `mid`."""
    __slots__ = ['mid', 'start_points', 'end_points', 'point_to_segment', 'left', 'right']

    def __init__(self, mid: int):
        self.mid: int = mid
        self.start_points: Optional[range_tree_2d.RangeNode] = None
        self.end_points: Optional[range_tree_2d.RangeNode] = None
        self.point_to_segment: dict[Point, Segment] = {}
        self.left: Optional['IntervalNode'] = None
        self.right: Optional['IntervalNode'] = None

    def segments(self) -> set[Segment]:
        return set(self.point_to_segment.values())


# --- Build ---

def x_median(segments: Sequence[Segment]) -> int:
    """Median start-x of segments sorted by start-x."""
    size = len(segments)
    if size % 2 == 0:
        return truncated_mean(segments[size // 2 - 1].x_interval.start,
                              segments[size // 2].x_interval.start)
    return segments[size // 2].x_interval.start


def _build_endpoint_tree(node: IntervalNode, segments: Sequence[Segment],
                         use_start: bool) -> Optional[range_tree_2d.RangeNode]:
    # Segments arrive ordered by the chosen endpoint's x, so only the y order
    # has to be produced here.
    points_by_x = []
    for segment in segments:
        point = segment.start if use_start else segment.end
        points_by_x.append(point)
        node.point_to_segment[point] = segment
    return range_tree_2d.build(points_by_x, sorted_by_y(points_by_x))


def build(segments_by_start: Sequence[Segment],
          segments_by_end: Sequence[Segment]) -> Optional[IntervalNode]:
    """Build from one segment set ordered by start-x and by end-x."""
    if not segments_by_start:
        return None
    if len(segments_by_start) == 1:
        segment = segments_by_start[0]
        node = IntervalNode(segment.x_interval.start)
        node.start_points = _build_endpoint_tree(node, segments_by_start, use_start=True)
        node.end_points = _build_endpoint_tree(node, segments_by_start, use_start=False)
        return node

    node = IntervalNode(x_median(segments_by_start))
    left_by_start: list[Segment] = []
    right_by_start: list[Segment] = []
    crossing_by_start: list[Segment] = []
    for segment in segments_by_start:
        interval = segment.x_interval
        if interval.end < node.mid:
            left_by_start.append(segment)
        elif interval.start > node.mid:
            right_by_start.append(segment)
        else:
            crossing_by_start.append(segment)

    left_by_end = filter_in_order(segments_by_end, set(left_by_start))
    right_by_end = filter_in_order(segments_by_end, set(right_by_start))
    crossing_by_end = filter_in_order(segments_by_end, set(crossing_by_start))

    node.start_points = _build_endpoint_tree(node, crossing_by_start, use_start=True)
    node.end_points = _build_endpoint_tree(node, crossing_by_end, use_start=False)
    node.left = build(left_by_start, left_by_end)
    node.right = build(right_by_start, right_by_end)
    return node


def _check_segments(segments_by_start: Sequence[Segment], segments_by_end: Sequence[Segment]) -> None:
    for segment in segments_by_start:
        if segment.start.x > segment.end.x:
            raise InvalidInputError(f"segment {segment} starts right of its end")
    check_non_decreasing(segments_by_start, segment_start_key, "segments ordered by start x")
    check_non_decreasing(segments_by_end, segment_end_key, "segments ordered by end x")
    check_same_members(segments_by_start, segments_by_end, "segments")

    # Start and end points feed separate 2D range trees, each needing unique x and y.
    check_unique((s.start.x for s in segments_by_start), "segment start x")
    check_unique((s.start.y for s in segments_by_start), "segment start y")
    check_unique((s.end.x for s in segments_by_start), "segment end x")
    check_unique((s.end.y for s in segments_by_start), "segment end y")

    owners: dict[Point, Segment] = {}
    for segment in segments_by_start:
        for point in (segment.start, segment.end):
            owner = owners.setdefault(point, segment)
            if owner != segment:
                raise InvalidInputError(f"point {point} is an endpoint of {owner} and {segment}")


# --- Search ---

def find_segments_crossing_line(node: Optional[IntervalNode], query_line: QueryLine,
                                callback: Callable[[Segment], None]) -> None:
    """Call `callback` for every stored segment crossing `query_line`."""

    def _report(tree, window, node):
        for point in range_tree_2d.find_points(tree, window):
            callback(node.point_to_segment[point])

    def _search(node):
        if node is None:
            return
        x = query_line.x
        if x > node.mid:
            _report(node.end_points,
                    Window(x, query_line.start_y, math.inf, query_line.end_y), node)
            _search(node.right)
            return
        if x < node.mid:
            _search(node.left)
        # Every segment here starts at or before mid, so at x == mid the start
        # tree alone yields the crossing segments in the y-range.
        _report(node.start_points,
                Window(-math.inf, query_line.start_y, x, query_line.end_y), node)

    if query_line.is_empty():
        return
    _search(node)


class IntervalTree:
    """A validated interval tree over horizontal segments."""

    def __init__(self, root: Optional[IntervalNode], size: int):
        self.root = root
        self._size = size

    @classmethod
    def build(cls, segments_by_start: Iterable[Segment],
              segments_by_end: Iterable[Segment]) -> 'IntervalTree':
        """
        Build from one segment set ordered by start-x and by end-x.

        Every segment must run left to right, and across the set no two start
        points or two end points may share an x or a y.
        """
        segments_by_start = list(segments_by_start)
        segments_by_end = list(segments_by_end)
        _check_segments(segments_by_start, segments_by_end)
        _debug_print(f"build: {len(segments_by_start)} segments")
        return cls(build(segments_by_start, segments_by_end), len(segments_by_start))

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> 'IntervalTree':
        segments = list(segments)
        return cls.build(sorted_by_start(segments), sorted_by_end(segments))

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    def depth(self) -> int:
        def _depth(node):
            if node is None:
                return 0
            return 1 + max(_depth(node.left), _depth(node.right))
        return _depth(self.root)

    # --- Search Methods ---

    def find_crossing(self, query_line: QueryLine, callback: Callable[[Segment], None]):
        """Calls `callback` once for each segment crossing the line."""
        find_segments_crossing_line(self.root, query_line, callback)

    def find_segments_crossing_line(self, query_line: QueryLine) -> set[Segment]:
        if query_line.is_empty():
            _debug_print(f"find_segments_crossing_line: empty line {query_line}")
        found: set[Segment] = set()
        find_segments_crossing_line(self.root, query_line, found.add)
        return found

    # --- Debug Tool ---

    def verify_integrity(self):
        """Crashes if a segment is stored at a node it does not belong to."""
        def _walk(node, low, high):
            if node is None:
                return 0
            if not low < node.mid < high:
                raise RuntimeError(f"Mid Violation at {node.mid}")

            for segment in node.segments():
                interval = segment.x_interval
                if not interval.contains_value(node.mid):
                    raise RuntimeError(f"Crossing Violation at {node.mid}: {segment}")
                if interval.start <= low or interval.end >= high:
                    raise RuntimeError(f"Subtree Violation at {node.mid}: {segment}")

            count = len(node.segments())
            count += _walk(node.left, low, node.mid)
            count += _walk(node.right, node.mid, high)
            return count

        stored = _walk(self.root, -math.inf, math.inf)
        if stored != self._size:
            raise RuntimeError(f"Size Violation: {stored} stored, {self._size} expected")
