"""
Segment tree (locus method) for arbitrarily oriented segments.

The leaves are the elementary x-intervals induced by all segment endpoints.
A segment is stored at the highest nodes whose interval its x-extent covers.
Each such node indexes the endpoints of its segments in a 1D range tree on
y. A query walks the single root-to-leaf path whose intervals contain the
line's x and asks every canonical set on the way for the line's y-range.

Canonical sets are filtered by endpoint y only. A sloped segment with an
endpoint in the y-range is reported even if it passes above or below the
line at x, and a steep segment whose endpoints both lie outside the y-range
is not reported. For horizontal segments the answer is exact.
"""

import math
from typing import Iterable, Optional

from . import range_tree_1d
from .debug import debug_print
from .errors import InvalidInputError
from .geometric import Axis, Interval, Point, QueryLine, Segment, Window
from .utils import sorted_by_y


def _debug_print(msg: str) -> None:
    debug_print("SEGMENT", msg)


class SegmentNode:
    __slots__ = ['interval', 'associated_segments', 'canonical_set',
                 'point_to_segment', 'left', 'right']

    def __init__(self, interval: Interval):
        self.interval: Interval = interval
        self.associated_segments: list[Segment] = []
        self.canonical_set: Optional[range_tree_1d.RangeNode] = None
        self.point_to_segment: dict[Point, Segment] = {}
        self.left: Optional['SegmentNode'] = None
        self.right: Optional['SegmentNode'] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


# --- Build ---

def build_elementary_intervals(segments: Iterable[Segment]) -> list[SegmentNode]:
    """
    Leaves for the distinct endpoint values p0 < ... < pn:
    (-inf, p0), [p0, p0], (p0, p1), ..., [pn, pn], (pn, +inf).
    """
    endpoints = sorted({value for segment in segments
                        for value in (segment.x_interval.start, segment.x_interval.end)})
    if not endpoints:
        return []

    leaves = [SegmentNode(Interval(-math.inf, endpoints[0], False, False))]
    for current, following in zip(endpoints, endpoints[1:]):
        leaves.append(SegmentNode(Interval(current, current)))
        leaves.append(SegmentNode(Interval(current, following, False, False)))
    leaves.append(SegmentNode(Interval(endpoints[-1], endpoints[-1])))
    leaves.append(SegmentNode(Interval(endpoints[-1], math.inf, False, False)))
    return leaves


def _pair_up(nodes: list[SegmentNode]) -> list[SegmentNode]:
    parents = []
    for i in range(0, len(nodes) - 1, 2):
        parent = SegmentNode(nodes[i].interval.union_with_neighbor(nodes[i + 1].interval))
        parent.left = nodes[i]
        parent.right = nodes[i + 1]
        parents.append(parent)

    # An odd node out is promoted with a single child.
    if len(nodes) % 2 != 0:
        parent = SegmentNode(nodes[-1].interval)
        parent.left = nodes[-1]
        parents.append(parent)
    return parents


def insert_interval(node: SegmentNode, segment: Segment) -> None:
    interval = segment.x_interval
    if interval.contains(node.interval):
        node.associated_segments.append(segment)
        return
    for child in (node.left, node.right):
        if child is not None and interval.intersects(child.interval):
            insert_interval(child, segment)


def _canonical_points(segments: Iterable[Segment]) -> list[Point]:
    points = []
    for segment in segments:
        points.append(segment.start)
        # Both endpoints of a horizontal segment share a y; one is enough.
        if segment.end.y != segment.start.y:
            points.append(segment.end)
    return points


def build_canonical_set(node: Optional[SegmentNode]) -> None:
    if node is None:
        return
    if node.associated_segments:
        for segment in node.associated_segments:
            node.point_to_segment[segment.start] = segment
            node.point_to_segment[segment.end] = segment
        node.canonical_set = range_tree_1d.build(
            sorted_by_y(_canonical_points(node.associated_segments)), Axis.Y)
    build_canonical_set(node.left)
    build_canonical_set(node.right)


def build(segments: Iterable[Segment]) -> Optional[SegmentNode]:
    segments = list(segments)
    nodes = build_elementary_intervals(segments)
    if not nodes:
        return None

    while len(nodes) > 1:
        nodes = _pair_up(nodes)
    root = nodes[0]

    for segment in segments:
        insert_interval(root, segment)
    build_canonical_set(root)
    return root


def _check_segments(segments: list[Segment]) -> None:
    # Canonical sets are 1D range trees on y over segment endpoints.
    owners: dict[int, Segment] = {}
    seen: set[Segment] = set()
    for segment in segments:
        if segment in seen:
            raise InvalidInputError(f"segment {segment} appears more than once")
        seen.add(segment)
        for point in _canonical_points([segment]):
            owner = owners.setdefault(point.y, segment)
            if owner != segment:
                raise InvalidInputError(
                    f"endpoint y {point.y} is shared by {owner} and {segment}")


# --- Search ---

def find_segments(node: Optional[SegmentNode], query_line: QueryLine,
                  segments: Optional[set[Segment]] = None) -> set[Segment]:
    """Collect stored segments whose endpoints hit the line's y-range on the x path."""
    if segments is None:
        segments = set()
    if query_line.is_empty():
        return segments

    window = Window(-math.inf, query_line.start_y, math.inf, query_line.end_y)
    while node is not None:
        if node.canonical_set is not None:
            for point in range_tree_1d.find_points(node.canonical_set, window, Axis.Y):
                segments.add(node.point_to_segment[point])

        if node.left is not None and node.left.interval.contains_value(query_line.x):
            node = node.left
        else:
            node = node.right
    return segments


class SegmentTree:
    """A validated locus-based segment tree."""

    def __init__(self, root: Optional[SegmentNode], size: int):
        self.root = root
        self._size = size

    @classmethod
    def build(cls, segments: Iterable[Segment]) -> 'SegmentTree':
        """
        Build from segments in any order.

        No two segments may have endpoints at the same y; a horizontal
        segment's own two endpoints may.
        """
        segments = list(segments)
        _check_segments(segments)
        root = build(segments)
        _debug_print(f"build: {len(segments)} segments")
        return cls(root, len(segments))

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

    def leaves(self) -> list[Interval]:
        result = []

        def _collect(node):
            if node is None:
                return
            if node.is_leaf():
                result.append(node.interval)
            _collect(node.left)
            _collect(node.right)

        _collect(self.root)
        return result

    def find_segments(self, query_line: QueryLine) -> set[Segment]:
        if query_line.is_empty():
            _debug_print(f"find_segments: empty line {query_line}")
            return set()
        return find_segments(self.root, query_line)

    # --- Debug Tool ---

    def verify_integrity(self):
        """Crashes if an interval union or a segment association is wrong."""
        def _walk(node, parent_interval):
            if node is None:
                return
            if node.left is not None and node.right is not None:
                expected = node.left.interval.union_with_neighbor(node.right.interval)
                if node.interval != expected:
                    raise RuntimeError(f"Union Violation at {node.interval}")
            elif node.left is not None and node.left.interval != node.interval:
                raise RuntimeError(f"Promotion Violation at {node.interval}")

            for segment in node.associated_segments:
                if not segment.x_interval.contains(node.interval):
                    raise RuntimeError(f"Coverage Violation at {node.interval}: {segment}")
                if parent_interval is not None and segment.x_interval.contains(parent_interval):
                    raise RuntimeError(f"Locus Violation at {node.interval}: {segment}")

            _walk(node.left, node.interval)
            _walk(node.right, node.interval)

        _walk(self.root, None)
