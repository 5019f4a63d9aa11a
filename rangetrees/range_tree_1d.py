"""
One-dimensional range tree.

Leaves hold the input points; internal nodes hold a synthetic point made of
the median x and median y of their subset. Only the coordinate on the axis
the tree was built for is used for navigation.

The module-level functions are stateless and operate on `RangeNode` roots;
the 2D range tree and the segment tree call them directly for their
canonical sets. `SingleDimensionalRangeTree` wraps a root and validates its
input once.
"""

import bisect
from typing import Iterable, Optional, Sequence

from .debug import debug_print
from .geometric import Axis, Point, Window
from .utils import check_strictly_increasing, median


def _debug_print(msg: str) -> None:
    debug_print("RANGE1D", msg)


class RangeNode:
    __slots__ = ['point', 'left', 'right']

    def __init__(self, point: Point):
        self.point: Point = point
        self.left: Optional['RangeNode'] = None
        self.right: Optional['RangeNode'] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build(points: Sequence[Point], axis: Axis) -> Optional[RangeNode]:
    """Build a tree over `points`, which must already be sorted by `axis`."""
    if not points:
        return None
    if len(points) == 1:
        return RangeNode(points[0])

    node = RangeNode(Point(median(points, Axis.X), median(points, Axis.Y)))
    split = bisect.bisect_right(points, node.point.coordinate(axis),
                                key=lambda p: p.coordinate(axis))
    node.left = build(points[:split], axis)
    node.right = build(points[split:], axis)
    return node


def report_leaves(node: Optional[RangeNode], points: list[Point]) -> None:
    """Append every leaf point under `node`, in order."""
    if node is None:
        return
    if node.is_leaf():
        points.append(node.point)
        return
    report_leaves(node.left, points)
    report_leaves(node.right, points)


def find_split_node(node: Optional[RangeNode], window: Window, axis: Axis) -> Optional[RangeNode]:
    """First node on the root path whose coordinate lies inside the window's range."""
    low, high = window.start(axis), window.end(axis)
    while node is not None:
        value = node.point.coordinate(axis)
        if low <= value <= high:
            return node
        node = node.left if value > high else node.right
    return None


def _report_if_inside(node: RangeNode, window: Window, points: list[Point]) -> None:
    if window.is_point_in_window(node.point):
        points.append(node.point)


def _walk_left_boundary(node: Optional[RangeNode], window: Window, axis: Axis,
                        points: list[Point]) -> None:
    # Everything below the split node's left child is <= window end.
    low = window.start(axis)
    while node is not None:
        if node.is_leaf():
            _report_if_inside(node, window, points)
            return
        if node.point.coordinate(axis) >= low:
            report_leaves(node.right, points)
            node = node.left
        else:
            node = node.right


def _walk_right_boundary(node: Optional[RangeNode], window: Window, axis: Axis,
                         points: list[Point]) -> None:
    # Everything below the split node's right child is >= window start.
    high = window.end(axis)
    while node is not None:
        if node.is_leaf():
            _report_if_inside(node, window, points)
            return
        if node.point.coordinate(axis) <= high:
            report_leaves(node.left, points)
            node = node.right
        else:
            node = node.left


def find_points(node: Optional[RangeNode], window: Window, axis: Axis,
                points: Optional[list[Point]] = None) -> list[Point]:
    """
    Collect the points whose `axis` coordinate lies in the window's range.

    Leaves reached on the boundary paths are checked against the whole
    window; subtrees hanging off those paths are reported wholesale, without
    looking at the other axis. With a finite range on the other axis the
    result is therefore neither "in range on `axis`" nor "inside the window";
    pass an unbounded other axis for a pure one-axis query.
    Results are appended to `points` (a new list if omitted) and returned.
    """
    if points is None:
        points = []
    if node is None or window.is_empty():
        return points

    split_node = find_split_node(node, window, axis)
    if split_node is None:
        return points
    if split_node.is_leaf():
        _report_if_inside(split_node, window, points)
        return points

    _walk_left_boundary(split_node.left, window, axis, points)
    _walk_right_boundary(split_node.right, window, axis, points)
    return points


def depth(node: Optional[RangeNode]) -> int:
    if node is None:
        return 0
    return 1 + max(depth(node.left), depth(node.right))


class SingleDimensionalRangeTree:
    """A validated 1D range tree over one coordinate of a point set."""

    def __init__(self, root: Optional[RangeNode], axis: Axis, size: int):
        self.root = root
        self.axis = axis
        self._size = size

    @classmethod
    def build(cls, points: Iterable[Point], axis: Axis = Axis.X) -> 'SingleDimensionalRangeTree':
        """
        Build from points sorted by `axis` with no repeated `axis` coordinate.

        Raises InvalidInputError on a repeated coordinate and
        PrecedingOrderViolation if the points are out of order.
        """
        points = list(points)
        check_strictly_increasing([p.coordinate(axis) for p in points],
                                  f"points ordered by {axis.value}")
        _debug_print(f"build: {len(points)} points on {axis.value}")
        return cls(build(points, axis), axis, len(points))

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    def depth(self) -> int:
        return depth(self.root)

    def points(self) -> list[Point]:
        result: list[Point] = []
        report_leaves(self.root, result)
        return result

    def find_points(self, window: Window) -> list[Point]:
        """
        Points whose coordinate on the tree's axis lies in the window's range.

        Expects the window to be unbounded on the other axis; see the
        module-level `find_points` for what a finite range there does.
        """
        if window.is_empty():
            _debug_print(f"find_points: empty window {window}")
            return []
        return find_points(self.root, window, self.axis)

    # --- Debug Tool ---

    def verify_integrity(self):
        """Crashes if a leaf sits on the wrong side of an ancestor's median."""
        axis = self.axis

        def _walk(node):
            if node.is_leaf():
                value = node.point.coordinate(axis)
                return value, value
            if node.left is None or node.right is None:
                raise RuntimeError(f"Internal node {node.point} is missing a child")

            left_min, left_max = _walk(node.left)
            right_min, right_max = _walk(node.right)
            split = node.point.coordinate(axis)
            if left_max > split or right_min <= split:
                raise RuntimeError(f"Median Violation at {node.point}")
            return left_min, right_max

        if self.root is not None:
            _walk(self.root)
