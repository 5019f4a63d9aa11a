"""
Two-dimensional range tree.

A balanced tree on x. Every node, leaves included, owns a canonical set: a
1D range tree on y over all points below it. A window query walks the two
x-boundary paths from the split node and asks the canonical set of each
subtree hanging inside the x-range for its y-range.
"""

import bisect
from typing import Iterable, Optional, Sequence

from . import range_tree_1d
from .debug import debug_print
from .geometric import Axis, Point, Window
from .utils import (
    check_same_members, check_strictly_increasing, filter_in_order, median,
    sorted_by_x, sorted_by_y
)


def _debug_print(msg: str) -> None:
    debug_print("RANGE2D", msg)


class RangeNode:
    __slots__ = ['point', 'canonical_set', 'left', 'right']

    def __init__(self, point: Point):
        self.point: Point = point
        self.canonical_set: Optional[range_tree_1d.RangeNode] = None
        self.left: Optional['RangeNode'] = None
        self.right: Optional['RangeNode'] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build(points_by_x: Sequence[Point], points_by_y: Sequence[Point]) -> Optional[RangeNode]:
    """
    Build from the same point set in two orders: by x and by y.

    The y-ordered slices of the children are filtered out of the parent's
    y-ordered list, never re-sorted.
    """
    if not points_by_x:
        return None
    if len(points_by_x) == 1:
        node = RangeNode(points_by_x[0])
        node.canonical_set = range_tree_1d.build(points_by_x, Axis.Y)
        return node

    node = RangeNode(Point(median(points_by_x, Axis.X), median(points_by_y, Axis.Y)))
    node.canonical_set = range_tree_1d.build(points_by_y, Axis.Y)

    split = bisect.bisect_right(points_by_x, node.point.x, key=lambda p: p.x)
    left_by_x = points_by_x[:split]
    right_by_x = points_by_x[split:]
    left_by_y = filter_in_order(points_by_y, set(left_by_x))
    right_by_y = filter_in_order(points_by_y, set(right_by_x))

    node.left = build(left_by_x, left_by_y)
    node.right = build(right_by_x, right_by_y)
    return node


def find_split_node(node: Optional[RangeNode], window: Window) -> Optional[RangeNode]:
    while node is not None:
        if node.point.x < window.start_x:
            node = node.right
        elif node.point.x > window.end_x:
            node = node.left
        else:
            return node
    return None


def _report_if_inside(node: RangeNode, window: Window, points: list[Point]) -> None:
    if window.is_point_in_window(node.point):
        points.append(node.point)


def _walk_left_boundary(node: Optional[RangeNode], window: Window, points: list[Point]) -> None:
    while node is not None:
        if node.is_leaf():
            _report_if_inside(node, window, points)
            return
        if node.point.x >= window.start_x:
            range_tree_1d.find_points(node.right.canonical_set, window, Axis.Y, points)
            node = node.left
        else:
            node = node.right


def _walk_right_boundary(node: Optional[RangeNode], window: Window, points: list[Point]) -> None:
    while node is not None:
        if node.is_leaf():
            _report_if_inside(node, window, points)
            return
        if node.point.x <= window.end_x:
            range_tree_1d.find_points(node.left.canonical_set, window, Axis.Y, points)
            node = node.right
        else:
            node = node.left


def find_points(node: Optional[RangeNode], window: Window,
                points: Optional[list[Point]] = None) -> list[Point]:
    """Collect every point inside `window`; appends to and returns `points`."""
    if points is None:
        points = []
    if node is None or window.is_empty():
        return points

    split_node = find_split_node(node, window)
    if split_node is None:
        return points
    if split_node.is_leaf():
        _report_if_inside(split_node, window, points)
        return points

    _walk_left_boundary(split_node.left, window, points)
    _walk_right_boundary(split_node.right, window, points)
    return points


def depth(node: Optional[RangeNode]) -> int:
    if node is None:
        return 0
    return 1 + max(depth(node.left), depth(node.right))


class TwoDimensionalRangeTree:
    """A validated 2D range tree answering inclusive window queries."""

    def __init__(self, root: Optional[RangeNode], size: int):
        self.root = root
        self._size = size

    @classmethod
    def build(cls, points_by_x: Iterable[Point],
              points_by_y: Iterable[Point]) -> 'TwoDimensionalRangeTree':
        """
        Build from one point set given in x order and in y order.

        No two points may share an x or a y coordinate.
        """
        points_by_x = list(points_by_x)
        points_by_y = list(points_by_y)
        check_strictly_increasing([p.x for p in points_by_x], "points ordered by x")
        check_strictly_increasing([p.y for p in points_by_y], "points ordered by y")
        check_same_members(points_by_x, points_by_y, "points")
        _debug_print(f"build: {len(points_by_x)} points")
        return cls(build(points_by_x, points_by_y), len(points_by_x))

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> 'TwoDimensionalRangeTree':
        points = list(points)
        return cls.build(sorted_by_x(points), sorted_by_y(points))

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    def depth(self) -> int:
        return depth(self.root)

    def points(self) -> list[Point]:
        if self.root is None:
            return []
        result: list[Point] = []
        range_tree_1d.report_leaves(self.root.canonical_set, result)
        return result

    def find_points(self, window: Window) -> list[Point]:
        if window.is_empty():
            _debug_print(f"find_points: empty window {window}")
            return []
        return find_points(self.root, window)

    # --- Debug Tool ---

    def verify_integrity(self):
        """Crashes if the x split or a canonical set disagrees with the subtree."""

        def _walk(node):
            if node.is_leaf():
                leaves = [node.point]
            else:
                if node.left is None or node.right is None:
                    raise RuntimeError(f"Internal node {node.point} is missing a child")
                left = _walk(node.left)
                right = _walk(node.right)
                if max(p.x for p in left) > node.point.x or min(p.x for p in right) <= node.point.x:
                    raise RuntimeError(f"Median Violation at {node.point}")
                leaves = left + right

            canonical: list[Point] = []
            range_tree_1d.report_leaves(node.canonical_set, canonical)
            if canonical != sorted_by_y(leaves):
                raise RuntimeError(f"Canonical Set Violation at {node.point}")
            return leaves

        if self.root is not None:
            _walk(self.root)
