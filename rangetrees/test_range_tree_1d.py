import math
import random
import unittest

from .errors import InvalidInputError, PrecedingOrderViolation
from .generator import random_points
from .geometric import Axis, Point, Window
from .range_tree_1d import SingleDimensionalRangeTree
from .utils import point_x_key, point_y_key, sorted_by_x, sorted_by_y


def _x_window(start, end):
    return Window(start, -math.inf, end, math.inf)


def _y_window(start, end):
    return Window(-math.inf, start, math.inf, end)


class SingleDimensionalRangeTreeTest(unittest.TestCase):
    def setUp(self):
        self.points = random_points(60, 300, seed=11)

    def test_matches_brute_force_on_x(self):
        """
        Every x-range query returns exactly the points whose x lies in the range.
        """
        points = sorted_by_x(self.points)
        tree = SingleDimensionalRangeTree.build(points, Axis.X)
        rng = random.Random(3)
        for _ in range(200):
            start = rng.randrange(-20, 320)
            end = start + rng.randrange(0, 150)
            expected = [p for p in points if start <= p.x <= end]
            actual = sorted(tree.find_points(_x_window(start, end)), key=point_x_key)
            self.assertEqual(expected, actual,
                msg="\n\twindow=[{}, {}]\n\texpected={}\n\tactual={}".format(start, end, expected, actual))

    def test_matches_brute_force_on_y(self):
        points = sorted_by_y(self.points)
        tree = SingleDimensionalRangeTree.build(points, Axis.Y)
        rng = random.Random(4)
        for _ in range(200):
            start = rng.randrange(-20, 320)
            end = start + rng.randrange(0, 150)
            expected = [p for p in points if start <= p.y <= end]
            actual = sorted(tree.find_points(_y_window(start, end)), key=point_y_key)
            self.assertEqual(expected, actual)

    def test_range_on_every_input_coordinate(self):
        points = sorted_by_x(self.points)
        tree = SingleDimensionalRangeTree.build(points, Axis.X)
        for point in points:
            self.assertEqual(tree.find_points(_x_window(point.x, point.x)), [point])

    def test_empty_window(self):
        tree = SingleDimensionalRangeTree.build(sorted_by_x(self.points), Axis.X)
        self.assertEqual(tree.find_points(_x_window(50, 10)), [])

    def test_empty_input(self):
        tree = SingleDimensionalRangeTree.build([], Axis.X)
        self.assertTrue(tree.is_empty())
        self.assertEqual(len(tree), 0)
        self.assertEqual(tree.find_points(_x_window(0, 100)), [])

    def test_single_point(self):
        tree = SingleDimensionalRangeTree.build([Point(4, 9)], Axis.X)
        self.assertTrue(tree.root.is_leaf())
        self.assertEqual(tree.find_points(_x_window(0, 4)), [Point(4, 9)])
        self.assertEqual(tree.find_points(_x_window(5, 8)), [])
        # Leaves are checked against the whole window.
        self.assertEqual(tree.find_points(Window(0, 0, 10, 5)), [])

    def test_internal_nodes_hold_synthetic_medians(self):
        tree = SingleDimensionalRangeTree.build([Point(1, 1), Point(3, 3)], Axis.X)
        self.assertEqual(tree.root.point, Point(2, 2))
        self.assertEqual(tree.root.left.point, Point(1, 1))
        self.assertEqual(tree.root.right.point, Point(3, 3))
        self.assertEqual(tree.points(), [Point(1, 1), Point(3, 3)])

    def test_finite_other_axis_only_filters_boundary_leaves(self):
        """
        Off-path subtrees are reported by x alone; only the leaves ending the
        two boundary paths are held to the full window.
        """
        points = [Point(1, 9), Point(2, 8), Point(3, 7), Point(4, 6)]
        tree = SingleDimensionalRangeTree.build(points, Axis.X)
        found = sorted(tree.find_points(Window(1, 0, 4, 7)), key=point_x_key)
        # (2, 8) hangs off the left path and is kept; (1, 9) ends it and is dropped.
        self.assertEqual(found, [Point(2, 8), Point(3, 7), Point(4, 6)])

    def test_negative_coordinates(self):
        points = [Point(-3, 0), Point(-2, 5), Point(-1, 2), Point(4, 1)]
        tree = SingleDimensionalRangeTree.build(points, Axis.X)
        tree.verify_integrity()
        self.assertEqual(sorted(tree.find_points(_x_window(-3, -2)), key=point_x_key),
                         [Point(-3, 0), Point(-2, 5)])

    def test_balanced_depth(self):
        points = sorted_by_x(self.points)
        tree = SingleDimensionalRangeTree.build(points, Axis.X)
        tree.verify_integrity()
        self.assertLessEqual(tree.depth(), math.ceil(math.log2(len(points))) + 1)
        self.assertEqual(tree.points(), points)

    def test_building_twice_answers_identically(self):
        points = sorted_by_x(self.points)
        first = SingleDimensionalRangeTree.build(points, Axis.X)
        second = SingleDimensionalRangeTree.build(points, Axis.X)
        for start in range(0, 300, 17):
            window = _x_window(start, start + 40)
            self.assertEqual(first.find_points(window), second.find_points(window))

    def test_duplicate_coordinate_is_rejected(self):
        with self.assertRaises(InvalidInputError):
            SingleDimensionalRangeTree.build([Point(1, 1), Point(1, 2)], Axis.X)

    def test_unsorted_input_is_rejected(self):
        with self.assertRaises(PrecedingOrderViolation):
            SingleDimensionalRangeTree.build([Point(2, 1), Point(1, 2)], Axis.X)
        with self.assertRaises(PrecedingOrderViolation):
            SingleDimensionalRangeTree.build([Point(1, 2), Point(2, 1)], Axis.Y)


if __name__ == '__main__':
    unittest.main()
