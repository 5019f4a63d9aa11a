import random
import unittest

from .errors import InvalidInputError, PrecedingOrderViolation
from .generator import random_horizontal_segments
from .geometric import Point, QueryLine, Segment
from .interval_tree import IntervalTree, x_median
from .utils import sorted_by_end, sorted_by_start

A = Segment(Point(0, 5), Point(10, 6))
B = Segment(Point(3, 2), Point(8, 3))
C = Segment(Point(12, 9), Point(20, 10))


def _crossing(segments, line):
    return {s for s in segments
            if s.x_interval.contains_value(line.x) and line.start_y <= s.start.y <= line.end_y}


class IntervalTreeTest(unittest.TestCase):
    def test_example_query(self):
        tree = IntervalTree.build(sorted_by_start([A, B, C]), sorted_by_end([A, B, C]))
        self.assertEqual(tree.find_segments_crossing_line(QueryLine(6, 0, 10)), {A, B})
        self.assertEqual(tree.find_segments_crossing_line(QueryLine(15, 0, 10)), {C})
        self.assertEqual(tree.find_segments_crossing_line(QueryLine(6, 4, 10)), {A})
        self.assertEqual(tree.find_segments_crossing_line(QueryLine(11, 0, 10)), set())

    def test_query_on_the_median(self):
        tree = IntervalTree.from_segments([A, B, C])
        self.assertEqual(tree.root.mid, 3)
        self.assertEqual(tree.find_segments_crossing_line(QueryLine(3, 0, 10)), {A, B})
        self.assertEqual(tree.find_segments_crossing_line(QueryLine(3, 4, 10)), {A})

    def test_matches_brute_force(self):
        """
        For horizontal segments the answer is exactly the segments whose
        x-extent holds the line and whose y lies on it.
        """
        segments = random_horizontal_segments(60, 300, max_length=60, seed=8)
        tree = IntervalTree.from_segments(segments)
        tree.verify_integrity()
        rng = random.Random(1)
        for x in range(-5, 370, 2):
            start_y = rng.randrange(-10, 300)
            line = QueryLine(x, start_y, start_y + rng.randrange(0, 200))
            self.assertEqual(tree.find_segments_crossing_line(line), _crossing(segments, line),
                msg="\n\tline={}".format(line))

    def test_segment_endpoints_are_inclusive(self):
        segments = random_horizontal_segments(30, 200, max_length=40, seed=21)
        tree = IntervalTree.from_segments(segments)
        for segment in segments:
            for x in (segment.start.x, segment.end.x):
                found = tree.find_segments_crossing_line(QueryLine(x, segment.start.y, segment.start.y))
                self.assertIn(segment, found)

    def test_callback_sees_each_segment_once(self):
        segments = random_horizontal_segments(40, 200, max_length=80, seed=3)
        tree = IntervalTree.from_segments(segments)
        for x in range(0, 280, 7):
            seen = []
            tree.find_crossing(QueryLine(x, 0, 200), seen.append)
            self.assertEqual(len(seen), len(set(seen)))

    def test_empty_input_and_empty_line(self):
        tree = IntervalTree.build([], [])
        self.assertTrue(tree.is_empty())
        self.assertEqual(tree.find_segments_crossing_line(QueryLine(0, 0, 10)), set())
        tree = IntervalTree.from_segments([A, B, C])
        self.assertEqual(tree.find_segments_crossing_line(QueryLine(6, 10, 0)), set())

    def test_single_segment(self):
        tree = IntervalTree.from_segments([B])
        self.assertEqual(tree.depth(), 1)
        self.assertEqual(tree.root.mid, 3)
        self.assertEqual(tree.find_segments_crossing_line(QueryLine(5, 0, 10)), {B})
        self.assertEqual(tree.find_segments_crossing_line(QueryLine(9, 0, 10)), set())
        self.assertEqual(tree.find_segments_crossing_line(QueryLine(1, 0, 10)), set())

    def test_building_twice_answers_identically(self):
        segments = random_horizontal_segments(25, 150, seed=4)
        first = IntervalTree.from_segments(segments)
        second = IntervalTree.from_segments(segments)
        for x in range(0, 170, 5):
            line = QueryLine(x, 20, 120)
            self.assertEqual(first.find_segments_crossing_line(line),
                             second.find_segments_crossing_line(line))

    def test_x_median(self):
        self.assertEqual(x_median(sorted_by_start([A, B, C])), 3)
        self.assertEqual(x_median(sorted_by_start([A, B])), 1)
        left = Segment(Point(-5, 1), Point(-1, 1))
        right = Segment(Point(-2, 2), Point(4, 2))
        # Mean of -5 and -2 is -3.5, truncated toward zero.
        self.assertEqual(x_median([left, right]), -3)

    def test_invalid_segments_are_rejected(self):
        backwards = Segment(Point(10, 1), Point(2, 1))
        with self.assertRaises(InvalidInputError):
            IntervalTree.build([backwards], [backwards])
        shared_y = Segment(Point(30, 5), Point(40, 5))
        with self.assertRaises(InvalidInputError):
            IntervalTree.from_segments([A, shared_y])
        with self.assertRaises(InvalidInputError):
            IntervalTree.build(sorted_by_start([A, B]), sorted_by_end([A, C]))

    def test_unsorted_input_is_rejected(self):
        with self.assertRaises(PrecedingOrderViolation):
            IntervalTree.build([C, A, B], sorted_by_end([A, B, C]))
        with self.assertRaises(PrecedingOrderViolation):
            IntervalTree.build(sorted_by_start([A, B, C]), [C, B, A])


if __name__ == '__main__':
    unittest.main()
