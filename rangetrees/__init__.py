"""
Layered Range Trees Core Module

Static indexes answering axis-aligned range queries:
- Geometric value types (geometric.py)
- 1D range tree (range_tree_1d.py)
- 2D range tree with 1D canonical sets (range_tree_2d.py)
- Interval tree for horizontal segments (interval_tree.py)
- Segment tree for arbitrary segments (segment_tree.py)
- Seeded input generator and text formatting (generator.py, formatting.py)
- Configuration (config.py) and demo scenes (scene.py)
"""

from .geometric import Axis, Point, Interval, Segment, Window, QueryLine
from .errors import RangeTreeError, InvalidInputError, PrecedingOrderViolation
from .range_tree_1d import SingleDimensionalRangeTree
from .range_tree_2d import TwoDimensionalRangeTree
from .interval_tree import IntervalTree
from .segment_tree import SegmentTree
from .config import Config

__all__ = [
    'Axis',
    'Point',
    'Interval',
    'Segment',
    'Window',
    'QueryLine',
    'RangeTreeError',
    'InvalidInputError',
    'PrecedingOrderViolation',
    'SingleDimensionalRangeTree',
    'TwoDimensionalRangeTree',
    'IntervalTree',
    'SegmentTree',
    'Config',
]
