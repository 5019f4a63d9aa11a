"""
A generated input set, the index built over it and one query's answer.

This is what the command line prints and the viewer draws.
"""

import math
from dataclasses import dataclass, field
from typing import Optional

from . import formatting, generator
from .config import STRUCTURES, GeneratorConfig, QueryConfig
from .debug import debug_print
from .geometric import Axis, Point, QueryLine, Segment, Window
from .interval_tree import IntervalTree
from .range_tree_1d import SingleDimensionalRangeTree
from .range_tree_2d import TwoDimensionalRangeTree
from .segment_tree import SegmentTree
from .utils import sorted_by_x


def _debug_print(msg: str) -> None:
    debug_print("SCENE", msg)


@dataclass
class Scene:
    structure: str
    points: list[Point] = field(default_factory=list)
    segments: list[Segment] = field(default_factory=list)
    window: Optional[Window] = None
    query_line: Optional[QueryLine] = None
    reported_points: list[Point] = field(default_factory=list)
    reported_segments: set[Segment] = field(default_factory=set)

    def bounds(self) -> Window:
        """Smallest window holding every input item, or a unit window when empty."""
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        for segment in self.segments:
            xs += [segment.start.x, segment.end.x]
            ys += [segment.start.y, segment.end.y]
        if not xs:
            return Window(0, 0, 1, 1)
        return Window(min(xs), min(ys), max(xs), max(ys))

    def describe(self) -> str:
        lines = [f"Structure: {self.structure}"]
        if self.points:
            lines += ["Input points:", formatting.format_points(self.points)]
        if self.segments:
            lines += ["Input segments:", formatting.format_segments(self.segments)]
        if self.window is not None:
            lines += ["Window:", formatting.format_window(self.window),
                      "Points returned:", formatting.format_points(self.reported_points)]
        if self.query_line is not None:
            lines += ["Query line:", formatting.format_query_line(self.query_line),
                      "Segments crossing the query line:",
                      formatting.format_segments(sorted(self.reported_segments,
                                                        key=lambda s: (s.start.x, s.start.y)))]
        return "\n".join(lines)


def build_scene(structure: str, generator_config: GeneratorConfig,
                query_config: QueryConfig) -> Scene:
    """Generate input for `structure`, index it and run the configured query."""
    if structure not in STRUCTURES:
        raise ValueError(f"Unknown structure '{structure}'")
    seed = generator_config.seed
    count = generator_config.count
    limit = generator_config.limit
    scene = Scene(structure)

    if structure == "range1d":
        scene.points = sorted_by_x(generator.random_points(count, limit, seed))
        start_x, _, end_x, _ = query_config.window
        scene.window = Window(start_x, -math.inf, end_x, math.inf)
        tree = SingleDimensionalRangeTree.build(scene.points, Axis.X)
        scene.reported_points = tree.find_points(scene.window)

    elif structure == "range2d":
        scene.points = generator.random_points(count, limit, seed)
        scene.window = Window(*query_config.window)
        tree = TwoDimensionalRangeTree.from_points(scene.points)
        scene.reported_points = tree.find_points(scene.window)

    elif structure == "interval":
        scene.segments = generator.random_horizontal_segments(
            count, limit, generator_config.max_length, seed)
        scene.query_line = QueryLine(*query_config.line)
        tree = IntervalTree.from_segments(scene.segments)
        scene.reported_segments = tree.find_segments_crossing_line(scene.query_line)

    else:
        scene.segments = generator.random_segments(
            count, limit, generator_config.max_length, seed)
        scene.query_line = QueryLine(*query_config.line)
        tree = SegmentTree.build(scene.segments)
        scene.reported_segments = tree.find_segments(scene.query_line)

    _debug_print(f"{structure}: depth {tree.depth()}, "
                 f"{len(scene.reported_points) + len(scene.reported_segments)} reported")
    return scene
