"""
Text rendering of geometric values for diagnostic output.
"""

import math
from typing import Iterable

from .geometric import Interval, Number, Point, QueryLine, Segment, Window


def _format_number(value: Number) -> str:
    if value == math.inf:
        return "+inf"
    if value == -math.inf:
        return "-inf"
    return str(value)


def format_point(point: Point) -> str:
    return f"x:{point.x}, y:{point.y}"


def format_interval(interval: Interval) -> str:
    opening = "[" if interval.closed_start else "("
    closing = "]" if interval.closed_end else ")"
    return f"{opening} {_format_number(interval.start)} - {_format_number(interval.end)} {closing}"


def format_segment(segment: Segment) -> str:
    return f"({format_point(segment.start)}) -- ({format_point(segment.end)})"


def format_window(window: Window) -> str:
    start = f"({_format_number(window.start_x)},{_format_number(window.start_y)})"
    end = f"({_format_number(window.end_x)},{_format_number(window.end_y)})"
    return f"[ {start} -- {end} ]"


def format_query_line(query_line: QueryLine) -> str:
    return (f"x = {_format_number(query_line.x)}, "
            f"y in [{_format_number(query_line.start_y)}, {_format_number(query_line.end_y)}]")


def format_points(points: Iterable[Point]) -> str:
    points = list(points)
    return "\n".join([str(len(points))] + [format_point(p) for p in points])


def format_segments(segments: Iterable[Segment]) -> str:
    segments = list(segments)
    return "\n".join([str(len(segments))] + [format_segment(s) for s in segments])
