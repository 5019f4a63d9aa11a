"""
Seeded generator of test inputs.

Every generator rejects candidates that would reuse an x or a y coordinate
already handed out, so the output always satisfies the uniqueness the
range trees rely on. The same seed always yields the same data.
"""

import random
from typing import Optional

from .geometric import Point, Segment


def _attempt_budget(count: int) -> int:
    return 1000 * max(count, 1)


def random_points(count: int, limit: int, seed: Optional[int] = 0) -> list[Point]:
    """`count` points in [0, limit)^2, pairwise distinct in x and in y."""
    if count > limit:
        raise ValueError(f"cannot draw {count} unique coordinates below {limit}")
    rng = random.Random(seed)
    seen_x: set[int] = set()
    seen_y: set[int] = set()
    points: list[Point] = []
    attempts = 0
    while len(points) < count:
        attempts += 1
        if attempts > _attempt_budget(count):
            raise ValueError(f"gave up after {attempts - 1} attempts; widen limit={limit}")
        x, y = rng.randrange(limit), rng.randrange(limit)
        if x in seen_x or y in seen_y:
            continue
        seen_x.add(x)
        seen_y.add(y)
        points.append(Point(x, y))
    return points


def _random_segments(count: int, limit: int, max_length: int, seed: Optional[int],
                     horizontal: bool) -> list[Segment]:
    if 2 * count > limit:
        raise ValueError(f"cannot draw {2 * count} unique coordinates below {limit}")
    rng = random.Random(seed)
    seen_x: set[int] = set()
    seen_y: set[int] = set()
    segments: list[Segment] = []
    attempts = 0
    while len(segments) < count:
        attempts += 1
        if attempts > _attempt_budget(count):
            raise ValueError(f"gave up after {attempts - 1} attempts; "
                             f"widen limit={limit} or max_length={max_length}")

        start_x, start_y = rng.randrange(limit), rng.randrange(limit)
        end_x = start_x + rng.randrange(max_length)
        if horizontal:
            end_y = start_y
        else:
            end_y = start_y + rng.randrange(max_length)
            if end_y == start_y:
                end_y += 1

        xs = {start_x, end_x}
        ys = {start_y, end_y}
        if xs & seen_x or ys & seen_y:
            continue
        seen_x |= xs
        seen_y |= ys
        segments.append(Segment(Point(start_x, start_y), Point(end_x, end_y)))
    return segments


def random_horizontal_segments(count: int, limit: int, max_length: int = 20,
                               seed: Optional[int] = 0) -> list[Segment]:
    """Horizontal segments running left to right; no x or y is reused."""
    return _random_segments(count, limit, max_length, seed, horizontal=True)


def random_segments(count: int, limit: int, max_length: int = 20,
                    seed: Optional[int] = 0) -> list[Segment]:
    """Segments rising to the right; no x or y is reused."""
    return _random_segments(count, limit, max_length, seed, horizontal=False)
