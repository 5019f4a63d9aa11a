"""
Helpers shared by the tree builders: sort keys, medians, order-preserving
filters and the precondition checks run at the root of every build.
"""

from typing import Callable, Hashable, Iterable, Sequence, TypeVar

from .errors import InvalidInputError, PrecedingOrderViolation
from .geometric import Axis, Point, Segment

T = TypeVar('T', bound=Hashable)


# --- Sort Keys ---

def point_x_key(point: Point) -> tuple[int, int]:
    return (point.x, point.y)


def point_y_key(point: Point) -> tuple[int, int]:
    return (point.y, point.x)


def segment_start_key(segment: Segment) -> tuple[int, int]:
    interval = segment.x_interval
    return (interval.start, interval.end)


def segment_end_key(segment: Segment) -> tuple[int, int]:
    interval = segment.x_interval
    return (interval.end, interval.start)


def sorted_by_x(points: Iterable[Point]) -> list[Point]:
    return sorted(points, key=point_x_key)


def sorted_by_y(points: Iterable[Point]) -> list[Point]:
    return sorted(points, key=point_y_key)


def sorted_by_start(segments: Iterable[Segment]) -> list[Segment]:
    return sorted(segments, key=segment_start_key)


def sorted_by_end(segments: Iterable[Segment]) -> list[Segment]:
    return sorted(segments, key=segment_end_key)


# --- Medians ---

def median(points: Sequence[Point], axis: Axis) -> int:
    """
    Median coordinate of points sorted by `axis`.

    For an even count this is the floored mean of the two middle values, which
    always satisfies lower <= median < upper when the two differ, so a split at
    the median never leaves one side empty.
    """
    size = len(points)
    if size % 2 == 0:
        lower = points[size // 2 - 1].coordinate(axis)
        upper = points[size // 2].coordinate(axis)
        return (lower + upper) // 2
    return points[size // 2].coordinate(axis)


def truncated_mean(a: int, b: int) -> int:
    """Mean of two integers rounded toward zero."""
    total = a + b
    if total < 0:
        return -((-total) // 2)
    return total // 2


# --- Filters ---

def filter_in_order(items: Iterable[T], selected: set[T]) -> list[T]:
    """Keep the members of `selected`, in the order they appear in `items`."""
    return [item for item in items if item in selected]


# --- Precondition Checks ---

def check_strictly_increasing(values: Sequence[int], what: str) -> None:
    for i in range(1, len(values)):
        if values[i] == values[i - 1]:
            raise InvalidInputError(f"{what}: duplicate coordinate {values[i]} at index {i}")
        if values[i] < values[i - 1]:
            raise PrecedingOrderViolation(what, i)


def check_non_decreasing(items: Sequence[T], key: Callable[[T], tuple], what: str) -> None:
    for i in range(1, len(items)):
        if key(items[i]) < key(items[i - 1]):
            raise PrecedingOrderViolation(what, i)


def check_unique(values: Iterable[int], what: str) -> None:
    seen = set()
    for value in values:
        if value in seen:
            raise InvalidInputError(f"{what}: duplicate coordinate {value}")
        seen.add(value)


def check_same_members(first: Sequence[T], second: Sequence[T], what: str) -> None:
    if len(first) != len(second) or set(first) != set(second):
        raise InvalidInputError(f"{what}: the two orderings do not hold the same elements")
