"""
Exceptions raised when a tree is handed input it cannot index.

All of them are detected once, before any recursion starts.
"""


class RangeTreeError(ValueError):
    """Base class for precondition violations."""


class InvalidInputError(RangeTreeError):
    """Input breaks a uniqueness or shape requirement of the structure."""


class PrecedingOrderViolation(RangeTreeError):
    """Input was not sorted by the key the structure is built on."""

    def __init__(self, what: str, index: int):
        super().__init__(f"{what} is not sorted: element {index} precedes element {index - 1}")
        self.what = what
        self.index = index
