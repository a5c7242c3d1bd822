"""Shared Pydantic models and errors for segrev."""
from pydantic import BaseModel


class Segment(BaseModel):
    """Inclusive index bounds [start, end] of a sequence segment."""
    start: int
    end: int

    @property
    def length(self) -> int:
        return max(self.end - self.start + 1, 0)

    @property
    def swap_count(self) -> int:
        """Number of swaps a two-pointer reversal performs on this segment."""
        return self.length // 2


class InvalidRangeError(IndexError):
    """Raised when segment bounds don't satisfy 0 <= start <= end < length."""

    def __init__(self, start: int, end: int, length: int):
        self.start = start
        self.end = end
        self.length = length
        super().__init__(
            f"Invalid segment [{start}, {end}] for sequence of length {length}"
        )


class NodeUnavailableError(Exception):
    """Raised when a node type is not registered or has no executor."""

    def __init__(self, node_id: str, node_type: str, reason: str):
        self.node_id = node_id
        self.node_type = node_type
        self.reason = reason
        super().__init__(
            f"Node '{node_id}' uses type '{node_type}' which is {reason}"
        )
