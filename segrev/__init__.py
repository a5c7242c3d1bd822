"""segrev: in-place segment reversal with a PipeStudio-style node wrapper."""
from segrev.models import InvalidRangeError, NodeUnavailableError, Segment
from segrev.reverse import check_range, reverse_in_place

__all__ = [
    "InvalidRangeError",
    "NodeUnavailableError",
    "Segment",
    "check_range",
    "reverse_in_place",
]
