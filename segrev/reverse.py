"""In-place segment reversal."""
from typing import MutableSequence

from segrev.models import InvalidRangeError


def check_range(length: int, start: int, end: int) -> None:
    """Raise InvalidRangeError unless 0 <= start <= end < length."""
    if start < 0 or end >= length or start > end:
        raise InvalidRangeError(start, end, length)


def reverse_in_place(seq: MutableSequence, start: int, end: int, validate: bool = True) -> None:
    """Reverse seq[start..end] (inclusive) in place with two pointers.

    With validate=True the bounds are checked before anything is touched.
    With validate=False, start > end is a no-op and out-of-range indices
    behave however the sequence's own indexing does.
    """
    if validate:
        check_range(len(seq), start, end)

    i, j = start, end
    while i < j:
        seq[i], seq[j] = seq[j], seq[i]
        i += 1
        j -= 1
