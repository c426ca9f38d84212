"""Range indexing of sequences: ``items[a..b]`` style selection.

``get_at`` is the aggregate-side consumer of ``IntRange.sub_list_borders``:
it resolves negative and reversed endpoints against the sequence length,
slices, and reverses the slice when the range was written backwards.
"""

import logging
from collections.abc import Sequence
from typing import TypeVar

from intrange.core import BoundedRange, DirectionalRange, IntRange
from intrange.errors import IndexOutOfRange

_LOGGER = logging.getLogger(__name__)

Seq = TypeVar("Seq", bound=Sequence)


def to_bounded(rng: IntRange) -> BoundedRange:
    """Return the inclusion-aware equivalent of ``rng``.

    A directional range becomes an inclusive bounded range written in its
    enumeration order, so ``5..1`` maps to ``BoundedRange(start=5, end=1)``.
    """
    if isinstance(rng, BoundedRange):
        return rng
    if isinstance(rng, DirectionalRange):
        if rng.reverse:
            return BoundedRange(start=rng.end, end=rng.start)
        return BoundedRange(start=rng.start, end=rng.end)
    raise TypeError(
        f"Cannot index with {type(rng).__name__!r}: {rng!r}\n"
        f"Hint: Build the range with int_range(a, b, inclusive_right=...)"
    )


def get_at(items: Seq, rng: IntRange) -> Seq:
    """Select the elements of ``items`` addressed by ``rng``.

    Negative endpoints count from the end of ``items``. A reverse range
    returns the selected elements in reverse order. Works for any sequence
    supporting slices (lists, tuples, strings, bytes).

    Examples:
        >>> get_at("abcde", int_range(-3, -1, inclusive_right=True))
        'cde'
        >>> get_at([1, 2, 3, 4], int_range(2, 0, inclusive_right=True))
        [3, 2, 1]
        >>> get_at([1, 2, 3, 4], int_range(0, 2, inclusive_right=False))
        [1, 2]

    Raises:
        IndexOutOfRange: If the resolved interval is not within ``items``
    """
    size = len(items)
    info = to_bounded(rng).sub_list_borders(size)

    if info.start < 0 or info.end > size or info.start > info.end:
        raise IndexOutOfRange(
            f"Range {rng} is out of bounds for a sequence of size {size}.\n"
            f"Resolved to [{info.start}, {info.end})\n"
            f"Hint: Negative endpoints count from the end; -1 is the last item"
        )

    selected = items[info.as_slice()]
    if info.reverse:
        _LOGGER.debug("reversing selection %s for range %s", info, rng)
        return selected[::-1]
    return selected
