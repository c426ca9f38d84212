"""Traversal of ranges: plain one-shot iteration and stepped generation.

Both work from the effective bounds of a range, so bounded and directional
ranges share the same traversal code.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from typing_extensions import override

from intrange.errors import InfiniteStep, UnsupportedOperation
from intrange.util import INT32_MAX, INT32_MIN

if TYPE_CHECKING:
    from intrange.core import IntRange

_LOGGER = logging.getLogger(__name__)


class RangeIterator(Iterator[int]):
    """Cursor over every value of a range, in the range's direction.

    Each call to ``iter(range)`` builds a fresh cursor; a cursor cannot be
    restarted and must not be shared between threads.
    """

    def __init__(self, source: "IntRange"):
        self._index: int = 0
        self._size: int = source.size()
        self._reverse: bool = source.is_reverse
        self._value: int = (
            source.effective_to if self._reverse else source.effective_from
        )

    @override
    def __next__(self) -> int:
        if self._index >= self._size:
            raise StopIteration
        if self._index > 0:
            self._value += -1 if self._reverse else 1
        self._index += 1
        return self._value

    def __length_hint__(self) -> int:
        return self._size - self._index

    def remove(self) -> None:
        raise UnsupportedOperation(
            "Cannot remove values while iterating a range.\n"
            "Ranges are immutable.\n"
            "Hint: Copy the values first: values = list(rng); values.remove(x)"
        )


def step_values(source: "IntRange", step: int) -> Iterable[int]:
    """Return the values of ``source`` visited with a stride of ``step``.

    The stride is negated for reverse ranges. A positive stride walks up from
    the effective lower bound, a negative one walks down from the effective
    upper bound. Generation stops instead of running past the 32-bit limits.

    Raises:
        InfiniteStep: If ``step`` is zero and the range holds more than one value
    """
    low = source.effective_from
    high = source.effective_to

    if step == 0:
        if low != high:
            raise InfiniteStep(
                f"Infinite loop detected due to step size of 0 over {source}.\n"
                f"Hint: A zero step is only accepted for single-value ranges"
            )
        return ()

    if source.is_reverse:
        step = -step

    def generate() -> Iterable[int]:
        if step > 0:
            value = low
            while value <= high:
                yield value
                if value + step > INT32_MAX:
                    _LOGGER.debug(
                        "step %d over %s stopped at %d before passing INT32_MAX",
                        step,
                        source,
                        value,
                    )
                    return
                value += step
        else:
            value = high
            while value >= low:
                yield value
                if value + step < INT32_MIN:
                    _LOGGER.debug(
                        "step %d over %s stopped at %d before passing INT32_MIN",
                        step,
                        source,
                        value,
                    )
                    return
                value += step

    return generate()
