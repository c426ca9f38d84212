from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from numbers import Integral
from typing import Any, overload

from typing_extensions import override

from intrange.borders import RangeInfo, sub_list_borders
from intrange.errors import (
    ConstructionError,
    IllegalState,
    IndexOutOfRange,
    SizeExceeded,
)
from intrange.iteration import RangeIterator, step_values
from intrange.util import INT32_MAX, div_i32, fits_i32, wrap_i32


def _check_endpoint(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Range {name} must be an int.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: Convert explicitly, e.g. int_range(int(a), int(b))"
        )
    if not fits_i32(value):
        raise ConstructionError(
            f"Range {name} must fit a signed 32-bit integer, got {value}.\n"
            f"Hint: Endpoints are limited to [-2147483648, 2147483647]"
        )


class IntRange(ABC, Sequence[int]):
    """Immutable ordered sequence of consecutive integers.

    Concrete ranges come in two kinds: ``DirectionalRange`` (always inclusive,
    direction carried by a flag) and ``BoundedRange`` (per-side inclusion
    flags, direction implied by endpoint order). All derived operations work
    on the effective bounds, never on the raw endpoints.
    """

    @property
    @abstractmethod
    def effective_from(self) -> int:
        """Smallest value in the range after applying inclusion flags."""
        pass

    @property
    @abstractmethod
    def effective_to(self) -> int:
        """Largest value in the range after applying inclusion flags."""
        pass

    @property
    @abstractmethod
    def is_reverse(self) -> bool:
        """True if values are enumerated from ``effective_to`` down."""
        pass

    @abstractmethod
    def sub_list_borders(self, size: int) -> RangeInfo:
        """Resolve this range against an aggregate of ``size`` elements."""
        pass

    @abstractmethod
    def _same_flags(self, other: "IntRange") -> bool:
        pass

    def _check_size(self) -> None:
        size = self.effective_to - self.effective_from + 1
        if size > INT32_MAX:
            raise SizeExceeded(
                f"A range must have no more than {INT32_MAX} elements "
                f"but attempted {size} elements.\n"
                f"Hint: Split the span into several smaller ranges"
            )

    def size(self) -> int:
        # Fully exclusive borders one apart would give -1
        return max(self.effective_to - self.effective_from + 1, 0)

    def __len__(self) -> int:
        return self.size()

    def get(self, index: int) -> int:
        """Return the value at ``index`` in enumeration order.

        Raises:
            IndexOutOfRange: If ``index`` is negative or not below ``size()``
        """
        if index < 0:
            raise IndexOutOfRange(f"Index: {index} should not be negative")
        if index >= self.size():
            raise IndexOutOfRange(f"Index: {index} too big for range: {self}")
        if self.is_reverse:
            return self.effective_to - index
        return self.effective_from + index

    @overload
    def __getitem__(self, item: int) -> int: ...

    @overload
    def __getitem__(self, item: slice) -> "Sequence[int]": ...

    def __getitem__(self, item: int | slice) -> "int | Sequence[int]":
        """Index or slice the range like any other sequence.

        Negative indices count from the end. A slice with a stride of one
        returns a sub-range; any other stride returns a list.
        """
        if isinstance(item, slice):
            start, stop, stride = item.indices(self.size())
            if stride == 1:
                return self.sub_range(start, max(start, stop))
            return [self.get(i) for i in range(start, stop, stride)]
        if isinstance(item, bool) or not isinstance(item, int):
            raise TypeError(
                f"Range indices must be integers or slices, "
                f"not {type(item).__name__}"
            )
        if item < 0:
            item += self.size()
        return self.get(item)

    def sub_range(self, from_index: int, to_index: int) -> "Sequence[int]":
        """Return the values at indices ``[from_index, to_index)`` as a range.

        Equal indices give an empty range anchored at ``effective_from``.

        Raises:
            IndexOutOfRange: If either index falls outside ``[0, size()]``
            ValueError: If ``from_index > to_index``
        """
        if from_index < 0:
            raise IndexOutOfRange(f"fromIndex = {from_index}")
        if to_index > self.size():
            raise IndexOutOfRange(f"toIndex = {to_index}")
        if from_index > to_index:
            raise ValueError(f"fromIndex({from_index}) > toIndex({to_index})")

        if from_index == to_index:
            return EmptyRange(anchor=self.effective_from)

        if self.is_reverse:
            return DirectionalRange(
                start=self.effective_to - (to_index - 1),
                end=self.effective_to - from_index,
                reverse=True,
            )
        return DirectionalRange(
            start=self.effective_from + from_index,
            end=self.effective_from + to_index - 1,
            reverse=False,
        )

    def contains(self, value: object) -> bool:
        """True if ``value`` is an integer between the effective bounds.

        Integers of any magnitude are compared numerically; anything that is
        not an integer is never contained.
        """
        if isinstance(value, bool) or not isinstance(value, Integral):
            return False
        return self.effective_from <= value <= self.effective_to

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def contains_within_bounds(self, value: object) -> bool:
        return self.contains(value)

    def contains_all(self, other: Iterable[Any]) -> bool:
        """True if every value of ``other`` is in this range.

        Another range is tested as a subset of effective bounds without
        enumerating it.
        """
        if isinstance(other, IntRange):
            return (
                self.effective_from <= other.effective_from
                and other.effective_to <= self.effective_to
            )
        return all(self.contains(value) for value in other)

    @override
    def index(self, value: Any, start: int = 0, stop: int | None = None) -> int:
        if self.contains(value):
            size = self.size()
            position = (
                self.effective_to - value
                if self.is_reverse
                else value - self.effective_from
            )
            start = max(start + size, 0) if start < 0 else start
            if stop is None:
                stop = size
            elif stop < 0:
                stop += size
            if start <= position < stop:
                return int(position)
        raise ValueError(f"{value!r} is not in range {self}")

    @override
    def count(self, value: Any) -> int:
        return 1 if self.contains(value) else 0

    @override
    def __iter__(self) -> Iterator[int]:
        return RangeIterator(self)

    @override
    def __reversed__(self) -> Iterator[int]:
        if self.is_reverse:
            return iter(range(self.effective_from, self.effective_to + 1))
        return iter(range(self.effective_to, self.effective_from - 1, -1))

    @overload
    def step(self, step: int) -> list[int]: ...

    @overload
    def step(self, step: int, callback: Callable[[int], Any]) -> None: ...

    def step(
        self, step: int, callback: Callable[[int], Any] | None = None
    ) -> list[int] | None:
        """Visit every ``step``-th value of the range.

        With a callback, calls it once per value in generation order; an
        exception raised by the callback ends the traversal and propagates.
        Without one, returns the generated values as a list.

        The stride is negated for reverse ranges: ``int_range(1, 10).step(2)``
        gives ``[1, 3, 5, 7, 9]`` and ``int_range(1, 10).step(-2)`` gives
        ``[10, 8, 6, 4, 2]``.

        Raises:
            InfiniteStep: If ``step`` is zero and the range holds more than
                one value
        """
        values = step_values(self, step)
        if callback is None:
            return list(values)
        for value in values:
            callback(value)
        return None

    def hash_code(self) -> int:
        """Signed 32-bit pairing hash of the effective bounds."""
        low = self.effective_from
        high = self.effective_to
        total = wrap_i32(low + high)
        return wrap_i32(div_i32(wrap_i32((total + 1) * total), 2) + high)

    @override
    def __hash__(self) -> int:
        return self.hash_code()

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, IntRange):
            return (
                self.effective_from == other.effective_from
                and self.effective_to == other.effective_to
                and self._same_flags(other)
            )
        if isinstance(other, list):
            return len(self) == len(other) and all(
                mine == theirs for mine, theirs in zip(self, other)
            )
        return NotImplemented

    def inspect(self) -> str:
        return str(self)

    @override
    def __repr__(self) -> str:
        return str(self)


@dataclass(frozen=True, kw_only=True, eq=False, repr=False)
class DirectionalRange(IntRange):
    """Inclusive range with ``start <= end`` and an explicit direction.

    ``reverse`` selects enumeration from ``end`` down to ``start``.
    """

    start: int
    end: int
    reverse: bool = False

    def __post_init__(self) -> None:
        _check_endpoint(self.start, "start")
        _check_endpoint(self.end, "end")
        if self.start > self.end:
            raise ConstructionError(
                f"'from' must be less than or equal to 'to', "
                f"got start={self.start}, end={self.end}.\n"
                f"Hint: Use int_range({self.start}, {self.end}) to build a "
                f"reverse range from unordered endpoints"
            )
        self._check_size()

    @property
    @override
    def effective_from(self) -> int:
        return self.start

    @property
    @override
    def effective_to(self) -> int:
        return self.end

    @property
    @override
    def is_reverse(self) -> bool:
        return self.reverse

    @property
    def inclusive_left(self) -> bool | None:
        """Directional ranges carry no inclusion flags."""
        return None

    @property
    def inclusive_right(self) -> bool | None:
        return None

    @property
    def inclusive(self) -> bool | None:
        return None

    @override
    def sub_list_borders(self, size: int) -> RangeInfo:
        raise IllegalState(
            f"Should not call sub_list_borders on a directional range: {self}.\n"
            f"Hint: Build an inclusion-aware range with "
            f"int_range(a, b, inclusive_right=True)"
        )

    @override
    def _same_flags(self, other: IntRange) -> bool:
        # Bounded ranges have no reverse flag and count as forward here
        other_reverse = (
            other.reverse if isinstance(other, DirectionalRange) else False
        )
        return self.reverse == other_reverse

    @override
    def __str__(self) -> str:
        if self.reverse:
            return f"{self.end}..{self.start}"
        return f"{self.start}..{self.end}"


@dataclass(frozen=True, kw_only=True, eq=False, repr=False)
class BoundedRange(IntRange):
    """Range whose endpoints are individually included or excluded.

    ``start`` and ``end`` are kept exactly as written; ``start > end`` denotes
    a reverse range. The inclusion flags always refer to the written sides,
    so in ``5<..1`` it is ``5`` that is excluded.
    """

    start: int
    end: int
    inclusive_left: bool = True
    inclusive_right: bool = True

    def __post_init__(self) -> None:
        _check_endpoint(self.start, "start")
        _check_endpoint(self.end, "end")
        self._check_size()

    @property
    @override
    def effective_from(self) -> int:
        if self.start <= self.end:
            return self.start if self.inclusive_left else self.start + 1
        return self.end if self.inclusive_right else self.end + 1

    @property
    @override
    def effective_to(self) -> int:
        if self.start <= self.end:
            return self.end if self.inclusive_right else self.end - 1
        return self.start if self.inclusive_left else self.start - 1

    @property
    @override
    def is_reverse(self) -> bool:
        return self.start > self.end

    @property
    def inclusive(self) -> bool:
        """Alias of ``inclusive_right``."""
        return self.inclusive_right

    @override
    def sub_list_borders(self, size: int) -> RangeInfo:
        return sub_list_borders(
            self.start, self.end, self.inclusive_left, self.inclusive_right, size
        )

    @override
    def _same_flags(self, other: IntRange) -> bool:
        return (
            isinstance(other, BoundedRange)
            and self.inclusive_left == other.inclusive_left
            and self.inclusive_right == other.inclusive_right
            and self.is_reverse == other.is_reverse
        )

    @override
    def __str__(self) -> str:
        left = "" if self.inclusive_left else "<"
        right = "" if self.inclusive_right else "<"
        return f"{self.start}{left}..{right}{self.end}"


@dataclass(frozen=True, kw_only=True, eq=False)
class EmptyRange(Sequence[int]):
    """Range holding no values, anchored at the position it was cut from."""

    anchor: int

    def __len__(self) -> int:
        return 0

    def size(self) -> int:
        return 0

    @overload
    def __getitem__(self, item: int) -> int: ...

    @overload
    def __getitem__(self, item: slice) -> "EmptyRange": ...

    def __getitem__(self, item: int | slice) -> "int | EmptyRange":
        if isinstance(item, slice):
            return self
        raise IndexOutOfRange(f"Index: {item} out of bounds for empty range")

    def get(self, index: int) -> int:
        return self[index]

    @override
    def __iter__(self) -> Iterator[int]:
        return iter(())

    @override
    def __contains__(self, value: object) -> bool:
        return False

    def contains(self, value: object) -> bool:
        return False

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, EmptyRange):
            return True
        if isinstance(other, list):
            return not other
        return NotImplemented

    @override
    def __hash__(self) -> int:
        return hash(())

    @override
    def __str__(self) -> str:
        return "[]"

    @override
    def __repr__(self) -> str:
        return f"EmptyRange(anchor={self.anchor})"

    def inspect(self) -> str:
        return str(self)


def int_range(
    start: int,
    end: int,
    *,
    inclusive_left: bool | None = None,
    inclusive_right: bool | None = None,
) -> IntRange:
    """Build a range from two endpoints.

    Without inclusion flags the result is a ``DirectionalRange``: endpoints
    are sorted and ``start > end`` yields a reverse range. With either flag
    the result is a ``BoundedRange`` keeping the endpoints as written; a flag
    left out defaults to inclusive.

    Examples:
        >>> int_range(1, 5)
        1..5
        >>> int_range(5, 1)
        5..1
        >>> int_range(1, 5, inclusive_right=False)
        1..<5
        >>> int_range(1, 5, inclusive_left=False, inclusive_right=False)
        1<..<5

    Raises:
        SizeExceeded: If the range would hold more than ``INT32_MAX`` values
    """
    if inclusive_left is None and inclusive_right is None:
        if start > end:
            return DirectionalRange(start=end, end=start, reverse=True)
        return DirectionalRange(start=start, end=end)
    return BoundedRange(
        start=start,
        end=end,
        inclusive_left=True if inclusive_left is None else inclusive_left,
        inclusive_right=True if inclusive_right is None else inclusive_right,
    )
