import logging

import pytest

from intrange import (
    INT32_MAX,
    INT32_MIN,
    InfiniteStep,
    RangeIterator,
    UnsupportedOperation,
    int_range,
)


def test_iterator_is_fresh_per_traversal() -> None:
    rng = int_range(1, 3)

    first = iter(rng)
    second = iter(rng)

    assert isinstance(first, RangeIterator)
    assert next(first) == 1
    assert next(first) == 2
    assert next(second) == 1
    assert list(first) == [3]
    assert list(first) == []


def test_iterator_descends_for_reverse_ranges() -> None:
    cursor = iter(int_range(3, 1))

    assert [next(cursor), next(cursor), next(cursor)] == [3, 2, 1]
    with pytest.raises(StopIteration):
        next(cursor)


def test_iterator_over_bounded_range_uses_effective_bounds() -> None:
    assert list(int_range(0, 4, inclusive_left=False, inclusive_right=False)) == [
        1,
        2,
        3,
    ]


def test_iterator_remove_is_unsupported() -> None:
    cursor = iter(int_range(1, 3))
    next(cursor)

    with pytest.raises(UnsupportedOperation):
        cursor.remove()
    with pytest.raises(NotImplementedError):
        cursor.remove()

    assert list(cursor) == [2, 3]


def test_step_calls_callback_in_order() -> None:
    seen: list[int] = []

    result = int_range(1, 10).step(2, seen.append)

    assert result is None
    assert seen == [1, 3, 5, 7, 9]


def test_negative_step_walks_down_from_the_top() -> None:
    seen: list[int] = []

    int_range(1, 10).step(-2, seen.append)

    assert seen == [10, 8, 6, 4, 2]


def test_step_is_negated_for_reverse_ranges() -> None:
    # The stride is negated before walking, so -2 over 10..1 climbs from 1
    # rather than descending from 10
    assert int_range(10, 1).step(2) == [10, 8, 6, 4, 2]
    assert int_range(10, 1).step(-2) == [1, 3, 5, 7, 9]
    assert int_range(10, 1, inclusive_right=True).step(3) == [10, 7, 4, 1]


def test_step_without_callback_collects_values() -> None:
    assert int_range(1, 10).step(3) == [1, 4, 7, 10]
    assert int_range(1, 10, inclusive_right=False).step(3) == [1, 4, 7]
    assert int_range(1, 2, inclusive_left=False, inclusive_right=False).step(1) == []


def test_zero_step_over_single_value_does_nothing() -> None:
    seen: list[int] = []

    int_range(5, 5).step(0, seen.append)

    assert seen == []
    assert int_range(5, 5).step(0) == []


def test_zero_step_over_many_values_is_rejected() -> None:
    seen: list[int] = []

    with pytest.raises(InfiniteStep, match="step size of 0"):
        int_range(1, 5).step(0, seen.append)
    with pytest.raises(ValueError):
        int_range(1, 5).step(0)

    assert seen == []


def test_callback_error_aborts_traversal() -> None:
    seen: list[int] = []

    def callback(value: int) -> None:
        if value == 5:
            raise RuntimeError("stop")
        seen.append(value)

    with pytest.raises(RuntimeError, match="stop"):
        int_range(1, 10).step(1, callback)

    assert seen == [1, 2, 3, 4]


def test_step_stops_before_passing_int32_max(caplog) -> None:
    rng = int_range(INT32_MAX - 4, INT32_MAX)

    assert rng.step(1) == list(range(INT32_MAX - 4, INT32_MAX + 1))

    with caplog.at_level(logging.DEBUG, logger="intrange.iteration"):
        assert rng.step(3) == [INT32_MAX - 4, INT32_MAX - 1]

    assert "INT32_MAX" in caplog.text


def test_step_stops_before_passing_int32_min() -> None:
    rng = int_range(INT32_MIN, INT32_MIN + 4)

    assert rng.step(-3) == [INT32_MIN + 4, INT32_MIN + 1]
    assert rng.step(-1) == list(range(INT32_MIN + 4, INT32_MIN - 1, -1))
