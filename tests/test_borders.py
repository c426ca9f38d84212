import pytest

from intrange import IllegalState, RangeInfo, int_range, sub_list_borders


def test_negative_endpoints_count_from_end() -> None:
    info = sub_list_borders(-3, -1, True, True, 5)

    assert info == RangeInfo(start=2, end=5, reverse=False)
    assert list(range(5))[info.as_slice()] == [2, 3, 4]


@pytest.mark.parametrize(
    ("inclusive_left", "inclusive_right", "expected"),
    [
        (True, True, RangeInfo(start=1, end=4, reverse=False)),
        (False, True, RangeInfo(start=2, end=4, reverse=False)),
        (True, False, RangeInfo(start=1, end=3, reverse=False)),
        (False, False, RangeInfo(start=2, end=3, reverse=False)),
    ],
)
def test_forward_request(inclusive_left, inclusive_right, expected) -> None:
    assert sub_list_borders(1, 3, inclusive_left, inclusive_right, 10) == expected


@pytest.mark.parametrize(
    ("inclusive_left", "inclusive_right", "expected"),
    [
        (True, True, RangeInfo(start=1, end=4, reverse=True)),
        (False, True, RangeInfo(start=1, end=3, reverse=True)),
        (True, False, RangeInfo(start=2, end=4, reverse=True)),
        (False, False, RangeInfo(start=2, end=3, reverse=True)),
    ],
)
def test_reverse_request(inclusive_left, inclusive_right, expected) -> None:
    assert sub_list_borders(3, 1, inclusive_left, inclusive_right, 10) == expected


def test_reverse_request_across_negative_indices() -> None:
    # -1..0 over five elements selects everything, backwards
    info = sub_list_borders(-1, 0, True, True, 5)

    assert info == RangeInfo(start=0, end=5, reverse=True)


def test_exclusive_end_from_the_back() -> None:
    # 0..<-1 drops the last element
    info = sub_list_borders(0, -1, True, False, 5)

    assert info == RangeInfo(start=0, end=4, reverse=False)


def test_bounded_range_delegates_to_resolver() -> None:
    rng = int_range(-3, -1, inclusive_right=True)

    assert rng.sub_list_borders(5) == sub_list_borders(-3, -1, True, True, 5)
    assert int_range(4, 1, inclusive_left=False).sub_list_borders(6) == RangeInfo(
        start=1, end=4, reverse=True
    )


def test_directional_range_cannot_resolve_borders() -> None:
    with pytest.raises(IllegalState):
        int_range(1, 3).sub_list_borders(5)

    with pytest.raises(RuntimeError):
        int_range(3, 1).sub_list_borders(5)


def test_range_info_is_a_value() -> None:
    info = RangeInfo(start=2, end=5, reverse=True)

    assert info.as_slice() == slice(2, 5)
    assert info == RangeInfo(start=2, end=5, reverse=True)
    assert str(info) == "RangeInfo([2, 5), ←)"
