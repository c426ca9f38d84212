from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RangeInfo:
    """Resolved half-open interval ``[start, end)`` over an aggregate.

    Attributes:
        start: First index to extract (inclusive)
        end: Index to stop extracting at (exclusive)
        reverse: True if the extracted values must be reversed to match
            the direction the range was written in
    """

    start: int
    end: int
    reverse: bool

    def as_slice(self) -> slice:
        return slice(self.start, self.end)

    def __str__(self) -> str:
        arrow = "←" if self.reverse else "→"
        return f"RangeInfo([{self.start}, {self.end}), {arrow})"


def sub_list_borders(
    start: int,
    end: int,
    inclusive_left: bool,
    inclusive_right: bool,
    size: int,
) -> RangeInfo:
    """Resolve raw range endpoints against an aggregate of ``size`` elements.

    Negative endpoints count from the end of the aggregate (``-1`` is the last
    element). When the resolved ``start`` lies after the resolved ``end`` the
    request is a reverse one: the interval is still returned in forward order
    and ``reverse`` is set so the caller flips the extracted values.

    The inclusion flags keep referring to the syntactic sides the caller
    wrote, so for a reverse request ``inclusive_right`` governs the lower index.

    Example:
        >>> sub_list_borders(-3, -1, True, True, 5)
        RangeInfo(start=2, end=5, reverse=False)
    """
    if start < 0:
        start += size
    if end < 0:
        end += size

    if start > end:
        return RangeInfo(
            start=end if inclusive_right else end + 1,
            end=start + 1 if inclusive_left else start,
            reverse=True,
        )
    return RangeInfo(
        start=start if inclusive_left else start + 1,
        end=end + 1 if inclusive_right else end,
        reverse=False,
    )
