from .borders import RangeInfo, sub_list_borders
from .core import BoundedRange, DirectionalRange, EmptyRange, IntRange, int_range
from .errors import (
    ConstructionError,
    IllegalState,
    IndexOutOfRange,
    InfiniteStep,
    RangeError,
    SizeExceeded,
    UnsupportedOperation,
)
from .indexing import get_at, to_bounded
from .iteration import RangeIterator
from .util import INT32_MAX, INT32_MIN

__all__ = [
    "IntRange",
    "DirectionalRange",
    "BoundedRange",
    "EmptyRange",
    "int_range",
    "RangeInfo",
    "sub_list_borders",
    "RangeIterator",
    "get_at",
    "to_bounded",
    "RangeError",
    "ConstructionError",
    "SizeExceeded",
    "IndexOutOfRange",
    "IllegalState",
    "InfiniteStep",
    "UnsupportedOperation",
    "INT32_MIN",
    "INT32_MAX",
]
