"""
Domain models and value objects.

Contains the ClosedRange value type and the int32 bounds it is built from.
"""

from rangecheck.core.domain.closed_range import (
    INVALID_RANGE_MESSAGE,
    ClosedRange,
    InvalidRange,
)
from rangecheck.core.domain.int32 import (
    INT32_MAX,
    INT32_MIN,
    NotANumber,
    is_int32,
    parse_int32,
)

__all__ = [
    # Int32 module
    "INT32_MIN",
    "INT32_MAX",
    "NotANumber",
    "is_int32",
    "parse_int32",
    # ClosedRange model
    "ClosedRange",
    "InvalidRange",
    "INVALID_RANGE_MESSAGE",
]
