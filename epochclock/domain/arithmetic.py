"""
Checked 64-bit integer arithmetic.

Python integers never overflow, so results are range-checked against the
signed 64-bit bounds explicitly. Any out-of-range operand or result raises
ArithmeticOverflowError instead of producing a value.
"""

from __future__ import annotations

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ArithmeticOverflowError(ArithmeticError):
    """Operation left the signed 64-bit range."""


def is_strict_int(value: object) -> bool:
    """True for int values that are not bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def require_int64(value: int, name: str = "value") -> int:
    if not fits_int64(value):
        raise ArithmeticOverflowError(f"{name} {value} is outside the signed 64-bit range")
    return value


def checked_add(a: int, b: int) -> int:
    require_int64(a, "left operand")
    require_int64(b, "right operand")
    return require_int64(a + b, "sum")


def checked_sub(a: int, b: int) -> int:
    require_int64(a, "minuend")
    require_int64(b, "subtrahend")
    return require_int64(a - b, "difference")


def checked_mul(a: int, b: int) -> int:
    require_int64(a, "left operand")
    require_int64(b, "right operand")
    return require_int64(a * b, "product")


def checked_floor_div(a: int, b: int) -> int:
    """Floor division; a zero divisor or INT64_MIN // -1 raises."""
    require_int64(a, "dividend")
    require_int64(b, "divisor")
    if b == 0:
        raise ArithmeticOverflowError("division by zero")
    return require_int64(a // b, "quotient")
