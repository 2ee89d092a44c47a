"""Checked 64-bit arithmetic operations.

Responsibilities:
  - Implement add, sub, mul, div, pow and fact over validated operands.
  - Detect range violations on every step and report OVERFLOW instead of wrapping.

Inputs/Outputs:
  - Inputs: int64 operands whose domain preconditions already hold.
  - Outputs: Success(SignedResult) for binary operations,
    Success(UnsignedResult) for fact, Failure(OVERFLOW) on range violation.

Invariants:
  - Pure and deterministic; no operation raises on overflow.
  - Division truncates toward zero.
"""

from __future__ import annotations

from typing import Optional

from ..domain.enums import OperationalStatus
from ..domain.limits import fits_int64, fits_uint64
from ..domain.models import SignedResult, UnsignedResult
from .result import Failure, Outcome, Success

_OVERFLOW = Failure(OperationalStatus.OVERFLOW)


def _signed(value: int) -> Outcome:
    if not fits_int64(value):
        return _OVERFLOW
    return Success(SignedResult(value))


def _checked_mul(a: int, b: int) -> Optional[int]:
    product = a * b
    if not fits_int64(product):
        return None
    return product


def add(first: int, second: int) -> Outcome:
    return _signed(first + second)


def sub(first: int, second: int) -> Outcome:
    return _signed(first - second)


def mul(first: int, second: int) -> Outcome:
    return _signed(first * second)


def div(first: int, second: int) -> Outcome:
    """Integer division truncating toward zero; ``second`` must be non-zero."""

    quotient = abs(first) // abs(second)
    if (first < 0) != (second < 0):
        quotient = -quotient
    # Only INT64_MIN / -1 leaves the range.
    return _signed(quotient)


def pow(base: int, exponent: int) -> Outcome:
    """Square-and-multiply with a checked multiply; ``exponent`` must be >= 0.

    ``x ** 0`` is 1 for every ``x``, including 0.
    """

    result = 1
    factor = base
    remaining = exponent
    while remaining > 0:
        if remaining & 1:
            step = _checked_mul(result, factor)
            if step is None:
                return _OVERFLOW
            result = step
        remaining >>= 1
        if remaining > 0:
            squared = _checked_mul(factor, factor)
            if squared is None:
                return _OVERFLOW
            factor = squared
    return Success(SignedResult(result))


def fact(n: int) -> Outcome:
    """Return n! as an unsigned result; ``n`` must be >= 0.

    Stops at the first product beyond uint64, which happens at n = 21.
    """

    product = 1
    for value in range(2, n + 1):
        product *= value
        if not fits_uint64(product):
            return _OVERFLOW
    return Success(UnsignedResult(product))
