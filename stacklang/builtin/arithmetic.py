"""Arithmetic, comparison and logic builtins.

All of these are pure: they receive already-checked arguments in push order
and return the value to push. Division and remainder by zero follow float
semantics instead of raising, and integer results too large for a float
become infinite.
"""
from __future__ import annotations

import math
import sys

from stacklang import StackValue
from stacklang.types.values import values_equal, less_than, normalize_number


# -------------------------------
# Arithmetic
# -------------------------------
def add(a: float, b: float) -> float:
    return normalize_number(a + b)


def sub(a: float, b: float) -> float:
    return normalize_number(a - b)


def mul(a: float, b: float) -> float:
    return normalize_number(a * b)


def div(a: float, b: float) -> float:
    """a / b; by zero gives inf with the sign of a, or NaN for 0/0."""
    if b == 0:
        if a == 0 or a != a:
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1, b)
    return normalize_number(a / b)


def mod(a: float, b: float) -> float:
    """Truncated remainder: the result takes the sign of the dividend."""
    if b == 0 or not math.isfinite(a):
        return math.nan
    if isinstance(a, int) and isinstance(b, int):
        r = abs(a) % abs(b)
        return -r if a < 0 else r
    return normalize_number(math.fmod(a, b))


def power(a: float, b: float) -> float:
    if isinstance(a, int) and isinstance(b, int) and b >= 0:
        # skip building integers that normalize_number would turn into inf
        if abs(a) > 1 and b * math.log2(abs(a)) > sys.float_info.max_exp:
            return -math.inf if a < 0 and b % 2 else math.inf
        return normalize_number(a ** b)
    try:
        return normalize_number(math.pow(a, b))
    except OverflowError:
        return math.inf
    except ValueError:
        # negative base with a fractional exponent
        return math.nan


def round_half_away(a: float) -> float:
    if isinstance(a, int) or not math.isfinite(a):
        return a
    return int(math.copysign(math.floor(abs(a) + 0.5), a))


def _trig(fn, a: float) -> float:
    if not math.isfinite(a):
        return math.nan
    return fn(a)


def sin(a: float) -> float:
    return _trig(math.sin, a)


def cos(a: float) -> float:
    return _trig(math.cos, a)


def tan(a: float) -> float:
    return _trig(math.tan, a)


# -------------------------------
# Comparison
# -------------------------------
def equal(a: StackValue, b: StackValue) -> bool:
    return values_equal(a, b)


def less(a: StackValue, b: StackValue) -> bool:
    return less_than(a, b)


def greater(a: StackValue, b: StackValue) -> bool:
    return less_than(b, a)


# -------------------------------
# Boolean logic
# -------------------------------
def logical_and(a: bool, b: bool) -> bool:
    return a and b


def logical_or(a: bool, b: bool) -> bool:
    return a or b


def logical_not(a: bool) -> bool:
    return not a
