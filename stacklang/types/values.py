"""Value kinds and the equality/ordering rules shared by every component.

Values are plain Python objects; this module decides which variant a given
object belongs to. `bool` is checked before numbers because it subclasses
`int` in Python but is a distinct kind in the language.
"""

from __future__ import annotations

import enum
import math
import sys

from stacklang import StackValue
from stacklang.errors import StackTypeError
from stacklang.types.block import Block, ListExpr
from stacklang.types.empty import EmptyType
from stacklang.types.symbol import Symbol

_FLOAT_MAX = sys.float_info.max


class ValueKind(enum.Enum):
    NUMBER = "number"
    STRING = "string"
    BOOL = "bool"
    LIST = "list"
    BLOCK = "block"
    EMPTY = "empty"

    def __str__(self) -> str:
        return self.value


def kind_of(value: StackValue) -> ValueKind:
    """Return the kind of a runtime value; StackTypeError for foreign objects."""
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.LIST
    if isinstance(value, Block):
        return ValueKind.BLOCK
    if isinstance(value, EmptyType):
        return ValueKind.EMPTY
    raise StackTypeError(f"Not a stack value: {value!r}")


def is_number(value: StackValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _scalar_equal(a, b) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_number(a) and is_number(b):
        return a == b
    if type(a) != type(b):
        return False
    if isinstance(a, (str, Symbol, EmptyType)):
        return a == b
    return False


def values_equal(a, b) -> bool:
    """Structural equality for values and parsed items.

    Lists, Blocks and ListExprs compare element-wise and in order, Bools never
    equal Numbers, and Numbers follow float semantics (1 == 1.0, nan != nan).
    Nested containers are walked with an explicit work list, so nesting depth
    is not bounded by the Python call stack.
    """
    pending = [(a, b)]
    while pending:
        a, b = pending.pop()
        if isinstance(a, list) and isinstance(b, list):
            if len(a) != len(b):
                return False
            pending.extend(zip(a, b))
        elif isinstance(a, (Block, ListExpr)) or isinstance(b, (Block, ListExpr)):
            if type(a) is not type(b) or len(a.items) != len(b.items):
                return False
            pending.extend(zip(a.items, b.items))
        elif not _scalar_equal(a, b):
            return False
    return True


def less_than(a: StackValue, b: StackValue) -> bool:
    """Ordering for two Numbers or two Strings."""
    if is_number(a) and is_number(b):
        return a < b
    if isinstance(a, str) and isinstance(b, str):
        return a < b
    raise StackTypeError(
        f"Cannot order {kind_of(a)} and {kind_of(b)}; expected two numbers or two strings"
    )


def normalize_number(x: float | int) -> float | int:
    """Collapse integral floats to int, and ints past float range to ±inf.

    Every Number on the stack stays convertible to float, so 10 2 div prints
    as 5 and 2 1100 pow behaves like a double overflow.
    """
    if isinstance(x, int):
        if abs(x) > _FLOAT_MAX:
            return math.inf if x > 0 else -math.inf
        return x
    if math.isfinite(x) and x.is_integer():
        return int(x)
    return x


def format_number(x: float | int) -> str:
    if isinstance(x, int):
        return str(x)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    if x.is_integer():
        return str(int(x))
    return repr(x)


def binder_names(value: StackValue) -> list[Symbol]:
    """Names carried by a binder: a string, or a block of identifiers."""
    if isinstance(value, str):
        return [Symbol(value.strip())]
    return list(value.items)
