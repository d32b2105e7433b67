"""List builtins.

Lists are never mutated in place: every builtin that "changes" a list pushes a
new one, so a List bound to a name or captured in another List keeps its
contents. Accessors that make sense for strings (len, head, tail, get,
reverse) accept either.
"""
from __future__ import annotations

import functools
import math

from stacklang import StackValue
from stacklang.errors import StackRangeError
from stacklang.types.environment import Environment
from stacklang.types.values import values_equal, less_than


def _index(command: str, index: float, size: int, *, allow_end: bool = False) -> int:
    if not math.isfinite(index):
        raise StackRangeError(f"{command}: index {index} is out of range")
    i = int(index)
    limit = size + 1 if allow_end else size
    if i < 0 or i >= limit:
        raise StackRangeError(f"{command}: index {i} is out of range for length {size}")
    return i


def length(seq: str | list) -> int:
    return len(seq)


def head(seq: str | list) -> StackValue:
    if not seq:
        raise StackRangeError("head: empty sequence")
    return seq[0]


def tail(seq: str | list) -> str | list:
    return seq[1:]


def get(seq: str | list, index: float) -> StackValue:
    return seq[_index("get", index, len(seq))]


def set_item(items: list, index: float, value: StackValue) -> list:
    i = _index("set", index, len(items))
    return items[:i] + [value] + items[i + 1:]


def delete(items: list, index: float) -> list:
    i = _index("del", index, len(items))
    return items[:i] + items[i + 1:]


def append(items: list, value: StackValue) -> list:
    return items + [value]


def insert(items: list, index: float, value: StackValue) -> list:
    i = _index("insert", index, len(items), allow_end=True)
    return items[:i] + [value] + items[i:]


def index_of(items: list, value: StackValue) -> int:
    for i, x in enumerate(items):
        if values_equal(x, value):
            return i
    raise StackRangeError("index: item not found in list")


def _compare(a: StackValue, b: StackValue) -> int:
    if less_than(a, b):
        return -1
    if less_than(b, a):
        return 1
    return 0


def sort(items: list) -> list:
    """Ascending; elements must all be numbers or all be strings."""
    return sorted(items, key=functools.cmp_to_key(_compare))


def reverse(seq: str | list) -> str | list:
    return seq[::-1]


def range_list(start: float, end: float, step: float) -> list:
    """Numbers from start (inclusive) to end (exclusive) by step."""
    if step == 0:
        raise StackRangeError("range: step must not be zero")
    if not all(math.isfinite(x) for x in (start, end, step)):
        raise StackRangeError("range: bounds and step must be finite")
    result = []
    i = 0
    value = start
    while (step > 0 and value < end) or (step < 0 and value > end):
        result.append(value)
        i += 1
        value = start + i * step
    return result


# -------------------------------
# Random (contextual: uses the executor's own generator)
# -------------------------------
def rand(executor, env: Environment, items: list) -> None:
    executor.push(executor.random.choice(items))


def shuffle(executor, env: Environment, items: list) -> None:
    shuffled = list(items)
    executor.random.shuffle(shuffled)
    executor.push(shuffled)
