"""Builtin descriptors and parameter kinds.

Every builtin declares the kinds of the values it pops, listed in push order
(deepest first), and how many values it pushes back. The executor checks the
stack depth and every parameter before touching the stack, so a command that
fails its checks leaves the stack exactly as it found it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from stacklang import StackValue
from stacklang.errors import StackTypeError, StackRangeError
from stacklang.types.block import Block
from stacklang.types.empty import EmptyType
from stacklang.types.symbol import Symbol
from stacklang.types.values import kind_of, is_number


class Param:
    """A named predicate over a single stack value."""

    __slots__ = ("description", "predicate")

    def __init__(self, description: str, predicate: Callable[[StackValue], bool]):
        self.description = description
        self.predicate = predicate

    def check(self, command: str, value: StackValue) -> None:
        if not self.predicate(value):
            raise StackTypeError(
                f"{command}: expected {self.description}, got {kind_of(value)}"
            )

    def __repr__(self) -> str:
        return f"Param({self.description})"


class CountParam(Param):
    """A Number that must not be negative once truncated to an integer."""

    def __init__(self):
        super().__init__("a count", is_number)

    def check(self, command: str, value: StackValue) -> None:
        super().check(command, value)
        if not math.isfinite(value):
            raise StackRangeError(f"{command}: count must be finite, got {value}")
        if int(value) < 0:
            raise StackRangeError(f"{command}: count must not be negative, got {value}")


def _is_name_block(value: StackValue) -> bool:
    return isinstance(value, Block) and all(isinstance(x, Symbol) for x in value.items)


def _is_single_name(value: StackValue) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return _is_name_block(value) and len(value) == 1


def _is_names(value: StackValue) -> bool:
    return _is_single_name(value) or _is_name_block(value)


ANY = Param("a value", lambda v: True)
NUMBER = Param("a number", is_number)
STRING = Param("a string", lambda v: isinstance(v, str))
BOOL = Param("a bool", lambda v: isinstance(v, bool))
LIST = Param("a list", lambda v: isinstance(v, list))
NONEMPTY_LIST = Param("a non-empty list", lambda v: isinstance(v, list) and bool(v))
SEQUENCE = Param("a string or a list", lambda v: isinstance(v, (str, list)))
CODE = Param("a block", lambda v: isinstance(v, (Block, EmptyType)))
EVALUABLE = Param("a block or a string", lambda v: isinstance(v, (Block, EmptyType, str)))
NAME = Param("a name", _is_single_name)
NAMES = Param("one or more names", _is_names)
NAME_PAIR = Param("a block of two names", lambda v: _is_name_block(v) and len(v) == 2)
COUNT = CountParam()


@dataclass(frozen=True)
class Builtin:
    """A native command.

    Pure builtins are called as fn(*args) and return their single result, a
    tuple when `results` > 1, or None when `results` == 0. Contextual builtins
    are called as fn(executor, env, *args) after their arguments have been
    popped, and push whatever they produce themselves.
    """

    name: str
    params: tuple[Param, ...]
    results: int
    fn: Callable[..., StackValue]
    contextual: bool = False

    @property
    def arity(self) -> int:
        return len(self.params)

    def check(self, args: list[StackValue]) -> None:
        for param, value in zip(self.params, args):
            param.check(self.name, value)
