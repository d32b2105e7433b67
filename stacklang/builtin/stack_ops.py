"""Stack manipulation, name binding, type inspection and output builtins.

Builtins taking (executor, env, ...) are contextual: they need the executor's
stack or output stream, or the environment active at the call site.
"""
from __future__ import annotations

import logging

from stacklang import StackValue
from stacklang.errors import StackTypeError
from stacklang.debug_utils.pprint import to_display
from stacklang.types.environment import Environment
from stacklang.types.values import binder_names, kind_of, is_number, normalize_number

logger = logging.getLogger(__name__)


# -------------------------------
# Stack
# -------------------------------
def pop(value: StackValue) -> None:
    return None


def copy(value: StackValue) -> tuple[StackValue, StackValue]:
    return value, value


def swap(a: StackValue, b: StackValue) -> tuple[StackValue, StackValue]:
    return b, a


def size_stack(executor, env: Environment) -> None:
    executor.push(len(executor.stack))


def get_stack(executor, env: Environment) -> None:
    executor.push(list(executor.stack))


# -------------------------------
# Names
# -------------------------------
def var(executor, env: Environment, value: StackValue, name: StackValue) -> None:
    """Bind name -> value in the innermost scope, shadowing any outer binding."""
    (symbol,) = binder_names(name)
    if executor.is_builtin(symbol):
        logger.debug("var %s is shadowed by the builtin of the same name", symbol)
    env.define(symbol, value)


def assign(executor, env: Environment, value: StackValue, name: StackValue) -> None:
    """Rebind the nearest existing binding of name."""
    (symbol,) = binder_names(name)
    env.set(symbol, value)


def free(executor, env: Environment, name: StackValue) -> None:
    (symbol,) = binder_names(name)
    env.remove(symbol)


def mem(executor, env: Environment) -> None:
    executor.push([symbol.id for symbol in env.names()])


# -------------------------------
# Types
# -------------------------------
def type_name(value: StackValue) -> str:
    return str(kind_of(value))


def _to_number(value: StackValue) -> float:
    if isinstance(value, bool):
        return 1 if value else 0
    if is_number(value):
        return value
    if isinstance(value, str):
        try:
            return normalize_number(float(value.strip()))
        except ValueError:
            raise StackTypeError(f"cast: {value!r} is not a number") from None
    if isinstance(value, list):
        return len(value)
    raise StackTypeError(f"cast: cannot convert {kind_of(value)} to number")


def _to_list(value: StackValue) -> list:
    if isinstance(value, str):
        return list(value)
    if isinstance(value, list):
        return list(value)
    return [value]


def cast(value: StackValue, target: str) -> StackValue:
    """Explicit conversion to "number", "string", "bool" or "list"."""
    if target == "number":
        return _to_number(value)
    if target == "string":
        return to_display(value)
    if target == "bool":
        if isinstance(value, bool):
            return value
        if is_number(value):
            return value != 0
        return len(value) > 0
    if target == "list":
        return _to_list(value)
    raise StackTypeError(f"cast: unknown target type {target!r}")


# -------------------------------
# Output
# -------------------------------
def print_value(executor, env: Environment, value: StackValue) -> None:
    """Write the display form of value plus a newline to the executor's output."""
    executor.write(to_display(value) + "\n")
