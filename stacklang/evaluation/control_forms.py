"""Control-flow builtins: eval, if, while, for, repeat, map, filter, reduce.

There is no control syntax in the language; every construct here is a
contextual builtin that pops quoted Blocks and evaluates them. Each activation
of a body runs in a fresh child of the environment active at the call site, so
names bound inside a body vanish when that activation ends, and a stored block
sees whatever names its caller has in scope.
"""

from __future__ import annotations

from stacklang import StackValue
from stacklang.errors import StackTypeError, StackUnderflowError
from stacklang.reader.parser import parse_block
from stacklang.types.environment import Environment
from stacklang.types.symbol import Symbol
from stacklang.types.values import binder_names, kind_of


def _bind(command: str, scope: Environment, names: list[Symbol], item: StackValue) -> None:
    """Bind one element to the loop name(s); several names destructure a list."""
    if len(names) == 1:
        scope.define(names[0], item)
        return
    if not isinstance(item, list) or len(item) != len(names):
        raise StackTypeError(
            f"{command}: cannot destructure {kind_of(item)} into {len(names)} names"
        )
    scope.update(dict(zip(names, item)))


def _pop_result(executor, command: str) -> StackValue:
    """Pop the value a body or condition left on top of the stack."""
    if not executor.stack:
        raise StackUnderflowError(f"{command}: block left no value on the stack")
    return executor.stack.pop()


def _pop_bool(executor, command: str) -> bool:
    if executor.stack and not isinstance(executor.stack[-1], bool):
        raise StackTypeError(
            f"{command}: block must leave a bool, got {kind_of(executor.stack[-1])}"
        )
    return _pop_result(executor, command)


def eval_form(executor, env: Environment, code: StackValue) -> None:
    """Run a block (or source text) once in a child scope."""
    if isinstance(code, str):
        code = parse_block(code)
    executor.eval_block(code, env.child())


def if_form(executor, env: Environment, then_branch, else_branch, condition: bool) -> None:
    """(then) (else) condition if -- only the selected branch is evaluated."""
    executor.eval_block(then_branch if condition else else_branch, env.child())


def while_form(executor, env: Environment, body, condition) -> None:
    """(body) (condition) while -- re-test the condition before every pass."""
    while True:
        executor.eval_block(condition, env.child())
        if not _pop_bool(executor, "while"):
            return
        executor.eval_block(body, env.child())


def for_form(executor, env: Environment, items, binder, body) -> None:
    """list (name) (body) for"""
    names = binder_names(binder)
    for item in items:
        scope = env.child()
        _bind("for", scope, names, item)
        executor.eval_block(body, scope)


def repeat_form(executor, env: Environment, body, count: float) -> None:
    """(body) n repeat -- run body n times; a string body is repeated as text."""
    n = int(count)
    if isinstance(body, str):
        executor.push(body * n)
        return
    for _ in range(n):
        executor.eval_block(body, env.child())


def map_form(executor, env: Environment, items, binder, body) -> None:
    """list (name) (body) map -- collect the value body leaves for each item."""
    names = binder_names(binder)
    results = []
    for item in items:
        scope = env.child()
        _bind("map", scope, names, item)
        executor.eval_block(body, scope)
        results.append(_pop_result(executor, "map"))
    executor.push(results)


def filter_form(executor, env: Environment, items, binder, body) -> None:
    """list (name) (predicate) filter -- keep items for which predicate leaves true."""
    names = binder_names(binder)
    kept = []
    for item in items:
        scope = env.child()
        _bind("filter", scope, names, item)
        executor.eval_block(body, scope)
        if _pop_bool(executor, "filter"):
            kept.append(item)
    executor.push(kept)


def reduce_form(executor, env: Environment, items, initial, binder, body) -> None:
    """list initial (acc item) (body) reduce -- fold items into one value."""
    acc_name, item_name = binder_names(binder)
    acc = initial
    for item in items:
        scope = env.child()
        scope.define(acc_name, acc)
        scope.define(item_name, item)
        executor.eval_block(body, scope)
        acc = _pop_result(executor, "reduce")
    executor.push(acc)
