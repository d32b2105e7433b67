"""The stacklang stack machine.

An Executor owns one operand stack, one root Environment and one output
stream. Every block evaluated by that executor, however deeply nested, reads
its arguments from and leaves its results on the same stack; nothing is kept
in module-level state, so independent executors can run side by side.
"""

from __future__ import annotations

import contextlib
import logging
import random
import sys
from typing import TextIO

from stacklang import StackItem, StackValue
from stacklang.builtin import BUILTINS
from stacklang.builtin.registry import Builtin
from stacklang.config import ExecutorConfig, load_config
from stacklang.debug_utils.pprint import show_stack, to_source
from stacklang.errors import EvaluationDepthError, StackUnderflowError
from stacklang.reader.parser import parse_block
from stacklang.types.block import Block, ListExpr
from stacklang.types.empty import EmptyType
from stacklang.types.environment import Environment
from stacklang.types.symbol import Symbol

logger = logging.getLogger(__name__)

# Python frames used by one nested block level:
# _eval_items, step, dispatch, invoke, the control builtin, eval_block
_FRAMES_PER_LEVEL = 8


@contextlib.contextmanager
def recursion_headroom(levels: int):
    """Raise the recursion limit so `levels` nested blocks fit, then restore it."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(previous + levels * _FRAMES_PER_LEVEL)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Executor:
    """Evaluates Blocks against a shared operand stack."""

    def __init__(
        self,
        output: TextIO | None = None,
        config: ExecutorConfig | None = None,
        env: Environment | None = None,
    ):
        self.config: ExecutorConfig = config if config is not None else load_config()
        self.stack: list[StackValue] = []
        self.env: Environment = env if env is not None else Environment()
        self._output: TextIO | None = output
        self.random = random.Random(self.config.seed)
        self.depth = 0

    # --- Program entry ---
    def run(self, source: str | Block) -> list[StackValue]:
        """Evaluate a whole program in the root environment.

        Returns a copy of the stack afterwards. Values left by earlier runs
        stay on the stack, as do bindings in the root environment.
        """
        program = parse_block(source) if isinstance(source, str) else source
        with recursion_headroom(self.config.max_depth):
            self.eval_block(program, self.env)
        logger.debug("%s", show_stack(self.stack))
        return list(self.stack)

    # --- Evaluation ---
    def eval_block(self, block: Block | EmptyType, env: Environment) -> None:
        """Evaluate each item of `block` in order against `env`."""
        if isinstance(block, EmptyType):
            return
        self._eval_items(block.items, env)

    def _eval_items(self, items: tuple[StackItem, ...], env: Environment) -> None:
        if self.depth >= self.config.max_depth:
            raise EvaluationDepthError(
                f"Blocks nested deeper than {self.config.max_depth} levels"
            )
        self.depth += 1
        try:
            for item in items:
                self.step(item, env)
        finally:
            self.depth -= 1

    def step(self, item: StackItem, env: Environment) -> None:
        """Evaluate a single item: dispatch identifiers, push everything else."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s ←  %s", show_stack(self.stack), to_source(item))

        if isinstance(item, Symbol):
            self.dispatch(item, env)
        elif isinstance(item, ListExpr):
            self.push(self.collect(item, env))
        else:
            # Literals, including Blocks, are quoted by default
            self.stack.append(item)

    def dispatch(self, name: Symbol, env: Environment) -> None:
        """Builtins first, then the environment chain."""
        builtin = BUILTINS.get(name.id)
        if builtin is not None:
            self.invoke(builtin, env)
            return
        self.stack.append(env.lookup(name))

    def invoke(self, builtin: Builtin, env: Environment) -> None:
        """Check, pop, call and push for one builtin.

        Stack depth and parameter checks happen before the stack is touched, and a
        pure builtin's results are computed before its arguments are removed.
        """
        arity = builtin.arity
        if len(self.stack) < arity:
            raise StackUnderflowError(
                f"{builtin.name}: needs {arity} value{'s' if arity != 1 else ''}, "
                f"stack has {len(self.stack)}"
            )
        base = len(self.stack) - arity
        args = self.stack[base:]
        builtin.check(args)

        if builtin.contextual:
            del self.stack[base:]
            builtin.fn(self, env, *args)
            return

        result = builtin.fn(*args)
        del self.stack[base:]
        if builtin.results == 1:
            self.stack.append(result)
        elif builtin.results > 1:
            self.stack.extend(result)

    def collect(self, expr: ListExpr, env: Environment) -> list[StackValue]:
        """Evaluate a bracketed list and gather what it pushed."""
        mark = len(self.stack)
        self._eval_items(expr.items, env)
        collected = self.stack[mark:]
        del self.stack[mark:]
        return collected

    # --- Helpers used by contextual builtins ---
    def push(self, value: StackValue) -> None:
        self.stack.append(value)

    def pop(self) -> StackValue:
        if not self.stack:
            raise StackUnderflowError("pop: stack is empty")
        return self.stack.pop()

    @property
    def output(self) -> TextIO:
        # Resolved per write so a redirected sys.stdout is honoured
        return self._output if self._output is not None else sys.stdout

    def write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    @staticmethod
    def is_builtin(name: Symbol) -> bool:
        return name.id in BUILTINS
