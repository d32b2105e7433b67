from __future__ import annotations
from typing import Literal, TextIO

from stacklang import StackValue
from stacklang.config import ExecutorConfig
from stacklang.errors import StackError
from stacklang.evaluation.executor import Executor
from stacklang.modules.prelude_loader import load_prelude
from stacklang.types.environment import Environment


class Interpreter:
    """
    Orchestrates reading and evaluating stacklang code.
    Maintains one Executor (stack and root Environment) across calls, so
    definitions and leftover values persist between `eval` calls.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        output: TextIO | None = None,
        config: ExecutorConfig | None = None,
    ):
        self.executor: Executor = Executor(output=output, config=config)

        if prelude == 'auto':
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)

    @property
    def env(self) -> Environment:
        return self.executor.env

    @property
    def stack(self) -> list[StackValue]:
        return self.executor.stack

    def eval_prelude(self, code: str) -> None:
        """Evaluate definitions; a prelude must not leave values behind."""
        depth = len(self.executor.stack)
        self.executor.run(code)
        if len(self.executor.stack) != depth:
            leftover = self.executor.stack[depth:]
            del self.executor.stack[depth:]
            raise StackError(f"Prelude left {len(leftover)} value(s) on the stack")

    def eval(self, code: str) -> list[StackValue]:
        """Evaluate a program and return the stack contents afterwards."""
        return self.executor.run(code)

    def pop(self) -> StackValue:
        return self.executor.pop()
