import io

import pytest

from stacklang.config import ExecutorConfig
from stacklang.evaluation.executor import Executor
from stacklang.interpreter import Interpreter

# Every test gets its own executor and output buffer.


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def config():
    return ExecutorConfig(seed=1234)


@pytest.fixture
def executor(output, config):
    return Executor(output=output, config=config)


@pytest.fixture
def run(executor):
    """Run a program on a fresh executor and return the final stack."""
    return executor.run


@pytest.fixture
def interp(output, config):
    return Interpreter(output=output, config=config)


@pytest.fixture(autouse=True)
def _isolate_env_config(monkeypatch):
    # Ambient settings from the developer's shell must not leak into tests
    for var in ("STACKLANG_MAX_DEPTH", "STACKLANG_SEED", "STACKLANG_PRELUDE_PATH"):
        monkeypatch.delenv(var, raising=False)
