from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (stacklang package directory)
_STACKLANG_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _STACKLANG_DIR / 'prelude'
# Nested block levels allowed per run. The executor raises the Python
# recursion limit for the duration of a run to fit this many levels.
DEFAULT_MAX_DEPTH = 500

PRELUDE_SUFFIX = '.stk'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def int_from_env(var: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_prelude_root() -> Path:
    roots = paths_from_env('STACKLANG_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent


@dataclass(frozen=True)
class ExecutorConfig:
    """Knobs for one Executor.

    max_depth bounds how deeply blocks may nest at run time; seed fixes the
    generator behind `rand` and `shuffle` (None draws from the OS).
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    seed: Optional[int] = None


def load_config() -> ExecutorConfig:
    """Build an ExecutorConfig from STACKLANG_MAX_DEPTH and STACKLANG_SEED."""
    max_depth = int_from_env('STACKLANG_MAX_DEPTH', DEFAULT_MAX_DEPTH)
    if max_depth < 1:
        raise ValueError(f"STACKLANG_MAX_DEPTH must be positive, got {max_depth}")
    return ExecutorConfig(
        max_depth=max_depth,
        seed=int_from_env('STACKLANG_SEED', None),
    )
