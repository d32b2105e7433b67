from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from stacklang.config import get_prelude_root, PRELUDE_SUFFIX

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def prelude_path(name: str = 'core') -> Path:
    return (get_prelude_root() / name).with_suffix(PRELUDE_SUFFIX)


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate core.stk from the prelude root; FileNotFoundError if absent."""
    path = prelude_path()
    if not path.is_file():
        raise FileNotFoundError(f"Cannot find prelude {path} (check STACKLANG_PRELUDE_PATH)")
    logger.debug("loading prelude from %s", path)
    itp.eval_prelude(path.read_text(encoding='utf-8'))
