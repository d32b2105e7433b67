"""Runtime environment for stacklang.

The Environment stores bindings of Symbols to values and supports nested
scopes via an `outer` link. Control builtins create a child of the environment
active at the call site, so the chain mirrors the dynamic call graph rather
than the textual nesting of blocks.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional, Iterator

from stacklang import StackValue
from stacklang.errors import StackTypeError, UnboundNameError
from stacklang.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, StackValue] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Return a fresh scope whose parent is this one."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: StackValue) -> None:
        """Bind `name` to `value` in this frame only.

        An existing binding of the same name further out is shadowed, never
        updated. Raises StackTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise StackTypeError(f"Cannot define {name!r} as a name")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: StackValue) -> None:
        """Update the nearest existing binding for `name` in the chain.

        Raises UnboundNameError if the name is not bound anywhere.
        """
        env = self.find(name)
        if env is None:
            raise UnboundNameError(f"Cannot assign unbound name {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> StackValue:
        """Look up the value bound to `name`, innermost frame first."""
        env = self.find(name)
        if env is None:
            raise UnboundNameError(f"Unbound name {name}")
        return env.vars[name]

    def remove(self, name: Symbol) -> None:
        """Delete `name` from this frame; UnboundNameError if it is not here."""
        try:
            del self.vars[name]
        except KeyError:
            raise UnboundNameError(f"Cannot free {name}: not bound in this scope") from None

    def names(self) -> list[Symbol]:
        """All visible names, innermost frame first, without duplicates."""
        seen: dict[Symbol, None] = {}
        for frame in self.frames():
            for name in frame.vars:
                seen.setdefault(name, None)
        return list(seen)

    def frames(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def update(self, mapping: dict[Symbol, StackValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            for env in self.frames():
                env_buf: StringIO = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
