from __future__ import annotations
import sys


class Symbol:
    """A bare identifier inside a Block.

    Whether a Symbol names a builtin or a bound value is only decided when the
    executor reaches it. Names are interned, so equal Symbols share one string.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        if not name:
            raise ValueError("A Symbol needs a non-empty name")
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
