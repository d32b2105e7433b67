"""Quoted code for stacklang.

A Block is the parsed contents of a parenthesized group. It is pushed onto the
stack like any other value and only runs when a control builtin evaluates it.
A ListExpr is the parsed contents of a bracketed group; unlike a Block it is
never a value, the executor evaluates it on sight and collects what it pushes.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from stacklang import StackItem


def _shallow_hash(tag: str, items: tuple) -> int:
    # Nested groups contribute only their kind and length, so hashing never
    # recurses; equal items still hash alike.
    return hash((tag, tuple(
        (type(x).__name__, len(x.items)) if isinstance(x, (Block, ListExpr)) else x
        for x in items
    )))


class Block:
    """An immutable, shareable sequence of parsed items."""

    __slots__ = ("items",)

    def __init__(self, items: Iterable[StackItem] = ()):
        object.__setattr__(self, "items", tuple(items))

    def __setattr__(self, name, value):
        raise AttributeError("Block is immutable")

    def __iter__(self) -> Iterator[StackItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __eq__(self, other) -> bool:
        from stacklang.types.values import values_equal
        return isinstance(other, Block) and values_equal(list(self.items), list(other.items))

    def __hash__(self) -> int:
        return _shallow_hash("block", self.items)

    def __str__(self) -> str:
        from stacklang.debug_utils.pprint import to_source
        return to_source(self)

    def __repr__(self) -> str:
        return f"Block({self})"


class ListExpr:
    """A bracketed list literal, evaluated into a List when executed."""

    __slots__ = ("items",)

    def __init__(self, items: Iterable[StackItem] = ()):
        self.items: tuple[StackItem, ...] = tuple(items)

    def __eq__(self, other) -> bool:
        from stacklang.types.values import values_equal
        return isinstance(other, ListExpr) and values_equal(list(self.items), list(other.items))

    def __hash__(self) -> int:
        return _shallow_hash("list", self.items)

    def __str__(self) -> str:
        from stacklang.debug_utils.pprint import to_source
        return to_source(self)

    def __repr__(self) -> str:
        return f"ListExpr({self})"
