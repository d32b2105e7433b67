from stacklang.types.symbol import Symbol
from stacklang.types.empty import Empty, EmptyType
from stacklang.types.block import Block, ListExpr
from stacklang.types.environment import Environment
from stacklang.types.values import ValueKind, kind_of, values_equal

__all__ = [
    "Symbol",
    "Empty",
    "EmptyType",
    "Block",
    "ListExpr",
    "Environment",
    "ValueKind",
    "kind_of",
    "values_equal",
]
