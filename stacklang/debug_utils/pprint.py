"""Text renderings of stacklang values.

- to_source:  re-readable source form; parsing the result gives back an
              equivalent item (strings quoted, blocks parenthesized).
- to_display: what `print` writes; strings appear raw, everything else in
              source form.
- show_stack: one-line stack dump used by the executor's debug trace.
"""

from stacklang import StackItem, StackValue
from stacklang.types.block import Block, ListExpr
from stacklang.types.empty import EmptyType
from stacklang.types.symbol import Symbol
from stacklang.types.values import format_number, is_number

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def quote_string(text: str) -> str:
    return '"' + "".join(_ESCAPES.get(c, c) for c in text) + '"'


def _atom_source(item: StackItem) -> str:
    if isinstance(item, Symbol):
        return item.id
    if isinstance(item, bool):
        return "true" if item else "false"
    if is_number(item):
        return format_number(item)
    if isinstance(item, str):
        return quote_string(item)
    if isinstance(item, EmptyType):
        return "()"
    return repr(item)


def _brackets(item: StackItem):
    """(opener, closer, children) for containers, None for atoms."""
    if isinstance(item, Block):
        return "(", ")", item.items
    if isinstance(item, ListExpr):
        return "[", "]", item.items
    if isinstance(item, list):
        return "[", "]", item
    return None


def to_source(item: StackItem) -> str:
    # Work list of (is_text, payload); containers are expanded in place so
    # nesting depth never reaches the Python call stack.
    out: list[str] = []
    pending = [(False, item)]
    while pending:
        is_text, current = pending.pop()
        if is_text:
            out.append(current)
            continue
        container = _brackets(current)
        if container is None:
            out.append(_atom_source(current))
            continue
        opener, closer, children = container
        pending.append((True, closer))
        for i, child in enumerate(reversed(children)):
            if i:
                pending.append((True, " "))
            pending.append((False, child))
        pending.append((True, opener))
    return "".join(out)


def to_display(value: StackValue) -> str:
    if isinstance(value, str):
        return value
    return to_source(value)


def show_stack(stack: list[StackValue]) -> str:
    return "Stack〔 " + " | ".join(to_source(v) for v in stack) + " 〕"
