"""
  Block-structured parser for stacklang.

  Turns a token sequence into the ordered list of top-level items:

    - numbers       -> int (integral literal) / float
    - strings       -> str with escapes decoded
    - true / false  -> bool
    - other atoms   -> Symbol (builtin or variable, decided at run time)
    - ( ... )       -> Block, or Empty for ()
    - [ ... ]       -> ListExpr

  Nesting is resolved with an explicit stack of open accumulators rather than
  recursion, so deeply nested input cannot exhaust the Python call stack.
"""

from __future__ import annotations

import re
from typing import Iterable

from stacklang import StackItem
from stacklang.errors import ParseError
from stacklang.reader.lexer import Token, Tokenizer
from stacklang.types.block import Block, ListExpr
from stacklang.types.empty import Empty
from stacklang.types.symbol import Symbol
from stacklang.types.values import normalize_number

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}

_CLOSERS = {"rparen": "lparen", "rbracket": "lbracket"}
_BRACKET_TEXT = {"lparen": "(", "lbracket": "["}


def decode_string(text: str) -> str:
    """Strip the quotes of a string token and decode its escapes."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), text[1:-1])


def parse_number(text: str) -> int | float:
    if any(c in text for c in ".eE"):
        return float(text)
    try:
        return normalize_number(int(text))
    except ValueError:
        # more digits than int() accepts; far outside float range anyway
        return float(text)


def parse_atom(token: Token) -> StackItem:
    """Classify a single non-bracket token."""
    if token.kind == "number":
        return parse_number(token.text)
    if token.kind == "string":
        return decode_string(token.text)
    if token.text == "true":
        return True
    if token.text == "false":
        return False
    return Symbol(token.text)


def _wrap(opener: Token, items: list[StackItem]) -> StackItem:
    if opener.kind == "lbracket":
        return ListExpr(items)
    if not items:
        return Empty
    return Block(items)


def parse_tokens(tokens: Iterable[Token]) -> list[StackItem]:
    """Parse a token sequence into top-level items."""
    result: list[StackItem] = []
    # Each open group: (opening token, accumulated items)
    open_groups: list[tuple[Token, list[StackItem]]] = []

    for token in tokens:
        if token.kind in ("lparen", "lbracket"):
            open_groups.append((token, []))
            continue

        if token.kind in _CLOSERS:
            if not open_groups:
                raise ParseError(f"Unmatched '{token.text}' at {token.pos}")
            opener, items = open_groups.pop()
            if opener.kind != _CLOSERS[token.kind]:
                raise ParseError(
                    f"'{token.text}' at {token.pos} closes "
                    f"'{_BRACKET_TEXT[opener.kind]}' opened at {opener.pos}"
                )
            item = _wrap(opener, items)
        else:
            item = parse_atom(token)

        if open_groups:
            open_groups[-1][1].append(item)
        else:
            result.append(item)

    if open_groups:
        opener, _ = open_groups[-1]
        raise ParseError(
            f"Unterminated '{_BRACKET_TEXT[opener.kind]}' opened at {opener.pos}"
        )
    return result


def parse(source: str | Iterable[Token]) -> list[StackItem]:
    """Parse source text (or an already-lexed token sequence)."""
    tokens = Tokenizer(source) if isinstance(source, str) else source
    return parse_tokens(tokens)


def parse_block(source: str | Iterable[Token]) -> Block:
    """Parse a whole program into one Block."""
    return Block(parse(source))
