"""
  Tokenizer for stacklang source text.

- Streaming: `lex` is a generator, tokens are produced on demand.
- Restartable: `Tokenizer` re-lexes its source on every iteration.
- Token kinds:

    - atom      -> bare word (identifier, true/false)
    - number    -> 12, -3, 4.5, 1e3
    - string    -> "text" (escapes decoded later by the parser)
    - lparen    -> (   start of a block
    - rparen    -> )
    - lbracket  -> [   start of a list literal
    - rbracket  -> ]

  Comments run from one `#` to the next and are skipped. Whitespace only
  separates tokens; brackets and parentheses never need surrounding spaces.
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from stacklang.errors import LexError


class Token(NamedTuple):
    kind: str
    text: str
    pos: int


# Full-width space is treated as whitespace too (str.isspace covers it)
_DELIMITERS = r'\s()\[\]"#'

TOKEN_RE = re.compile(
    r"(?P<comment>#[^#]*#)"
    r'|(?P<string>"(?:\\.|[^\\"])*")'
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<lbracket>\[)"
    r"|(?P<rbracket>\])"
    rf"|(?P<number>[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?(?=[{_DELIMITERS}]|$))"
    rf"|(?P<atom>[^{_DELIMITERS}]+)",
    re.DOTALL,
)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, text, pos) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if m is None:
            if source[pos] == '"':
                raise LexError("Unterminated string literal", pos)
            if source[pos] == "#":
                raise LexError("Unterminated comment", pos)
            raise LexError(f"Unexpected character {source[pos]!r}", pos)
        kind = m.lastgroup
        pos = m.end()
        if kind == "comment":
            continue
        yield Token(kind, m.group(kind), m.start())


class Tokenizer:
    """Restartable token sequence over a fixed source string."""

    def __init__(self, source: str):
        self.source = source

    def __iter__(self) -> Iterator[Token]:
        return lex(self.source)

    def __repr__(self) -> str:
        return f"Tokenizer({self.source!r})"
