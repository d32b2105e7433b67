"""String builtins: concatenation, searching, splitting and conversion."""
from __future__ import annotations

import re

from stacklang import StackValue
from stacklang.errors import StackTypeError, StackRangeError
from stacklang.debug_utils.pprint import to_display
from stacklang.types.values import kind_of


def concat(a: StackValue, b: StackValue) -> StackValue:
    """Two strings or two lists, joined in push order."""
    if isinstance(a, str) and isinstance(b, str):
        return a + b
    if isinstance(a, list) and isinstance(b, list):
        return a + b
    raise StackTypeError(
        f"concat: expected two strings or two lists, got {kind_of(a)} and {kind_of(b)}"
    )


def decode(code: float) -> str:
    """Unicode code point to a one-character string."""
    try:
        return chr(int(code))
    except (ValueError, OverflowError):
        raise StackRangeError(f"decode: {code} is not a valid code point") from None


def encode(text: str) -> int:
    """Code point of the first character."""
    if not text:
        raise StackRangeError("encode: cannot encode an empty string")
    return ord(text[0])


def replace(text: str, before: str, after: str) -> str:
    return text.replace(before, after)


def split(text: str, key: str) -> list[str]:
    if not key:
        return list(text)
    return text.split(key)


def case(text: str, style: str) -> str:
    """"lower" or "upper"; any other style leaves the text unchanged."""
    if style == "lower":
        return text.lower()
    if style == "upper":
        return text.upper()
    return text


def join(items: list[StackValue], key: str) -> str:
    return key.join(to_display(x) for x in items)


def find(text: str, word: str) -> bool:
    return word in text


def regex(text: str, pattern: str) -> list[str]:
    """Every non-overlapping match of `pattern` in `text`."""
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise StackTypeError(f"regex: invalid pattern {pattern!r}: {e}") from None
    return [m.group(0) for m in compiled.finditer(text)]


def only_number(text: str) -> bool:
    try:
        float(text.strip())
    except ValueError:
        return False
    return True
