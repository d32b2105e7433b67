import math

import pytest

from stacklang.debug_utils.pprint import to_source, to_display, show_stack
from stacklang.errors import StackTypeError
from stacklang.reader.parser import parse
from stacklang.types import Block, Empty, EmptyType, Symbol, ValueKind, kind_of, values_equal
from stacklang.types.values import less_than, normalize_number, format_number


@pytest.mark.parametrize(
    "value, kind",
    [
        (1, ValueKind.NUMBER),
        (2.5, ValueKind.NUMBER),
        ("x", ValueKind.STRING),
        (True, ValueKind.BOOL),
        (False, ValueKind.BOOL),
        ([1, 2], ValueKind.LIST),
        (Block([1]), ValueKind.BLOCK),
        (Empty, ValueKind.EMPTY),
    ]
)
def test_kind_of(value, kind):
    assert kind_of(value) is kind


def test_kind_names():
    assert [str(k) for k in ValueKind] == ["number", "string", "bool", "list", "block", "empty"]


def test_kind_of_rejects_foreign_objects():
    with pytest.raises(StackTypeError):
        kind_of(object())


def test_empty_is_a_falsy_singleton():
    assert EmptyType() is Empty
    assert not Empty
    assert len(Empty) == 0
    assert list(Empty) == []
    assert repr(Empty) == "()"


def test_symbols_are_interned():
    assert Symbol("abc") == Symbol("abc")
    assert Symbol("abc") != Symbol("abd")
    assert Symbol("abc").id is Symbol("abc").id
    assert hash(Symbol("x")) == hash(Symbol("x"))
    assert Symbol("x") != "x"
    with pytest.raises(ValueError):
        Symbol("")


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1, 1, True),
        (1, 1.0, True),
        (1, 2, False),
        (True, True, True),
        (True, 1, False),
        (0, False, False),
        ("a", "a", True),
        ("1", 1, False),
        ([1, [2, "x"]], [1, [2, "x"]], True),
        ([1, 2], [2, 1], False),
        ([1], [1, 1], False),
        ([True], [1], False),
        (Block([1, Symbol("a")]), Block([1, Symbol("a")]), True),
        (Block([1]), [1], False),
        (Empty, Empty, True),
        (Empty, [], False),
        (math.nan, math.nan, False),
    ]
)
def test_values_equal(a, b, expected):
    assert values_equal(a, b) is expected
    assert values_equal(b, a) is expected


def test_less_than():
    assert less_than(1, 2)
    assert not less_than(2, 2)
    assert less_than(1.5, 2)
    assert less_than("abc", "abd")
    assert less_than("B", "a")


@pytest.mark.parametrize("a, b", [(1, "2"), (True, False), ([1], [2]), (Empty, 1)])
def test_less_than_rejects_mixed_or_unordered_kinds(a, b):
    with pytest.raises(StackTypeError):
        less_than(a, b)


def test_normalize_number():
    assert type(normalize_number(4.0)) is int
    assert normalize_number(4.5) == 4.5
    assert normalize_number(7) == 7
    assert math.isinf(normalize_number(math.inf))
    assert normalize_number(2**1100) == math.inf
    assert normalize_number(-(2**1100)) == -math.inf
    assert normalize_number(2**1000) == 2**1000


@pytest.mark.parametrize(
    "value, text",
    [
        (3, "3"),
        (-2, "-2"),
        (2.5, "2.5"),
        (5.0, "5"),
        (math.nan, "NaN"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
    ]
)
def test_format_number(value, text):
    assert format_number(value) == text


@pytest.mark.parametrize(
    "value, source",
    [
        ("hi", '"hi"'),
        ('a "q"\n', '"a \\"q\\"\\n"'),
        (True, "true"),
        (False, "false"),
        (Empty, "()"),
        ([1, "a", [True]], '[1 "a" [true]]'),
        (Block([Symbol("x"), 1, Block([Symbol("y")])]), "(x 1 (y))"),
    ]
)
def test_to_source(value, source):
    assert to_source(value) == source


def test_to_display_leaves_strings_raw():
    assert to_display("hello") == "hello"
    assert to_display(["hello"]) == '["hello"]'
    assert to_display(4.0) == "4"


def test_show_stack():
    assert show_stack([1, "a", Empty]) == 'Stack〔 1 | "a" | () 〕'
    assert show_stack([]) == "Stack〔  〕"


def test_deep_nesting_does_not_recurse():
    source = "(" * 3000 + "x" + ")" * 3000
    first, second = parse(source + " " + source)
    assert values_equal(first, second)
    assert hash(first) == hash(second)
    assert to_source(first) == source
    nested = []
    for _ in range(3000):
        nested = [nested]
    assert values_equal(nested, nested)
    assert to_source(nested) == "[" * 3001 + "]" * 3001


def test_equal_blocks_hash_alike():
    assert hash(Block([1, Block([2])])) == hash(Block([1.0, Block([2.0])]))
    assert Block([1, Block([2])]) == Block([1.0, Block([2.0])])
