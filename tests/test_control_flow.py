import math
import sys

import pytest

from stacklang.config import ExecutorConfig
from stacklang.errors import (
    EvaluationDepthError,
    ParseError,
    StackRangeError,
    StackTypeError,
    StackUnderflowError,
    UnboundNameError,
)
from stacklang.evaluation.executor import Executor


# -------------------------------
# eval
# -------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("(1 2 add) eval", [3]),
        ("() eval", []),
        ('"3 4 mul" eval', [12]),
        ('"" eval', []),
        ("((1) eval) eval", [1]),
        ("(5 (t) var t) eval", [5]),
        ("(2 3) eval add", [5]),
    ]
)
def test_eval(run, source, expected):
    assert run(source) == expected


def test_eval_bindings_do_not_leak(run):
    with pytest.raises(UnboundNameError):
        run("(5 (t) var) eval t")


def test_eval_of_bad_source(run):
    with pytest.raises(ParseError):
        run('"(1 2" eval')


def test_eval_requires_code(run):
    with pytest.raises(StackTypeError, match="eval: expected a block or a string, got number"):
        run("5 eval")


# -------------------------------
# if
# -------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("(1) (2) true if", [1]),
        ("(1) (2) false if", [2]),
        ("() (2) true if", []),
        ("(1) () false if", []),
        ("(1) (2) 3 4 less if", [1]),
        ("10 (1 add) (1 sub) false if", [9]),
    ]
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_never_evaluates_the_other_branch(run, output):
    run('("then" print) ("else" print) true if')
    assert output.getvalue() == "then\n"


def test_if_untaken_branch_may_be_broken(run):
    assert run("(1) (undefined-word) true if") == [1]


def test_if_requires_bool(run):
    with pytest.raises(StackTypeError):
        run("(1) (2) 1 if")


# -------------------------------
# while
# -------------------------------
def test_while_counts_with_assign(run):
    assert run("0 (i) var (i 1 add (i) assign) (i 10 less) while i") == [10]


def test_while_false_never_runs_body(run, output):
    assert run('("body" print) (false) while') == []
    assert output.getvalue() == ""


def test_while_body_scope_is_discarded(run):
    program = "0 (i) var (5 (t) var i 1 add (i) assign) (i 3 less) while mem"
    assert run(program) == [["i"]]


def test_while_condition_must_be_bool(run):
    with pytest.raises(StackTypeError, match="while: block must leave a bool, got number"):
        run("() (1) while")


def test_while_condition_must_leave_value(run):
    with pytest.raises(StackUnderflowError):
        run("() () while")


# -------------------------------
# for
# -------------------------------
def test_for_sums(run):
    assert run("0 (s) var [1 2 3] (x) (s x add (s) assign) for s") == [6]


def test_for_leaves_body_results(run):
    assert run("[1 2 3] (x) (x x mul) for") == [1, 4, 9]


def test_for_over_string(run, output):
    run('"ab" (c) (c print) for')
    assert output.getvalue() == "a\nb\n"


def test_for_binder_as_string(run):
    assert run('[1 2] "x" (x) for') == [1, 2]


def test_for_destructures(run):
    assert run("[[1 2] [3 4]] (a b) (a b mul) for") == [2, 12]


def test_for_destructure_mismatch(run):
    with pytest.raises(StackTypeError, match="cannot destructure"):
        run("[[1 2 3]] (a b) (a) for")


def test_for_binding_does_not_leak(run):
    with pytest.raises(UnboundNameError):
        run("[1] (x) () for x")


def test_for_over_empty_list(run, output):
    assert run('[] (x) ("never" print) for') == []
    assert output.getvalue() == ""


# -------------------------------
# repeat
# -------------------------------
def test_repeat_block(run, output):
    assert run('("hi" print) 3 repeat') == []
    assert output.getvalue() == "hi\nhi\nhi\n"


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(1) 0 repeat", []),
        ("(1) 2.7 repeat", [1, 1]),
        ("0 (1 add) 4 repeat", [4]),
        ('"ab" 3 repeat', ["ababab"]),
        ('"ab" 0 repeat', [""]),
        ('"1 2 add " 1 repeat eval', [3]),
        ('"1 " 3 repeat eval', [1, 1, 1]),
    ]
)
def test_repeat(run, source, expected):
    assert run(source) == expected


def test_repeat_zero_consumes_arguments(executor):
    executor.run("7 (99 print) 0 repeat")
    assert executor.stack == [7]


@pytest.mark.parametrize("source, error", [("(1) -1 repeat", StackRangeError), ("(1) true repeat", StackTypeError)])
def test_repeat_errors(run, source, error):
    with pytest.raises(error):
        run(source)


# -------------------------------
# map / filter / reduce
# -------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("[1 2 3] (x) (x x mul) map", [1, 4, 9]),
        ("[] (x) (x) map", []),
        ('"ab" (c) (c c concat) map', ["aa", "bb"]),
        ("[[1 2] [3 4]] (a b) (a b add) map", [3, 7]),
        ("[1 2 3 4] (x) (x 2 mod 0 equal) filter", [2, 4]),
        ("[1 2 3] (x) (false) filter", []),
        ("[1 2 3 4] 0 (acc x) (acc x add) reduce", 10),
        ("[] 5 (acc x) (acc x add) reduce", 5),
        ('["a" "b" "c"] "" (acc s) (acc s concat) reduce', "abc"),
        ("[1 2 3] [] (acc x) (acc x append) reduce", [1, 2, 3]),
    ]
)
def test_collection_forms(run, source, expected):
    assert run(source) == [expected]


def test_map_body_must_leave_value(run):
    with pytest.raises(StackUnderflowError, match="map: block left no value"):
        run("[1] (x) () map")


def test_filter_predicate_must_be_bool(run):
    with pytest.raises(StackTypeError):
        run("[1] (x) (x) filter")


def test_reduce_needs_two_names(run):
    with pytest.raises(StackTypeError):
        run("[1] 0 (a) (a) reduce")


# -------------------------------
# Scoping
# -------------------------------
def test_stored_block_sees_caller_locals(run):
    program = "(y 1 add) (f) var ((y) var f eval) (g) var 10 g eval"
    assert run(program) == [11]


def test_stored_block_outlives_callee_scope(run):
    with pytest.raises(UnboundNameError):
        run("(y) (f) var ((y) var) (g) var 10 g eval f eval")


def test_loop_variable_visible_to_called_word(run):
    assert run("(n n mul) (sq) var [2 3] (n) (sq eval) map") == [[4, 9]]


def test_inner_var_shadows_outer(run):
    assert run("1 (x) var (2 (x) var x) eval x") == [2, 1]


def test_assign_reaches_outer_scope(run):
    assert run("1 (x) var (2 (x) assign) eval x") == [2]


def test_recursive_word(run):
    # factorial via a word that calls itself
    program = """
        ((n) var (n 1 sub fact eval n mul) (1) n 1 greater if) (fact) var
        5 fact eval
    """
    assert run(program) == [120]


# -------------------------------
# Depth limit
# -------------------------------
FACT = "((n) var (n 1 sub fact eval n mul) (1) n 1 greater if) (fact) var"


def test_deep_recursion_within_default_limit(run):
    # each call nests two levels: the eval and the taken if branch
    assert run(f"{FACT} 100 fact eval") == [math.factorial(100)]
    assert run(f"{FACT} 200 fact eval")[-1] == math.factorial(200)


def test_runaway_recursion_hits_depth_limit(run):
    with pytest.raises(EvaluationDepthError, match="deeper than 500 levels"):
        run("(f eval) (f) var f eval")


def test_recursion_limit_is_restored(run):
    limit = sys.getrecursionlimit()
    run(f"{FACT} 50 fact eval")
    assert sys.getrecursionlimit() == limit
    with pytest.raises(EvaluationDepthError):
        run("(f eval) (f) var f eval")
    assert sys.getrecursionlimit() == limit


def test_depth_limit_is_configurable(output):
    shallow = Executor(output=output, config=ExecutorConfig(max_depth=3))
    assert shallow.run("(1) eval") == [1]
    with pytest.raises(EvaluationDepthError):
        shallow.run("(((1) eval) eval) eval")


def test_depth_counter_resets_after_error(output):
    shallow = Executor(output=output, config=ExecutorConfig(max_depth=3))
    with pytest.raises(EvaluationDepthError):
        shallow.run("(((1) eval) eval) eval")
    assert shallow.depth == 0
    assert shallow.run("(2) eval") == [2]
