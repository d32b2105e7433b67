"""Registry of builtin commands for the stacklang executor.

Maps command names to Builtin descriptors. The executor consults this table
before the environment, so a builtin name always refers to the builtin.
Parameters are listed in push order: for `sub`, the first NUMBER is the value
pushed first (the minuend).
"""

from stacklang.builtin import arithmetic, lists, stack_ops, strings
from stacklang.builtin.registry import (
    Builtin,
    ANY,
    NUMBER,
    STRING,
    BOOL,
    LIST,
    NONEMPTY_LIST,
    SEQUENCE,
    CODE,
    EVALUABLE,
    NAME,
    NAMES,
    NAME_PAIR,
    COUNT,
)
from stacklang.evaluation import control_forms

_TABLE = [
    # Arithmetic
    Builtin("add", (NUMBER, NUMBER), 1, arithmetic.add),
    Builtin("sub", (NUMBER, NUMBER), 1, arithmetic.sub),
    Builtin("mul", (NUMBER, NUMBER), 1, arithmetic.mul),
    Builtin("div", (NUMBER, NUMBER), 1, arithmetic.div),
    Builtin("mod", (NUMBER, NUMBER), 1, arithmetic.mod),
    Builtin("pow", (NUMBER, NUMBER), 1, arithmetic.power),
    Builtin("round", (NUMBER,), 1, arithmetic.round_half_away),
    Builtin("sin", (NUMBER,), 1, arithmetic.sin),
    Builtin("cos", (NUMBER,), 1, arithmetic.cos),
    Builtin("tan", (NUMBER,), 1, arithmetic.tan),
    # Comparison
    Builtin("equal", (ANY, ANY), 1, arithmetic.equal),
    Builtin("less", (ANY, ANY), 1, arithmetic.less),
    Builtin("greater", (ANY, ANY), 1, arithmetic.greater),
    # Logic
    Builtin("and", (BOOL, BOOL), 1, arithmetic.logical_and),
    Builtin("or", (BOOL, BOOL), 1, arithmetic.logical_or),
    Builtin("not", (BOOL,), 1, arithmetic.logical_not),
    # Strings
    Builtin("concat", (SEQUENCE, SEQUENCE), 1, strings.concat),
    Builtin("decode", (NUMBER,), 1, strings.decode),
    Builtin("encode", (STRING,), 1, strings.encode),
    Builtin("replace", (STRING, STRING, STRING), 1, strings.replace),
    Builtin("split", (STRING, STRING), 1, strings.split),
    Builtin("case", (STRING, STRING), 1, strings.case),
    Builtin("join", (LIST, STRING), 1, strings.join),
    Builtin("find", (STRING, STRING), 1, strings.find),
    Builtin("regex", (STRING, STRING), 1, strings.regex),
    Builtin("only-number", (STRING,), 1, strings.only_number),
    # Lists
    Builtin("len", (SEQUENCE,), 1, lists.length),
    Builtin("head", (SEQUENCE,), 1, lists.head),
    Builtin("tail", (SEQUENCE,), 1, lists.tail),
    Builtin("get", (SEQUENCE, NUMBER), 1, lists.get),
    Builtin("set", (LIST, NUMBER, ANY), 1, lists.set_item),
    Builtin("del", (LIST, NUMBER), 1, lists.delete),
    Builtin("append", (LIST, ANY), 1, lists.append),
    Builtin("insert", (LIST, NUMBER, ANY), 1, lists.insert),
    Builtin("index", (LIST, ANY), 1, lists.index_of),
    Builtin("sort", (LIST,), 1, lists.sort),
    Builtin("reverse", (SEQUENCE,), 1, lists.reverse),
    Builtin("range", (NUMBER, NUMBER, NUMBER), 1, lists.range_list),
    Builtin("rand", (NONEMPTY_LIST,), 1, lists.rand, contextual=True),
    Builtin("shuffle", (LIST,), 1, lists.shuffle, contextual=True),
    # Stack
    Builtin("pop", (ANY,), 0, stack_ops.pop),
    Builtin("copy", (ANY,), 2, stack_ops.copy),
    Builtin("swap", (ANY, ANY), 2, stack_ops.swap),
    Builtin("size-stack", (), 1, stack_ops.size_stack, contextual=True),
    Builtin("get-stack", (), 1, stack_ops.get_stack, contextual=True),
    # Names and types
    Builtin("var", (ANY, NAME), 0, stack_ops.var, contextual=True),
    Builtin("assign", (ANY, NAME), 0, stack_ops.assign, contextual=True),
    Builtin("free", (NAME,), 0, stack_ops.free, contextual=True),
    Builtin("mem", (), 1, stack_ops.mem, contextual=True),
    Builtin("type", (ANY,), 1, stack_ops.type_name),
    Builtin("cast", (ANY, STRING), 1, stack_ops.cast),
    # Output
    Builtin("print", (ANY,), 0, stack_ops.print_value, contextual=True),
    # Control
    Builtin("eval", (EVALUABLE,), 0, control_forms.eval_form, contextual=True),
    Builtin("if", (CODE, CODE, BOOL), 0, control_forms.if_form, contextual=True),
    Builtin("while", (CODE, CODE), 0, control_forms.while_form, contextual=True),
    Builtin("for", (SEQUENCE, NAMES, CODE), 0, control_forms.for_form, contextual=True),
    Builtin("repeat", (EVALUABLE, COUNT), 0, control_forms.repeat_form, contextual=True),
    Builtin("map", (SEQUENCE, NAMES, CODE), 1, control_forms.map_form, contextual=True),
    Builtin("filter", (SEQUENCE, NAMES, CODE), 1, control_forms.filter_form, contextual=True),
    Builtin("reduce", (SEQUENCE, ANY, NAME_PAIR, CODE), 1, control_forms.reduce_form, contextual=True),
]

BUILTINS: dict[str, Builtin] = {b.name: b for b in _TABLE}
