# Core type aliases for stacklang's data model.
# Runtime values are plain Python types (int, float, str, bool, list) plus the
# Block and Empty types from stacklang.types. Identifiers are Symbols and only
# ever appear inside Blocks; they are never pushed onto the stack.
#
# Naming guidance:
# - StackItem:  Use in reader/parser code for anything a Block may contain
#               (values, Symbols and bracketed list expressions).
# - StackValue: Use in executor/builtin code for values living on the stack.

from typing import Any

# Runtime value alias
StackValue = Any
# Parsed item alias (superset of StackValue: adds Symbol and ListExpr)
StackItem = Any

__version__ = "1.11.0"
