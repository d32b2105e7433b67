class StackError(Exception):
    """ Base class for all stacklang errors"""
    pass

class LexError(StackError):
    """ Raised when the source text cannot be split into tokens"""

    def __init__(self, message: str, pos: int | None = None):
        super().__init__(message if pos is None else f"{message} at {pos}")
        self.pos = pos

class ParseError(StackError):
    """ Raised when brackets are unbalanced or mismatched"""

class StackUnderflowError(StackError):
    """ Raised when a command needs more values than the stack holds"""

class StackTypeError(StackError):
    """ Raised when a command receives a value of the wrong kind"""

class UnboundNameError(StackError):
    """ Raised when an identifier is neither a builtin nor a bound name"""

class StackRangeError(StackError):
    """ Raised when a numeric argument is out of its valid range"""

class EvaluationDepthError(StackError):
    """ Raised when blocks nest deeper than the configured limit"""
