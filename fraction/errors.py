from __future__ import annotations


class FractionError(Exception):
    """ Base class for all Fraction errors"""
    pass


class FractionConfigError(FractionError):
    """ Raised when a FRACTION_* environment variable cannot be parsed"""


class FractionRuntimeError(FractionError):
    """ Base class for errors raised while evaluating an expression"""


class UndefinedVariable(FractionRuntimeError):
    """ Raised when a name is not bound anywhere in the environment chain"""

    def __init__(self, name):
        super().__init__(f"Undefined variable {name}")
        self.name = name


class IncorrectNumberOfArgs(FractionRuntimeError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Expected {expected} argument(s), got {actual}")
        self.expected = expected
        self.actual = actual


class CannotCallValue(FractionRuntimeError):
    """ Raised when the operator of an application is not a function"""

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description


class FractionTypeError(FractionRuntimeError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description


class FractionStackOverflow(FractionRuntimeError):
    """ Raised when evaluation nests deeper than the configured or host limit"""

    def __init__(self, depth: int | None):
        if depth is None:
            message = "Stack overflow: host recursion limit exceeded"
        else:
            message = f"Stack overflow: evaluation depth exceeded {depth}"
        super().__init__(message)
        self.depth = depth
