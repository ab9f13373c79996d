"""Closure representation for Fraction."""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Sequence

from fraction import FractionValue
from fraction.types.environment import Environment
from fraction.types.name import Name, as_name


class Closure:
    """A user-defined function: parameter names, body, and defining env.

    When `variadic` is set the last name in `argnames` is the rest parameter,
    written `rest.` in source.
    """

    __slots__ = ("env", "body", "argnames", "variadic")

    def __init__(
        self,
        env: Environment,
        body,
        argnames: Iterable[Name | str],
        variadic: bool = False,
    ):
        object.__setattr__(self, "env", env)
        object.__setattr__(self, "body", body)
        object.__setattr__(self, "argnames", tuple(as_name(n) for n in argnames))
        object.__setattr__(self, "variadic", bool(variadic))

    def __setattr__(self, key, value):
        raise AttributeError("Closure is immutable")

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            names = [str(n) for n in self.argnames]
            if self.variadic and names:
                names[-1] += "."
            buffer.write(", ".join(names))
            buffer.write(") -> ")
            buffer.write(str(self.body))
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self}>"

    # --- Evaluation helpers ---
    def extend_env(self, args: Sequence[FractionValue]) -> Environment:
        """
        Check arity, bind `args` to this closure's parameters and return the
        frame its body runs in. The frame's parent is the captured env, never
        the caller's.
        """
        from fraction.types.bind import bind_arguments
        return bind_arguments(self.argnames, self.variadic, args, self.env)

    def invoke(self, args: Sequence[FractionValue]) -> FractionValue:
        """Call this closure with already-evaluated arguments."""
        from fraction.evaluation.evaluator import invoke
        return invoke(self, args)
