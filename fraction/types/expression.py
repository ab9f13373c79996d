"""Expression tree consumed by the evaluator.

Nodes are frozen dataclasses and may be shared between evaluations. Operators
and operands of an Application may be given as bare values, which evaluate to
themselves exactly like an Atomic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

from fraction import FractionValue
from fraction.types.name import Name, as_name


class Expression:
    __slots__ = ()


@dataclass(frozen=True)
class Atomic(Expression):
    value: FractionValue

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Variable(Expression):
    name: Name

    def __post_init__(self):
        object.__setattr__(self, "name", as_name(self.name))

    def __str__(self):
        return str(self.name)


@dataclass(frozen=True)
class Application(Expression):
    operator: Any
    operands: Tuple[Any, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "operands", tuple(self.operands))

    def __str__(self):
        args = ", ".join(str(o) for o in self.operands)
        return f"{self.operator}({args})"


@dataclass(frozen=True)
class Lambda(Expression):
    """`(a, b, rest.) -> body`: evaluates to a Closure over the current env."""

    argnames: Tuple[Name, ...]
    body: Any
    variadic: bool = False

    def __post_init__(self):
        object.__setattr__(self, "argnames", tuple(as_name(n) for n in self.argnames))

    def __str__(self):
        names = [str(n) for n in self.argnames]
        if self.variadic and names:
            names[-1] += "."
        return f"({', '.join(names)}) -> {self.body}"
