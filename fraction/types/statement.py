from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from fraction.types.expression import Lambda
from fraction.types.name import Name, as_name


@dataclass(frozen=True)
class Assignment:
    """`name = expression`. Later statements see `name` in a new frame."""

    name: Name
    expression: Any

    def __post_init__(self):
        object.__setattr__(self, "name", as_name(self.name))

    def __str__(self):
        return f"{self.name} = {self.expression}"


def function_assignment(
    name: Name | str, argnames: Iterable[Name | str], body: Any, variadic: bool = False
) -> Assignment:
    """`f(a, b) = body` is an Assignment of a Lambda."""
    return Assignment(name, Lambda(tuple(argnames), body, variadic))
