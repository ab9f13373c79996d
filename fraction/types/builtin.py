from __future__ import annotations

from typing import Sequence

from fraction import BuiltinFn, FractionValue
from fraction.types.name import Name, as_name


class Builtin:
    """A native callable identified by name. It captures no environment."""

    __slots__ = ("name", "function")

    def __init__(self, name: Name | str, function: BuiltinFn):
        if not callable(function):
            raise TypeError(f"Builtin {name} needs a callable, got {function!r}")
        object.__setattr__(self, "name", as_name(name))
        object.__setattr__(self, "function", function)

    def __setattr__(self, key, value):
        raise AttributeError("Builtin is immutable")

    def __call__(self, args: Sequence[FractionValue]) -> FractionValue:
        return self.function(tuple(args))

    def __str__(self):
        return f"<builtin {self.name}>"

    def __repr__(self):
        return f"Builtin({str(self.name)!r})"
