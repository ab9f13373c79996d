"""Built-in functions for the Fraction runtime environment.

This module defines the arithmetic builtins exposed to Fraction code, the
process-wide BUILTINS table, and the factory for root environments.
"""
from __future__ import annotations

import logging
from functools import reduce
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from fraction import BuiltinFn, FractionValue
from fraction.errors import FractionTypeError
from fraction.types.bind import check_arity
from fraction.types.builtin import Builtin
from fraction.types.environment import Environment
from fraction.types.name import Name, as_name
from fraction.types.number import Integer, Number

logger = logging.getLogger(__name__)


def _numbers(args: tuple, verb: str) -> tuple[Number, ...]:
    for arg in args:
        if not isinstance(arg, Number):
            raise FractionTypeError(f"Must {verb} numbers, got {arg}")
    return args


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: tuple[FractionValue, ...]) -> Number:
    """Left fold of + starting from Integer(0)."""
    return reduce(lambda acc, x: acc + x, _numbers(args, "add"), Integer(0))


def mul(args: tuple[FractionValue, ...]) -> Number:
    """Left fold of * starting from Integer(1)."""
    return reduce(lambda acc, x: acc * x, _numbers(args, "multiply"), Integer(1))


def negate(args: tuple[FractionValue, ...]) -> Number:
    check_arity(1, len(args))
    (n,) = _numbers(args, "negate")
    return -n


def sub(args: tuple[FractionValue, ...]) -> Number:
    """(a, b) => a + negate(b)."""
    check_arity(2, len(args))
    a, b = _numbers(args, "subtract")
    return add((a, negate((b,))))


def _builtin_table(functions: Mapping[str, BuiltinFn]) -> Mapping[Name, Builtin]:
    return MappingProxyType({Name(n): Builtin(n, f) for n, f in functions.items()})


# Initialised once at import; never mutated afterwards.
BUILTINS: Mapping[Name, Builtin] = _builtin_table({
    "add": add,
    "sub": sub,
    "mul": mul,
    "negate": negate,
})


def make_root_environment(
    extra: Optional[Mapping[Name | str, FractionValue] | Iterable[tuple[Name | str, FractionValue]]] = None,
) -> Environment:
    """Return a fresh root frame holding BUILTINS plus `extra` bindings.

    Extra bindings are applied after the builtins and win on conflict.
    """
    bindings: list[tuple[Name, FractionValue]] = list(BUILTINS.items())
    if extra is not None:
        items = extra.items() if isinstance(extra, Mapping) else extra
        bindings.extend((as_name(k), v) for k, v in items)
    logger.debug("root environment with %d binding(s)", len(bindings))
    return Environment(None, bindings)
