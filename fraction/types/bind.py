from __future__ import annotations

import logging
from typing import Sequence

from fraction import FractionValue
from fraction.errors import IncorrectNumberOfArgs
from fraction.types.environment import Environment
from fraction.types.name import Name
from fraction.types.plist import PList

logger = logging.getLogger(__name__)


def check_arity(expected: int, actual: int, variadic: bool = False) -> None:
    """Raise IncorrectNumberOfArgs unless `actual` satisfies `expected`.

    Variadic callables accept any count of at least `expected`.
    """
    if actual < expected or (actual > expected and not variadic):
        raise IncorrectNumberOfArgs(expected, actual)


def bind_arguments(
    argnames: Sequence[Name],
    variadic: bool,
    supplied_args: Sequence[FractionValue],
    closure_env: Environment,
) -> Environment:
    """
    Single source of truth for closure parameter binding.

    - Positional parameters bind one argument each, in order.
    - A variadic closure binds its last name to a PList of every argument from
      that position on. The arity check requires at least one argument per
      name, so the rest list is never empty.
    - A variadic closure with no names accepts and ignores any arguments.

    Returns a new Environment whose parent is `closure_env`.
    """
    supplied = tuple(supplied_args)
    n = len(argnames)
    check_arity(n, len(supplied), variadic)

    if variadic and n:
        bindings = list(zip(argnames[:-1], supplied[: n - 1]))
        bindings.append((argnames[-1], PList(supplied[n - 1 :])))
    else:
        bindings = list(zip(argnames, supplied))

    logger.debug("binding %d argument(s) to %s", len(supplied), argnames)
    return closure_env.extend(bindings)
