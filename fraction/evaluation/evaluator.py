"""Core evaluator for the Fraction language.

`evaluate` reduces an Expression in an Environment to a value by structural
recursion. Evaluation errors propagate as FractionRuntimeError subclasses;
running out of stack, either the configured FRACTION_MAX_DEPTH or the host
interpreter's recursion limit, surfaces as FractionStackOverflow.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from fraction import FractionValue
from fraction.config import get_max_depth
from fraction.errors import FractionStackOverflow
from fraction.evaluation.apply import apply, apply_callable, ensure_callable
from fraction.types.closure import Closure
from fraction.types.environment import Environment
from fraction.types.expression import Application, Atomic, Expression, Lambda, Variable

logger = logging.getLogger(__name__)


def _guarded(step: Callable[..., FractionValue], *args) -> FractionValue:
    max_depth = get_max_depth()
    try:
        return step(*args, 0, max_depth)
    except RecursionError:
        logger.warning("host recursion limit hit during evaluation")
        raise FractionStackOverflow(None) from None


def evaluate(expr, env: Environment) -> FractionValue:
    """
    Evaluate `expr` in `env` and return its value.
    """
    return _guarded(evaluate0, expr, env)


def invoke(head, args: Sequence[FractionValue]) -> FractionValue:
    """Call a Closure or Builtin with already-evaluated arguments."""
    return _guarded(_invoke0, head, tuple(args))


def _invoke0(head, args, depth, max_depth):
    return apply(head, args, evaluate0, depth, max_depth)


def evaluate0(
    expr,
    env: Environment,
    depth: int = 0,
    max_depth: Optional[int] = None,
) -> FractionValue:
    """
    Core evaluator: one level of structural recursion.
    """
    if max_depth is not None and depth > max_depth:
        logger.warning("evaluation depth limit %d exceeded", max_depth)
        raise FractionStackOverflow(max_depth)

    match expr:
        case Atomic(value=value):
            return value

        case Variable(name=name):
            return env.lookup(name)

        case Lambda(argnames=argnames, body=body, variadic=variadic):
            return Closure(env, body, argnames, variadic)

        case Application(operator=operator, operands=operands):
            head = ensure_callable(evaluate0(operator, env, depth + 1, max_depth))
            # Left to right in the caller's env; the first failure propagates.
            args = [evaluate0(arg, env, depth + 1, max_depth) for arg in operands]
            return apply_callable(head, args, evaluate0, depth, max_depth)

        case Expression():
            raise TypeError(f"Unknown expression node {expr!r}")

    # --- Bare values evaluate to themselves ---
    return expr
