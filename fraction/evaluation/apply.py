"""Application engine for Fraction.

This module centralizes function application semantics for the evaluator:
- Closures are checked for arity, bound in a frame whose parent is the
  closure's captured environment, and their body evaluated there.
- Builtins receive the evaluated argument tuple and do their own checking.
- Anything else cannot be called.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from fraction import EvaluatorFn, FractionValue
from fraction.errors import CannotCallValue
from fraction.types.builtin import Builtin
from fraction.types.closure import Closure
from fraction.types.glyph import Glyph
from fraction.types.number import Float, Integer
from fraction.types.plist import PList

logger = logging.getLogger(__name__)


def type_name(value: FractionValue) -> str:
    match value:
        case Integer():
            return "integer"
        case Float():
            return "float"
        case Glyph():
            return "glyph"
        case PList():
            return "string" if value.is_string() else "list"
        case Closure():
            return "function"
        case Builtin():
            return "builtin"
        case _:
            return type(value).__name__


def is_callable(value: FractionValue) -> bool:
    return isinstance(value, (Closure, Builtin))


def ensure_callable(value: FractionValue) -> Closure | Builtin:
    if not is_callable(value):
        raise CannotCallValue(f"Cannot call value of type {type_name(value)}: {value}")
    return value


def apply_closure(
    fn: Closure,
    args: Sequence[FractionValue],
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
    max_depth: Optional[int] = None,
) -> FractionValue:
    """Apply a Closure value to already-evaluated arguments.

    Parameters:
    - fn: The Closure being applied.
    - args: The evaluated argument values, in call order.
    - evaluate_fn: Evaluator used to run the body.
    - depth, max_depth: Current nesting depth and the configured limit.
    """
    new_env = fn.extend_env(args)
    logger.debug("invoking %s with %d argument(s)", fn, len(args))
    return evaluate_fn(fn.body, new_env, depth + 1, max_depth)


def apply(
    head: Closure | Builtin | object,
    args: Sequence[FractionValue],
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
    max_depth: Optional[int] = None,
) -> FractionValue:
    """Apply either a Closure or a Builtin.

    - For Closure, defer to apply_closure.
    - For Builtin, invoke with the tuple of evaluated args.
    - Otherwise, raise CannotCallValue.
    """
    return apply_callable(ensure_callable(head), args, evaluate_fn, depth, max_depth)


def apply_callable(
    head: Closure | Builtin,
    args: Sequence[FractionValue],
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
    max_depth: Optional[int] = None,
) -> FractionValue:
    """Dispatch on a head already known to be callable."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn, depth, max_depth)
    logger.debug("calling %s with %d argument(s)", head, len(args))
    return head(args)
