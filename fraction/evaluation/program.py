"""Statement-level execution for Fraction programs.

A program is a sequence of statements. An Assignment evaluates its expression
and continues in a child frame binding the name; earlier frames are never
modified, so closures created before an assignment do not observe it. Any
other statement is an expression evaluated for its value.
"""

from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Optional

from fraction import FractionValue
from fraction.evaluation.evaluator import evaluate
from fraction.types.environment import Environment
from fraction.types.statement import Assignment

logger = logging.getLogger(__name__)


class ProgramResult(NamedTuple):
    value: Optional[FractionValue]
    env: Environment


def execute(program: Iterable, env: Environment) -> ProgramResult:
    """Run every statement of `program` starting from `env`."""
    value: Optional[FractionValue] = None
    for statement in program:
        match statement:
            case Assignment(name=name, expression=expression):
                bound = evaluate(expression, env)
                env = env.extend([(name, bound)])
                logger.debug("assigned %s", name)
            case _:
                value = evaluate(statement, env)
    return ProgramResult(value, env)
