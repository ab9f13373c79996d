# Core type aliases for the Fraction evaluator.
#
# Runtime values are a closed family of classes (Integer, Float, Glyph, PList,
# Closure, Builtin) defined under fraction.types. The aliases below are used in
# annotations across the evaluator and builtin modules.

import logging
from typing import Any, Callable

# Runtime value alias
FractionValue = Any

# Native builtin procedure: receives the evaluated argument tuple
BuiltinFn = Callable[[tuple], FractionValue]

# Evaluator function type: (expr, env, depth, max_depth) -> value
EvaluatorFn = Callable[..., FractionValue]

logging.getLogger(__name__).addHandler(logging.NullHandler())
