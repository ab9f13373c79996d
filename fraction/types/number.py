"""Numeric tower for Fraction: exact integers and IEEE doubles.

Integer op Integer stays Integer (unbounded, backed by Python int). Any
operation involving a Float promotes the other operand and yields a Float.
"""

from __future__ import annotations

from fraction.errors import FractionTypeError


class Number:
    """Base of the two numeric kinds. Instances are immutable."""

    __slots__ = ("value",)

    def __init__(self, value):
        object.__setattr__(self, "value", value)

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def to_float(self) -> float:
        try:
            return float(self.value)
        except OverflowError:
            raise FractionTypeError(f"Integer {self.value} is too large to convert to a float") from None

    # --- Arithmetic ---
    def _combine(self, other, op):
        if not isinstance(other, Number):
            return NotImplemented
        if isinstance(self, Integer) and isinstance(other, Integer):
            return Integer(op(self.value, other.value))
        return Float(op(self.to_float(), other.to_float()))

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __neg__(self):
        return type(self)(-self.value)

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"{type(self).__name__}({self.value!r})"


class Integer(Number):
    __slots__ = ()

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Integer expects an int, got {type(value).__name__}")
        super().__init__(value)


class Float(Number):
    __slots__ = ()

    def __init__(self, value: float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Float expects a float, got {type(value).__name__}")
        super().__init__(float(value))
