"""Persistent singly-linked list used for Fraction list values.

Every push_front shares the existing list as its tail, so lists built from a
common suffix share structure and copying a list into a new scope is O(1).
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from fraction import FractionValue


class PList:
    __slots__ = ("_head", "_tail", "_len")

    def __init__(self, items: Iterable[FractionValue] = ()):
        node = PList._nil()
        for item in reversed(list(items)):
            node = PList._cons(item, node)
        object.__setattr__(self, "_head", node._head)
        object.__setattr__(self, "_tail", node._tail)
        object.__setattr__(self, "_len", node._len)

    @classmethod
    def _nil(cls) -> PList:
        cell = object.__new__(cls)
        object.__setattr__(cell, "_head", None)
        object.__setattr__(cell, "_tail", None)
        object.__setattr__(cell, "_len", 0)
        return cell

    @classmethod
    def _cons(cls, head: FractionValue, tail: PList) -> PList:
        cell = object.__new__(cls)
        object.__setattr__(cell, "_head", head)
        object.__setattr__(cell, "_tail", tail)
        object.__setattr__(cell, "_len", tail._len + 1)
        return cell

    @classmethod
    def of(cls, *items: FractionValue) -> PList:
        return cls(items)

    def __setattr__(self, key, value):
        raise AttributeError("PList is immutable")

    def push_front(self, value: FractionValue) -> PList:
        return PList._cons(value, self)

    @property
    def first(self) -> FractionValue:
        if self._len == 0:
            raise IndexError("first of empty list")
        return self._head

    @property
    def rest(self) -> PList:
        if self._len == 0:
            raise IndexError("rest of empty list")
        return self._tail

    def reverse(self) -> PList:
        out = EMPTY
        for item in self:
            out = out.push_front(item)
        return out

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[FractionValue]:
        node = self
        while node._len:
            yield node._head
            node = node._tail

    def __getitem__(self, index: int) -> FractionValue:
        if index < 0:
            index += self._len
        if not 0 <= index < self._len:
            raise IndexError("list index out of range")
        node = self
        for _ in range(index):
            node = node._tail
        return node._head

    def __eq__(self, other) -> bool:
        if not isinstance(other, PList):
            return False
        if self is other:
            return True
        if self._len != other._len:
            return False
        return all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(("PList", tuple(self)))

    def is_string(self) -> bool:
        from fraction.types.glyph import Glyph
        return self._len > 0 and all(isinstance(item, Glyph) for item in self)

    def __str__(self) -> str:
        if self.is_string():
            return '"' + "".join(item.char for item in self) + '"'
        with StringIO() as buffer:
            buffer.write("[")
            buffer.write(", ".join(str(item) for item in self))
            buffer.write("]")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"PList({list(self)!r})"


EMPTY = PList()
