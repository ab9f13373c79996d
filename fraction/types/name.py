from __future__ import annotations
import sys


class Name:
    __slots__ = ("id",)

    def __init__(self, name: str):
        if not isinstance(name, str):
            raise TypeError(f"Name expects a str, got {type(name).__name__}")
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "id", sys.intern(name))

    def __setattr__(self, key, value):
        raise AttributeError("Name is immutable")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Name) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Name({self.id!r})"

    def __str__(self):
        return self.id


def as_name(name: Name | str) -> Name:
    """Accept a plain str wherever a Name is expected."""
    return name if isinstance(name, Name) else Name(name)
