from __future__ import annotations

from fraction.types.plist import PList


class Glyph:
    """A single character. Strings are PLists of glyphs."""

    __slots__ = ("char",)

    def __init__(self, char: str):
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Glyph expects exactly one character, got {char!r}")
        object.__setattr__(self, "char", char)

    def __setattr__(self, key, value):
        raise AttributeError("Glyph is immutable")

    def __eq__(self, other) -> bool:
        return isinstance(other, Glyph) and self.char == other.char

    def __hash__(self) -> int:
        return hash(("Glyph", self.char))

    def __str__(self):
        return f"'{self.char}"

    def __repr__(self):
        return f"Glyph({self.char!r})"


def make_string(text: str) -> PList:
    return PList(Glyph(c) for c in text)
