"""Runtime environment for Fraction.

An Environment is one write-once frame of Name -> value bindings plus a link to
its `parent`. Frames never point at their children, so the scope graph is a
tree and plain reference counting reclaims frames nobody can reach. New
bindings are introduced with `extend`, which returns a child frame.
"""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from fraction import FractionValue
from fraction.errors import UndefinedVariable
from fraction.types.name import Name, as_name


class Environment:
    """Hierarchical, immutable mapping from Names to Fraction values."""

    __slots__ = ("_vars", "parent", "depth")

    def __init__(
        self,
        parent: Optional[Environment] = None,
        bindings: Iterable[tuple[Name | str, FractionValue]] = (),
    ):
        frame: dict[Name, FractionValue] = {}
        # Later duplicates overwrite earlier ones
        for name, value in bindings:
            frame[as_name(name)] = value
        object.__setattr__(self, "_vars", frame)
        object.__setattr__(self, "parent", parent)
        object.__setattr__(self, "depth", 0 if parent is None else parent.depth + 1)

    def __setattr__(self, key, value):
        raise AttributeError("Environment frames are write-once")

    @property
    def mappings(self) -> Mapping[Name, FractionValue]:
        return MappingProxyType(self._vars)

    def extend(self, bindings: Iterable[tuple[Name | str, FractionValue]]) -> Environment:
        """Return a new child frame holding exactly `bindings`."""
        return Environment(self, bindings)

    def find(self, name: Name | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        name = as_name(name)
        env: Optional[Environment] = self
        while env is not None:
            if name in env._vars:
                return env
            env = env.parent
        return None

    def lookup(self, name: Name | str) -> FractionValue:
        """Look up the value bound to `name`, searching the parent chain.

        Raises UndefinedVariable if no frame binds it.
        """
        name = as_name(name)
        env = self.find(name)
        if env is None:
            raise UndefinedVariable(name)
        return env._vars[name]

    def root(self) -> Environment:
        env = self
        while env.parent is not None:
            env = env.parent
        return env

    def __contains__(self, name) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self._vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.parent
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
