"""Runtime environment for scm.

An Environment frame stores bindings of Symbols to evaluated values and links
to the frame it was created in via `outer`. Links only point outward, so the
chain is acyclic and frames live exactly as long as a closure or an active
evaluation still references them.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from scm import LispValue
from scm.errors import ScmInvalidSymbol, ScmUnboundSymbol
from scm.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this frame and return `value`.

        Never touches an outer frame, so a define inside a closure body shadows
        rather than overwrites. Raises ScmInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise ScmInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises ScmUnboundSymbol if no frame up to the root binds it.
        """
        env = self.find(name)
        if env is None:
            raise ScmUnboundSymbol(name)
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; the root frame is abbreviated."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            if env.outer is None:
                chain.append(f"<root: {len(env.vars)} bindings>")
            else:
                with StringIO() as buf:
                    env._write_vars(buf)
                    chain.append(buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
