"""Closure representation: a procedure value created by evaluating `lambda`."""

from __future__ import annotations

from scm import SExpression, LispValue
from scm.types.environment import Environment
from scm.types.bind import bind_arguments


class Closure:
    """A first-class procedure with a parameter pattern, body, and captured env.

    The environment is held by reference: closures created in the same frame
    share it, and later defines in that frame are visible to all of them.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        self.params: SExpression = params
        self.body: SExpression = body
        self.env: Environment = env

    def __repr__(self) -> str:
        from scm.printer import to_string

        return f"#<closure {to_string(self.params)}>"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind evaluated `args` to the parameters in a fresh child of the captured env."""
        return bind_arguments(self.params, args, self.env)
