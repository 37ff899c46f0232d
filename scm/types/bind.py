from __future__ import annotations

from scm import LispValue, SExpression
from scm.errors import ScmArityError, ScmTypeError
from scm.types.environment import Environment
from scm.types.symbol import Symbol


def bind_arguments(
    params: SExpression,
    supplied_args: list[LispValue],
    closure_env: Environment,
) -> Environment:
    """
    Single source of truth for parameter binding.

    Supports two parameter patterns:
    - a single Symbol, bound to the whole argument list (variadic capture)
    - a list of Symbols, bound positionally; the argument count must match

    Returns a new Environment whose outer is `closure_env`, populated with
    the bindings for evaluating the callee body.
    """
    local_env = Environment(outer=closure_env)

    if isinstance(params, Symbol):
        local_env.define(params, list(supplied_args))
        return local_env

    if not isinstance(params, list):
        raise ScmTypeError(f"Malformed parameter list: {params!r}")

    if len(params) != len(supplied_args):
        raise ScmArityError(
            f"Expected {len(params)} argument(s) but got {len(supplied_args)}"
        )

    for name, value in zip(params, supplied_args):
        if not isinstance(name, Symbol):
            raise ScmTypeError(f"Parameter must be a symbol, got {name!r}")
        local_env.define(name, value)
    return local_env
