"""Core evaluator and trampoline for the scm interpreter.

`evaluate` is a single loop over the current (node, env) pair. Tail positions
(the chosen if-branch, the last expression of begin, the body of an applied
closure, and the parsed contents of an import) replace that pair and go round
the loop again instead of recursing, so tail calls run in constant Python
stack. Everything else (if tests, non-final begin expressions, define values,
operator and operands) is evaluated with an ordinary recursive call.
"""

from __future__ import annotations

from scm import SExpression, LispValue
from scm.errors import ScmNotCallable, ScmTypeError
from scm.evaluation.expander import parse
from scm.printer import to_string
from scm.types.closure import Closure
from scm.types.environment import Environment
from scm.types.forms import Begin, Define, If, Import, Lambda, Quote
from scm.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    while True:
        match expr:
            case bool() | int() | float() | str():
                return expr

            case Symbol():
                return env.lookup(expr)

            case Define(name, value):
                return env.define(name, evaluate(value, env))

            case Lambda(params, body):
                return Closure(params, body, env)

            case Quote(body):
                return body

            case Import(source):
                expr = parse(source)

            case If(test, consequent, alternate):
                cond = evaluate(test, env)
                if not isinstance(cond, bool):
                    raise ScmTypeError(f"if test must be a boolean, got {to_string(cond)}")
                expr = consequent if cond else alternate

            case Begin(exprs):
                for e in exprs[:-1]:
                    evaluate(e, env)
                expr = exprs[-1]

            case []:
                raise ScmNotCallable("cannot apply an empty list")

            case list():
                # Operator and operands, strictly left to right.
                values = [evaluate(e, env) for e in expr]
                fn, args = values[0], values[1:]
                if isinstance(fn, Closure):
                    env = fn.extend_env(args)
                    expr = fn.body
                elif callable(fn):
                    return fn(env, args)
                else:
                    raise ScmNotCallable(f"undefined function: {to_string(fn)}")

            case _:
                # Already a runtime value (closure, primitive)
                return expr
