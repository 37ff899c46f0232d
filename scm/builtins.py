from __future__ import annotations
import math
import operator
from typing import Any, Callable

from scm.errors import ScmArityError, ScmTypeError
from scm.types.environment import Environment
from scm.types.symbol import Symbol

# Every primitive takes (env, args) where args is the list of evaluated
# arguments. env is the caller's environment; none of these need it.


# -------------------------------
# Argument checks
# -------------------------------
def _number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ScmTypeError(f"{name} expects numbers, got {value!r}")
    return value


def _sequence(name: str, expr: list[Any]) -> list[Any]:
    if len(expr) != 1:
        raise ScmArityError(f"{name} requires exactly 1 argument")
    if not isinstance(expr[0], list):
        raise ScmTypeError(f"{name} expects a list, got {expr[0]!r}")
    return expr[0]


# -------------------------------
# Arithmetic
# -------------------------------
def _divide(a: float, b: float) -> float:
    # IEEE semantics rather than ZeroDivisionError
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _fold(name: str, op: Callable[[float, float], float]):
    """Left fold seeded with the first argument: (- 10 1 2) is (10 - 1) - 2."""
    def fold(env: Environment, expr: list[Any]) -> float:
        if not expr:
            raise ScmArityError(f"{name} requires at least 1 argument")
        result = _number(name, expr[0])
        for x in expr[1:]:
            result = op(result, _number(name, x))
        return result

    fold.__name__ = name
    return fold


add = _fold("+", operator.add)
sub = _fold("-", operator.sub)
mul = _fold("*", operator.mul)
div = _fold("/", _divide)


# -------------------------------
# Comparison
# -------------------------------
def _compare(name: str, op: Callable[[float, float], bool]):
    def compare(env: Environment, expr: list[Any]) -> bool:
        if len(expr) != 2:
            raise ScmArityError(f"{name} requires exactly 2 arguments")
        return op(_number(name, expr[0]), _number(name, expr[1]))

    compare.__name__ = name
    return compare


gt = _compare(">", operator.gt)
lt = _compare("<", operator.lt)
lte = _compare("<=", operator.le)
gte = _compare(">=", operator.ge)
num_eq = _compare("=", operator.eq)


# -------------------------------
# List operations
# -------------------------------
def car(env: Environment, expr: list[Any]) -> Any:
    seq = _sequence("car", expr)
    if not seq:
        raise ScmTypeError("car of an empty list")
    return seq[0]


def cdr(env: Environment, expr: list[Any]) -> list[Any]:
    seq = _sequence("cdr", expr)
    if not seq:
        raise ScmTypeError("cdr of an empty list")
    return seq[1:]


def list_builtin(env: Environment, expr: list[Any]) -> list[Any]:
    return list(expr)


def length(env: Environment, expr: list[Any]) -> float:
    return float(len(_sequence("length", expr)))


list_builtin.__name__ = "list"

# -------------------------------
# Registration
# -------------------------------
PRIMITIVES = {
    Symbol('+'): add,
    Symbol('-'): sub,
    Symbol('*'): mul,
    Symbol('/'): div,
    Symbol('>'): gt,
    Symbol('<'): lt,
    Symbol('<='): lte,
    Symbol('>='): gte,
    Symbol('='): num_eq,
    Symbol('car'): car,
    Symbol('cdr'): cdr,
    Symbol('list'): list_builtin,
    Symbol('length'): length,
}


def register(env: Environment) -> Environment:
    env.update({Symbol('pi'): math.pi, **PRIMITIVES})
    return env


def global_env() -> Environment:
    """A fresh root environment seeded with the constants and primitives."""
    return register(Environment())
