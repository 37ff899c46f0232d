"""Typed syntax nodes produced by the expander.

These only ever appear as the node being evaluated. Evaluating a Quote yields
its body and evaluating a Lambda yields a Closure; none of the other forms is
ever a result.
"""

from __future__ import annotations

from dataclasses import dataclass

from scm import SExpression
from scm.types.symbol import Symbol


@dataclass(frozen=True)
class Quote:
    body: SExpression


@dataclass(frozen=True)
class If:
    test: SExpression
    consequent: SExpression
    alternate: SExpression


@dataclass(frozen=True)
class Lambda:
    params: SExpression
    body: SExpression


@dataclass(frozen=True)
class Define:
    name: Symbol
    value: SExpression


@dataclass(frozen=True)
class Begin:
    exprs: tuple[SExpression, ...]


@dataclass(frozen=True)
class Import:
    # source text is read at expansion time; `path` is kept for diagnostics
    source: str
    path: str = ""
