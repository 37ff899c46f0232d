"""Form expander: turns the reader's literal tree into typed syntax nodes.

Expansion is a single bottom-up pass. The elements of a list are expanded
first, then the list is classified by its head: a keyword from SPECIAL_FORMS
produces the matching form node, anything else stays a plain list and is
applied by the evaluator. Shape errors surface here, before evaluation.
"""

from __future__ import annotations

from scm import SExpression, SourceLoader
from scm.modules.loader import read_source
from scm.reader.parser import read
from scm.types.symbol import Symbol
from scm.evaluation.special_forms import SPECIAL_FORMS, ARITY_CHECKED, QUOTE


def expand(expr: SExpression, loader: SourceLoader | None = None) -> SExpression:
    """Expand a raw tree. `loader` reads imported files (defaults to read_source)."""
    if loader is None:
        loader = read_source

    if not isinstance(expr, list) or not expr:
        return expr

    # quote keeps its datum raw, so check before touching the elements
    if isinstance(expr[0], Symbol) and expr[0] == QUOTE:
        return SPECIAL_FORMS[QUOTE](expr, loader)

    items = [expand(e, loader) for e in expr]
    head = items[0]
    if isinstance(head, Symbol):
        handler = SPECIAL_FORMS.get(head) or ARITY_CHECKED.get(head)
        if handler is not None:
            return handler(items, loader)
    return items


def parse(source: str, loader: SourceLoader | None = None) -> SExpression:
    """Read one value from `source` and expand it."""
    return expand(read(source), loader)
