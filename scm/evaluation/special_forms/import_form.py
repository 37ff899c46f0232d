from __future__ import annotations

from scm import SExpression, SourceLoader
from scm.errors import ScmExpansionError
from scm.types.forms import Import


def import_form(items: list[SExpression], loader: SourceLoader) -> SExpression:
    """
    Usage:
        (import "path/to/file.scm")

    The file is read now, while expanding, but only parsed and evaluated when
    the evaluator reaches the Import node. Its top-level expression then runs
    in the importing environment as if it had been written in place.
    """
    if len(items) != 2:
        raise ScmExpansionError("wrong number of arguments to import")
    name = items[1]
    if not isinstance(name, str):
        raise ScmExpansionError("argument to import must be a string")
    return Import(loader(name), name)
