from scm import SExpression, SourceLoader
from scm.errors import ScmExpansionError


def comparison_form(items: list[SExpression], _: SourceLoader) -> SExpression:
    # Comparisons are ordinary primitives; this only rejects bad arity early.
    if len(items) != 3:
        raise ScmExpansionError(f"wrong number of arguments to {items[0]}")
    return items
