from scm import SExpression, SourceLoader
from scm.errors import ScmExpansionError
from scm.types.forms import Begin


def begin_form(items: list[SExpression], _: SourceLoader) -> SExpression:
    if len(items) < 2:
        raise ScmExpansionError("begin requires at least one expression")
    return Begin(tuple(items[1:]))
