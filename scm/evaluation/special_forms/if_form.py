from scm import SExpression, SourceLoader
from scm.errors import ScmExpansionError
from scm.types.forms import If


def if_form(items: list[SExpression], _: SourceLoader) -> SExpression:
    if len(items) != 4:
        raise ScmExpansionError("wrong number of arguments to if")
    _, test, consequent, alternate = items
    return If(test, consequent, alternate)
