from scm import SExpression, SourceLoader
from scm.errors import ScmExpansionError
from scm.types.forms import Define, Lambda
from scm.types.symbol import Symbol


def define_form(items: list[SExpression], _: SourceLoader) -> SExpression:
    """
    (define name value)
    (define name params body)   ; shorthand for (define name (lambda params body))
    """
    if len(items) not in (3, 4):
        raise ScmExpansionError("wrong number of arguments to define")
    name = items[1]
    if not isinstance(name, Symbol):
        raise ScmExpansionError("first argument to define must be a symbol")
    if len(items) == 3:
        return Define(name, items[2])
    return Define(name, Lambda(items[2], items[3]))
