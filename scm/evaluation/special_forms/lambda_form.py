from scm import SExpression, SourceLoader
from scm.errors import ScmExpansionError
from scm.types.forms import Lambda


def lambda_form(items: list[SExpression], _: SourceLoader) -> SExpression:
    # (lambda params body): exactly one body expression, use begin for more.
    # The shape of params is checked when the closure is applied.
    if len(items) != 3:
        raise ScmExpansionError("wrong number of arguments to lambda")
    return Lambda(items[1], items[2])
