from scm import SExpression, SourceLoader
from scm.errors import ScmExpansionError
from scm.types.forms import Quote


def quote_form(items: list[SExpression], _: SourceLoader) -> SExpression:
    """
    (quote datum)
    The datum is kept exactly as read: it is never expanded, so quoted data
    may contain anything, including malformed special forms.
    """
    if len(items) != 2:
        raise ScmExpansionError("wrong number of arguments to quote")
    return Quote(items[1])
