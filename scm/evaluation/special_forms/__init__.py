"""Registry of special forms for the scm expander.

Maps keyword Symbols to handler functions that turn an already expanded list
into a typed syntax node. The expander consults this table after expanding a
list's elements; heads not found here make an ordinary application.
"""

from scm.types.symbol import Symbol
from scm.evaluation.special_forms.quote_form import quote_form
from scm.evaluation.special_forms.if_form import if_form
from scm.evaluation.special_forms.lambda_form import lambda_form
from scm.evaluation.special_forms.begin_form import begin_form
from scm.evaluation.special_forms.define_form import define_form
from scm.evaluation.special_forms.import_form import import_form
from scm.evaluation.special_forms.comparison_forms import comparison_form

QUOTE = Symbol("quote")

SPECIAL_FORMS = {
    QUOTE: quote_form,
    Symbol("if"): if_form,
    Symbol("lambda"): lambda_form,
    Symbol("begin"): begin_form,
    Symbol("define"): define_form,
    Symbol("import"): import_form,
}

# Not special forms: checked for arity, then applied like any other call.
ARITY_CHECKED = {
    Symbol("<"): comparison_form,
    Symbol(">"): comparison_form,
    Symbol("<="): comparison_form,
    Symbol(">="): comparison_form,
    Symbol("=="): comparison_form,
}
