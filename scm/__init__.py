# Core type aliases for the scm data model.
# Plain Python values represent both code (forms) and runtime values:
#   float/int -> Number, str -> Text, bool -> Boolean, list -> Sequence,
#   Symbol -> Symbol. Closures, primitives and the transient syntax forms
# (If, Quote, Define, Lambda, Begin, Import) live under scm.types.
#
# Naming guidance:
# - SExpression: raw reader output and expanded syntax nodes.
# - LispValue:  evaluated runtime values.
# Both aliases resolve to `Any`; they document intent rather than restrict.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (reader/expander side)
SExpression = LispValue

# Primitive procedure calling convention: fn(env, evaluated_args) -> value
Primitive = Callable[..., LispValue]

# Filesystem collaborator used by `import` expansion: name -> source text
SourceLoader = Callable[[str], str]
