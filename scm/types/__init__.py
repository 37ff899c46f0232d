from scm.types.symbol import Symbol
from scm.types.environment import Environment
from scm.types.closure import Closure
from scm.types.forms import Begin, Define, If, Import, Lambda, Quote

__all__ = [
    "Begin",
    "Closure",
    "Define",
    "Environment",
    "If",
    "Import",
    "Lambda",
    "Quote",
    "Symbol",
]
