"""Textual rendering of scm values.

Lists render as `(a b c)`, numbers in `%g` form (six significant digits,
exponent notation for very large or small magnitudes), symbols verbatim, text
in double quotes and booleans as `true`/`false`. Define and Quote nodes render
as the source forms they came from. Anything without a rule gets an opaque
`#<...>` tag that cannot be confused with the other renderings.
"""

from __future__ import annotations

from io import StringIO

from scm import LispValue
from scm.types.closure import Closure
from scm.types.forms import Define, Quote
from scm.types.symbol import Symbol


def format_number(value: float | int) -> str:
    if isinstance(value, int):
        return str(value)
    return format(value, "g")


def _write(buffer: StringIO, obj: LispValue) -> None:
    if isinstance(obj, list):
        buffer.write("(")
        for i, item in enumerate(obj):
            if i:
                buffer.write(" ")
            _write(buffer, item)
        buffer.write(")")
    elif isinstance(obj, bool):
        buffer.write("true" if obj else "false")
    elif isinstance(obj, (int, float)):
        buffer.write(format_number(obj))
    elif isinstance(obj, Symbol):
        buffer.write(obj.id)
    elif isinstance(obj, str):
        buffer.write(f'"{obj}"')
    elif isinstance(obj, Define):
        buffer.write(f"(define {obj.name} ")
        _write(buffer, obj.value)
        buffer.write(")")
    elif isinstance(obj, Quote):
        buffer.write("(quote ")
        _write(buffer, obj.body)
        buffer.write(")")
    elif isinstance(obj, Closure):
        buffer.write(repr(obj))
    elif callable(obj):
        buffer.write(f"#<primitive {getattr(obj, '__name__', '?')}>")
    else:
        buffer.write(f"#<{type(obj).__name__.lower()}>")


def to_string(obj: LispValue) -> str:
    with StringIO() as buffer:
        _write(buffer, obj)
        return buffer.getvalue()
