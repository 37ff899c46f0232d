"""
  Reader: lexer and parser for scm source text.

- Streaming, lazy lexing
- Emits plain Python values (the untyped literal tree):

    - numbers -> float
    - "text" and [[multi-line text]] -> str (verbatim, no escapes)
    - true / false -> bool
    - symbols -> Symbol
    - lists -> Python list

Alternatives are tried in that order at each position and the first match
wins, taking the longest prefix it can. Nothing else has to follow a number
or boolean, so `1+` reads as `1` then `+`, and `trueish` as `true` then `ish`.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from scm import SExpression
from scm.errors import ScmSyntaxError
from scm.types.symbol import Symbol

SYMBOL_CHARS = r"A-Za-z0-9_\-+*/%~&|^!=<>?"

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<number>[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
    r'|(?P<string>"[^"]*")'
    r"|(?P<boolean>true|false)"
    r"|(?P<multi_string>\[\[.*?\]\])"
    rf"|(?P<symbol>[{SYMBOL_CHARS}]+)",
    re.DOTALL,
)

# whitespace and ; line comments
SKIP_RE = re.compile(r"(?:\s+|;[^\n]*)+")

Token = tuple[str, str, int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_text, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        skip = SKIP_RE.match(source, pos)
        if skip:
            pos = skip.end()
            if pos >= n:
                break
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise ScmSyntaxError(f"Unexpected character {source[pos]!r}", source[pos:], pos)
        yield m.lastgroup, m.group(m.lastgroup), pos
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterator[Token], source: str = ""):
        self.tokens = iter(token_iter)
        self.source = source
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def position(self) -> int:
        """Offset of the next unread token, or the end of the source."""
        tok = self.peek()
        return len(self.source) if tok is None else tok[2]

    def _error(self, message: str, pos: int) -> ScmSyntaxError:
        return ScmSyntaxError(message, self.source[pos:], pos)

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            return None
        tok_type, tok_val, pos = tok

        if tok_type == "number":
            return float(tok_val)

        if tok_type == "string":
            return tok_val[1:-1]

        if tok_type == "boolean":
            return tok_val == "true"

        if tok_type == "multi_string":
            return tok_val[2:-2]

        if tok_type == "symbol":
            return Symbol(tok_val)

        if tok_type == "lparen":
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise self._error("Unmatched '('", pos)
                if nxt[0] == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        raise self._error("Unexpected ')'", pos)

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def read(source: str) -> SExpression:
    """Read exactly one value from `source`.

    Raises ScmSyntaxError on malformed input, empty input, or anything left
    over after the first value.
    """
    stream = TokenStream(lex(source), source)
    if stream.peek() is None:
        raise ScmSyntaxError("Expected a value", source, 0)
    expr = stream.parse_expr()
    if stream.peek() is not None:
        pos = stream.position()
        raise ScmSyntaxError("Unexpected trailing input", source[pos:], pos)
    return expr


def read_all(source: str) -> list[SExpression]:
    """Read every top-level value in `source`."""
    return list(TokenStream(lex(source), source).parse_all())
