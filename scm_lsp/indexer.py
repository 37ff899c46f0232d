from __future__ import annotations

"""
Static indexer for scm source buffers. Nothing is evaluated and imports are
never read.

From the token stream we collect:
- definitions: (define name value) and (define name params body), with the
  kind guessed from the shape ("function" for lambdas and the shorthand form)
- imports: (import "path")
- the parenthesis balance

`check_document` runs the real reader and expander over each top-level form
to find syntax and expansion errors; it stops at the first syntax error
because the reader cannot resynchronise after one.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from scm.errors import ScmError, ScmSyntaxError
from scm.evaluation.expander import expand
from scm.reader.parser import TokenStream, lex


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class ImportRef:
    path: str
    line: int
    col: int


@dataclass
class Problem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    imports: List[ImportRef] = field(default_factory=list)
    paren_balance: int = 0
    lex_error: ScmSyntaxError | None = None


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _tokens(text: str, idx: DocumentIndex) -> list[tuple[str, str, int]]:
    tokens = []
    try:
        for tok in lex(text):
            tokens.append(tok)
    except ScmSyntaxError as ex:
        idx.lex_error = ex
    return tokens


def _element_starts(tokens: list, open_index: int) -> list[int]:
    """Token indices where each element of the list opened at `open_index` starts."""
    starts = []
    depth = 0
    for j in range(open_index + 1, len(tokens)):
        kind = tokens[j][0]
        if depth == 0:
            if kind == "rparen":
                break
            starts.append(j)
        if kind == "lparen":
            depth += 1
        elif kind == "rparen":
            depth -= 1
    return starts


def _define_kind(tokens: list, starts: list[int]) -> str:
    if len(starts) == 4:
        return "function"
    if len(starts) == 3:
        j = starts[2]
        if tokens[j][0] == "lparen" and j + 1 < len(tokens) and tokens[j + 1][1] == "lambda":
            return "function"
    return "var"


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = _tokens(text, idx)

    for i, (kind, value, _) in enumerate(tokens):
        if kind == "rparen":
            idx.paren_balance -= 1
            continue
        if kind != "lparen":
            continue
        idx.paren_balance += 1

        starts = _element_starts(tokens, i)
        if len(starts) < 2:
            continue
        head = tokens[starts[0]]
        target = tokens[starts[1]]
        if head[0] != "symbol":
            continue
        if head[1] == "define" and target[0] == "symbol":
            line, col = _position_from_offset(text, target[2])
            idx.symbols[target[1]] = SymbolDef(
                name=target[1], kind=_define_kind(tokens, starts), line=line, col=col
            )
        elif head[1] == "import" and target[0] in ("string", "multi_string"):
            line, col = _position_from_offset(text, target[2])
            path = target[1][1:-1] if target[0] == "string" else target[1][2:-2]
            idx.imports.append(ImportRef(path=path, line=line, col=col))

    return idx


def _no_import(_: str) -> str:
    return ""


def check_document(text: str) -> List[Problem]:
    """Syntax and expansion problems, one per failing top-level form."""
    problems: List[Problem] = []
    stream = TokenStream(lex(text), text)
    while True:
        try:
            if stream.peek() is None:
                break
            start = stream.position()
            raw = stream.parse_expr()
        except ScmSyntaxError as ex:
            line, col = _position_from_offset(text, ex.position)
            problems.append(Problem(str(ex), line, col))
            break
        try:
            expand(raw, loader=_no_import)
        except ScmError as ex:
            line, col = _position_from_offset(text, start)
            problems.append(Problem(str(ex), line, col))
    return problems


# Signatures of primitives and special forms for hover/signature help
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "(+ x nums...)",
    "-": "(- x nums...)",
    "*": "(* x nums...)",
    "/": "(/ x nums...)",
    "<": "(< a b)",
    ">": "(> a b)",
    "<=": "(<= a b)",
    ">=": "(>= a b)",
    "=": "(= a b)",
    "car": "(car xs)",
    "cdr": "(cdr xs)",
    "list": "(list xs...)",
    "length": "(length xs)",
    "pi": "pi",
}

SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "quote": "(quote datum)",
    "if": "(if test consequent alternate)",
    "lambda": "(lambda params body)",
    "begin": "(begin expr exprs...)",
    "define": "(define name value) | (define name params body)",
    "import": "(import \"file\")",
}
