from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from scm import LispValue
from scm.builtins import register
from scm.config import get_prelude_path
from scm.evaluation.evaluator import evaluate
from scm.evaluation.expander import expand, parse
from scm.printer import to_string
from scm.reader.parser import read_all
from scm.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A read-eval-print session. Keeps one global Environment alive so
    definitions persist across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude == 'auto':
            path = get_prelude_path()
            if path is not None:
                try:
                    self.eval_file(path)
                except FileNotFoundError:
                    # Be permissive: a missing prelude is not fatal
                    logger.warning("prelude %s not found, continuing without it", path)
        elif prelude:
            self.eval_all(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate exactly one value; trailing input is a syntax error."""
        expr = parse(code)
        logger.debug("eval %s", code)
        return evaluate(expr, self.env)

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every top-level value in `code`, in order."""
        return [evaluate(expand(raw), self.env) for raw in read_all(code)]

    def eval_file(self, path: str | Path) -> list[LispValue]:
        logger.debug("loading %s", path)
        return self.eval_all(Path(path).read_text(encoding='utf-8'))

    def rep(self, code: str) -> str:
        """Read, evaluate and render one value."""
        return to_string(self.eval(code))
