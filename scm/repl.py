"""Console read-eval-print loop.

    scm [--verbose] [-e EXPR]... [FILE]...

Files are loaded first (every top-level form), then each -e expression is
evaluated and printed. Without -e an interactive `> ` prompt follows. Errors
are reported on stderr and never end the session.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from scm.errors import ScmError
from scm.interpreter import Interpreter

logger = logging.getLogger(__name__)

PROMPT = "> "


def _report(ex: BaseException, err: TextIO) -> None:
    logger.debug("evaluation failed", exc_info=ex)
    print(f"error: {ex}", file=err)


def run_loop(interp: Interpreter, stdin: TextIO, out: TextIO, err: TextIO) -> None:
    while True:
        out.write(PROMPT)
        out.flush()
        line = stdin.readline()
        if not line:
            out.write("\n")
            break
        if not line.strip():
            continue
        try:
            print(interp.rep(line), file=out)
        except (ScmError, RecursionError) as ex:
            _report(ex, err)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="scm", description="Scheme-like interpreter")
    parser.add_argument("files", nargs="*", help="source files to load before the prompt")
    parser.add_argument("-e", "--eval", dest="exprs", action="append", default=[],
                        metavar="EXPR", help="evaluate EXPR, print the result and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    interp = Interpreter()
    status = 0
    for path in args.files:
        try:
            interp.eval_file(path)
        except (ScmError, OSError, RecursionError) as ex:
            _report(ex, sys.stderr)
            status = 1

    for expr in args.exprs:
        try:
            print(interp.rep(expr))
        except (ScmError, RecursionError) as ex:
            _report(ex, sys.stderr)
            status = 1

    if not args.exprs:
        run_loop(interp, sys.stdin, sys.stdout, sys.stderr)
    return status


if __name__ == "__main__":
    sys.exit(main())
