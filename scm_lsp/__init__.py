"""scm Language Server and REPL integration package.

This package provides:
- A pygls-based Language Server for scm source files.
- A static indexer that scans documents for definitions and imports and
  reports reader/expander errors without evaluating anything.
- A simple TCP REPL server to evaluate code via the Interpreter.
"""

__all__ = [
    "server",
    "indexer",
    "repl_server",
]
