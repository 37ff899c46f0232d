from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from scm.config import get_import_roots
from scm.errors import ScmImportError

logger = logging.getLogger(__name__)


def resolve_source(name: str) -> Optional[Path]:
    """Map an import name to a file: absolute names as-is, relative ones under SCM_PATH."""
    path = Path(name)
    if path.is_absolute():
        return path if path.is_file() else None
    for root in get_import_roots():
        candidate = root / path
        if candidate.is_file():
            return candidate
    return None


def read_source(name: str) -> str:
    """Return the full text of the file an `import` names.

    Raises ScmImportError (chained to the OSError, if any) when the file
    cannot be found or read.
    """
    p = resolve_source(name)
    if p is None:
        raise ScmImportError(f"Cannot find import '{name}' in SCM_PATH")
    try:
        code = p.read_text(encoding='utf-8')
    except OSError as ex:
        raise ScmImportError(f"Cannot read import '{name}': {ex}") from ex
    logger.debug("import %r resolved to %s (%d chars)", name, p, len(code))
    return code
