from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List, Optional


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_import_roots() -> List[Path]:
    """Directories searched, in order, for relative `import` names."""
    return paths_from_env('SCM_PATH', [Path.cwd()])


def get_prelude_path() -> Optional[Path]:
    """Source file evaluated when an Interpreter starts with prelude='auto'."""
    raw = os.environ.get('SCM_PRELUDE', '').strip()
    return Path(raw) if raw else None
