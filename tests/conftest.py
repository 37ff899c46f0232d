import pytest

from scm.builtins import global_env
from scm.interpreter import Interpreter


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    # Tests never pick up a developer's import path or prelude.
    monkeypatch.delenv("SCM_PATH", raising=False)
    monkeypatch.delenv("SCM_PRELUDE", raising=False)


@pytest.fixture
def env():
    """A fresh global environment seeded with the primitives."""
    return global_env()


@pytest.fixture
def interp():
    return Interpreter(prelude=None)
