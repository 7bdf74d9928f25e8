"""Test configuration helpers."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_ensure_repo_root_on_path()


@pytest.fixture(autouse=True)
def _clear_config_env(monkeypatch):
    """Keep PBKDF2KIT_* overrides from the shell out of the tests."""
    for name in ("PBKDF2KIT_ALGORITHM", "PBKDF2KIT_CHARSET", "PBKDF2KIT_BACKEND"):
        monkeypatch.delenv(name, raising=False)
    yield
