"""Pytest configuration for barotool test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add project root and src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    for import_root in (project_root, project_root / "src"):
        if str(import_root) not in sys.path:
            sys.path.insert(0, str(import_root))


@pytest.fixture(autouse=True)
def _isolate_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's BAROTOOL_LOG_LEVEL from leaking into tests."""
    monkeypatch.delenv("BAROTOOL_LOG_LEVEL", raising=False)
