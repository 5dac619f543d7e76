"""Shared pytest fixtures for inisettings tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_ini(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing newline-terminated lines to an INI file."""

    def _write(*lines: str, name: str = "settings.ini") -> Path:
        target = tmp_path / name
        target.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return target

    return _write


@pytest.fixture
def missing_ini(tmp_path: Path) -> Path:
    """Return the path of an INI file that does not exist yet."""
    return tmp_path / "absent.ini"
