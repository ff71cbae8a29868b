"""Shared fixtures for the handler tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def filelist_root(tmp_path: Path) -> Path:
    """Empty directory acting as the filelist tree."""
    root = tmp_path / "filelists"
    root.mkdir()
    return root


@pytest.fixture
def make_manifest(filelist_root: Path) -> Callable[..., Path]:
    """Factory writing ``<name>`` below the filelist tree."""

    def _make(name: str, lines: list[str], subdir: str | None = None) -> Path:
        directory = filelist_root / subdir if subdir else filelist_root
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text("".join(f"{line}\n" for line in lines))
        return path

    return _make


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo logging configuration done by the CLI."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Keep console output free of terminal styling."""
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
