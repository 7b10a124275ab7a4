"""Pytest configuration and fixtures."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # Resolved so comparisons with realpath() output hold on macOS too
        yield Path(tmpdir).resolve()


@pytest.fixture
def home_env(temp_dir: Path, monkeypatch):
    """Point HOME into a temp dir and move the global config out of /etc."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setattr("safe_rm.config.GLOBAL_CONFIG_FILE", temp_dir / "etc" / "safe-rm.conf")
    yield home


@pytest.fixture
def alice_tree(temp_dir: Path):
    """Create a home directory with a docs dir and a tmp dir holding two files."""
    alice = temp_dir / "home" / "alice"
    (alice / "docs").mkdir(parents=True)
    (alice / "tmp").mkdir()
    (alice / "tmp" / "a.txt").write_text("a")
    (alice / "tmp" / "b.txt").write_text("b")
    (alice / "notes.txt").write_text("notes")
    yield alice


@pytest.fixture
def fake_rm(temp_dir: Path):
    """Create an executable standing in for the real rm."""
    bin_dir = temp_dir / "bin"
    bin_dir.mkdir()
    rm = bin_dir / "rm"
    rm.write_text("#!/bin/sh\nexit 0\n")
    rm.chmod(0o755)
    yield rm
