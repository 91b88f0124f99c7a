# Author: PB
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# tests/conftest.py
"""Pytest configuration for fsentry tests."""

import os
from pathlib import Path

import pytest


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers",
        "posix_only: mark test as requiring symlinks and FIFOs",
    )


def pytest_collection_modifyitems(config, items):
    """Skip posix_only tests where symlinks or FIFOs are unavailable."""
    if os.name == "posix" and hasattr(os, "mkfifo"):
        return
    skip_posix = pytest.mark.skip(reason="needs a POSIX filesystem")
    for item in items:
        if "posix_only" in item.keywords:
            item.add_marker(skip_posix)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree.

    Layout:
        notes.txt         (5 bytes, mode 0644)
        archive.tar.gz
        README
        .gitignore
        .git/
        src/
        src/main.py
    """
    (tmp_path / "notes.txt").write_text("hello")
    os.chmod(tmp_path / "notes.txt", 0o644)
    (tmp_path / "archive.tar.gz").write_bytes(b"\x1f\x8b")
    (tmp_path / "README").write_text("readme")
    (tmp_path / ".gitignore").write_text("*.pyc\n")
    (tmp_path / ".git").mkdir()
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("print('hi')\n")
    return tmp_path


@pytest.fixture
def special_tree(sample_tree: Path) -> Path:
    """Extend sample_tree with symlinks and a FIFO."""
    (sample_tree / "link_to_notes").symlink_to("notes.txt")
    (sample_tree / "link_to_src").symlink_to("src")
    (sample_tree / "dangling").symlink_to("does-not-exist")
    os.mkfifo(sample_tree / "pipe")
    return sample_tree
