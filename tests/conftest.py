"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Small tree: t/a.txt and t/sub/b.txt."""
    root = tmp_path / "t"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "sub" / "b.txt").write_text("b")
    return root


@pytest.fixture
def deep_tree(tmp_path: Path) -> Path:
    """Tree with nested and hidden entries.

    Layout:
        deep/
            top.py
            .hidden
            keep/
                x.txt
                inner/
                    y.txt
            skip/
                z.txt
    """
    root = tmp_path / "deep"
    (root / "keep" / "inner").mkdir(parents=True)
    (root / "skip").mkdir()
    (root / "top.py").write_text("print()")
    (root / ".hidden").write_text("secret")
    (root / "keep" / "x.txt").write_text("x")
    (root / "keep" / "inner" / "y.txt").write_text("y")
    (root / "skip" / "z.txt").write_text("z")
    return root


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    home = tmp_path / "xdg"
    home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home
