"""Shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_theme(tmp_path: Path, monkeypatch):
    """Keep theme persistence out of the real ~/.config during tests."""
    monkeypatch.setattr("homebase.config.THEME_CONFIG_PATH", tmp_path / "theme.json")
