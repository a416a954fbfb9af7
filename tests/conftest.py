"""Shared pytest fixtures for depaudit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from depaudit.exceptions import InventoryError


class FakeInventory:
    """In-memory InventoryProvider; ``installed=None`` simulates a failing query."""

    def __init__(self, installed: set[str] | None = None):
        self.installed = installed
        self.calls: list[Path] = []

    def list_installed(self, root: Path) -> set[str]:
        self.calls.append(root)
        if self.installed is None:
            raise InventoryError("npm not available")
        return set(self.installed)


@pytest.fixture
def make_workspace(tmp_path):
    """Write ``{relative_path: content}`` under tmp_path and return the root."""

    def _make(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def fake_inventory():
    """Factory for FakeInventory instances."""
    return FakeInventory
