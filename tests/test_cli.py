"""Tests for CLI commands — npm is never invoked (mocked inventory)."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog
from click.testing import CliRunner

from depaudit.cli import main


@pytest.fixture(autouse=True)
def quiet_logging():
    """Replace the real logging setup with a warning-level stderr logger."""

    def _setup(level=None):
        structlog.configure(
            wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
            logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        )

    with patch("depaudit.cli.setup_logging", side_effect=_setup):
        yield
    structlog.reset_defaults()


@pytest.fixture
def installed(fake_inventory):
    """Patch the default inventory provider with a FakeInventory."""
    fake = fake_inventory(set())
    with patch("depaudit.checker.NpmInventory", return_value=fake):
        yield fake


def _project(root: Path) -> Path:
    (root / "package.json").write_text(
        json.dumps({"dependencies": {"lodash": "^4", "left-pad": "1.3.0"}})
    )
    (root / "src").mkdir()
    (root / "src" / "index.js").write_text("const _ = require('lodash');\nimport 'chalk';\n")
    return root


# ── check ──


class TestCheck:
    def test_text_report(self, tmp_path: Path, installed):
        installed.installed = {"lodash"}
        root = _project(tmp_path)
        result = CliRunner().invoke(main, ["check", "-p", str(root)])
        assert result.exit_code == 0
        assert "Missing dependencies:\n  - chalk" in result.output
        assert "Not installed dependencies:\n  - left-pad" in result.output
        assert "Unused dependencies:\n  - left-pad" in result.output
        assert "Found 3 issue(s)." in result.output

    def test_json_report(self, tmp_path: Path, installed):
        installed.installed = {"lodash", "left-pad"}
        root = _project(tmp_path)
        result = CliRunner().invoke(main, ["check", "--path", str(root), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "missing": ["chalk"],
            "unused": [{"packageId": "left-pad", "locations": []}],
            "notInstalled": [],
        }

    def test_clean_project(self, tmp_path: Path, installed):
        installed.installed = {"lodash"}
        (tmp_path / "package.json").write_text('{"dependencies": {"lodash": "4"}}')
        (tmp_path / "a.js").write_text("require('lodash')\n")
        result = CliRunner().invoke(main, ["check", "-p", str(tmp_path)])
        assert result.exit_code == 0
        assert "All dependencies are properly configured." in result.output

    def test_ignore_option(self, tmp_path: Path, installed):
        installed.installed = {"lodash"}
        root = _project(tmp_path)
        result = CliRunner().invoke(
            main, ["check", "-p", str(root), "--json", "--ignore", "src/**"]
        )
        data = json.loads(result.output)
        assert data["missing"] == []
        assert {u["packageId"] for u in data["unused"]} == {"lodash", "left-pad"}

    def test_no_manifest(self, tmp_path: Path, installed):
        (tmp_path / "a.js").write_text("require('x')\n")
        result = CliRunner().invoke(main, ["check", "-p", str(tmp_path)])
        assert result.exit_code == 1
        assert "Error: No package manifest found" in result.output

    def test_nonexistent_path(self):
        result = CliRunner().invoke(main, ["check", "-p", "/nonexistent/path/xyz"])
        assert result.exit_code != 0


# ── list ──


class TestList:
    def test_text(self, tmp_path: Path):
        (tmp_path / "package.json").write_text(
            json.dumps({"dependencies": {"react": "18"}, "devDependencies": {"vite": "5"}})
        )
        result = CliRunner().invoke(main, ["list", "-p", str(tmp_path)])
        assert result.exit_code == 0
        assert "package.json" in result.output
        assert "react 18" in result.output
        assert "vite 5" in result.output

    def test_json(self, tmp_path: Path):
        (tmp_path / "requirements.txt").write_text("flask==2.0.1\n")
        result = CliRunner().invoke(main, ["list", "-p", str(tmp_path), "--json"])
        assert json.loads(result.output) == {
            "manifest": "requirements.txt",
            "dependencies": {"flask": "2.0.1"},
            "dev_dependencies": {},
        }

    def test_no_manifest(self, tmp_path: Path):
        result = CliRunner().invoke(main, ["list", "-p", str(tmp_path)])
        assert result.exit_code == 1
