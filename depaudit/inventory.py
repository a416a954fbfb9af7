"""Installed-package inventory, as reported by the package manager."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

from depaudit.config import DEFAULT_INVENTORY_COMMAND
from depaudit.exceptions import InventoryError

log = structlog.get_logger("depaudit.inventory")


@runtime_checkable
class InventoryProvider(Protocol):
    """Returns top-level installed package ids; raises InventoryError on failure."""

    def list_installed(self, root: Path) -> set[str]: ...


def parse_npm_listing(stdout: str) -> set[str]:
    """Extract top-level package ids from ``npm ls --json`` output.

    Entries npm flags as ``"missing": true`` are declared but absent, so they
    are left out.
    """
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError as exc:
        raise InventoryError(f"unparseable package listing: {exc}") from exc
    if not isinstance(data, dict):
        raise InventoryError("package listing is not a JSON object")

    deps = data.get("dependencies") or {}
    if not isinstance(deps, dict):
        raise InventoryError("'dependencies' in package listing is not an object")
    return {
        name
        for name, info in deps.items()
        if not (isinstance(info, dict) and info.get("missing"))
    }


class NpmInventory:
    """Runs ``npm ls --depth=0 --json`` (or a configured equivalent) in the workspace."""

    def __init__(self, command: Sequence[str] = DEFAULT_INVENTORY_COMMAND) -> None:
        self._command = list(command)

    def list_installed(self, root: Path) -> set[str]:
        try:
            proc = subprocess.run(
                self._command,
                cwd=str(root),
                capture_output=True,
                text=True,
            )
        except OSError as exc:
            raise InventoryError(f"cannot run {self._command[0]}: {exc}") from exc

        # npm exits non-zero on ELSPROBLEMS but still prints a usable listing.
        if not proc.stdout.strip():
            raise InventoryError(
                f"{' '.join(self._command)} failed (exit {proc.returncode}): "
                f"{proc.stderr.strip()}"
            )
        return parse_npm_listing(proc.stdout)


def installed_packages(provider: InventoryProvider, root: Path) -> set[str]:
    """Query *provider*; on failure log and return an empty set.

    An empty inventory makes every declared package "not installed".
    """
    try:
        return provider.list_installed(root)
    except InventoryError as exc:
        log.warning("inventory.query_failed", root=str(root), error=str(exc))
        return set()
