"""Dependency analysis pipeline: manifests, source scan, inventory."""

from __future__ import annotations

from pathlib import Path

import structlog

from depaudit.config import AuditConfig
from depaudit.exceptions import NoManifestFoundError
from depaudit.inventory import InventoryProvider, NpmInventory, installed_packages
from depaudit.manifests import find_manifests, parse_manifest
from depaudit.models import DependencyResult, ManifestInfo
from depaudit.reconcile import reconcile
from depaudit.references import scan

log = structlog.get_logger("depaudit.checker")


def _authoritative_manifest(root: Path, config: AuditConfig) -> Path:
    manifests = find_manifests(root, config.ignore_globs)
    if not manifests:
        raise NoManifestFoundError(root)
    if len(manifests) > 1:
        log.debug(
            "checker.manifests_ignored",
            used=str(manifests[0]),
            ignored=[str(m) for m in manifests[1:]],
        )
    return manifests[0]


def list_declared(root: Path, config: AuditConfig | None = None) -> tuple[Path, ManifestInfo]:
    """Return the authoritative manifest path and its declared dependencies.

    Raises :class:`NoManifestFoundError` if the workspace has no manifest.
    """
    root = Path(root)
    config = config or AuditConfig.from_env()
    manifest = _authoritative_manifest(root, config)
    return manifest, parse_manifest(manifest)


def analyze_dependencies(
    root: Path,
    config: AuditConfig | None = None,
    inventory: InventoryProvider | None = None,
) -> DependencyResult:
    """Run one full analysis of the workspace at *root*.

    Only the first manifest found (see ``MANIFEST_PRIORITY``) is used.
    Raises :class:`NoManifestFoundError` when there is none; every other
    failure degrades to an emptier result and a logged warning.
    """
    root = Path(root)
    config = config or AuditConfig.from_env()
    inventory = inventory or NpmInventory(config.inventory_command)

    manifest, declared = list_declared(root, config)
    used = scan(root, config.ignore_globs)
    installed = installed_packages(inventory, root)

    result = reconcile(declared, used, installed)
    log.info(
        "checker.analyzed",
        root=str(root),
        manifest=manifest.relative_to(root).as_posix(),
        missing=len(result.missing),
        unused=len(result.unused),
        not_installed=len(result.not_installed),
    )
    return result


class PackageChecker:
    """Binds a workspace root to a config and inventory provider."""

    def __init__(
        self,
        workspace: Path,
        config: AuditConfig | None = None,
        inventory: InventoryProvider | None = None,
    ) -> None:
        self.workspace = Path(workspace)
        self._config = config or AuditConfig.from_env()
        self._inventory = inventory or NpmInventory(self._config.inventory_command)

    def analyze(self) -> DependencyResult:
        return analyze_dependencies(self.workspace, self._config, self._inventory)

    def declared(self) -> tuple[Path, ManifestInfo]:
        return list_declared(self.workspace, self._config)
