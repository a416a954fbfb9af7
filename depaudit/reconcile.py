"""Reconciliation of declared, used and installed packages.

Total over its inputs: it never raises and never touches the filesystem.
Failures of the auxiliary steps are mapped to defaults before this runs.
"""

from __future__ import annotations

from collections.abc import Collection

from depaudit.classifier import is_dev_only, is_valid_package_name
from depaudit.models import DependencyResult, ManifestInfo, ScanOutput, UnusedDependency


def reconcile(
    declared: ManifestInfo,
    used: ScanOutput,
    installed: Collection[str],
) -> DependencyResult:
    """Classify packages into missing, unused and not installed.

    * missing       used (and a valid package name) but not declared
    * unused        declared, not used, and not a dev-only tool
    * not_installed declared but absent from *installed*

    ``not_installed`` is independent of the other two lists.
    """
    all_declared = declared.all_declared
    declared_set = set(all_declared)
    valid_used = [p for p in used.used_packages if is_valid_package_name(p)]
    valid_used_set = set(valid_used)
    installed_set = set(installed)

    missing = [p for p in valid_used if p not in declared_set]
    unused = [
        UnusedDependency(package=p, locations=list(used.locations.get(p, [])))
        for p in all_declared
        if p not in valid_used_set and not is_dev_only(p)
    ]
    not_installed = [p for p in all_declared if p not in installed_set]

    return DependencyResult(missing=missing, unused=unused, not_installed=not_installed)
