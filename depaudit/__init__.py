"""depaudit — cross-reference source imports against declared dependencies."""

from depaudit.checker import PackageChecker, analyze_dependencies, list_declared
from depaudit.models import DependencyResult, ManifestInfo, PackageLocation, ScanOutput

__all__ = [
    "DependencyResult",
    "ManifestInfo",
    "PackageChecker",
    "PackageLocation",
    "ScanOutput",
    "analyze_dependencies",
    "list_declared",
]
