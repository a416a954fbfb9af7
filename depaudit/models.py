"""Data models shared by the scanner, manifest parsers and reconciliation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PackageLocation:
    """A file + 1-based line where a package is referenced."""

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


@dataclass(frozen=True)
class PackageReference:
    """One occurrence of a package identifier found in source."""

    package_id: str
    file: str
    line: int

    @property
    def location(self) -> PackageLocation:
        return PackageLocation(file=self.file, line=self.line)


@dataclass
class ScanOutput:
    """Result of a reference scan.

    ``locations`` is keyed by package id in first-discovery order; each list
    keeps file-enumeration then line order.
    """

    locations: dict[str, list[PackageLocation]] = field(default_factory=dict)

    @property
    def used_packages(self) -> list[str]:
        return list(self.locations)

    def add(self, ref: PackageReference) -> None:
        self.locations.setdefault(ref.package_id, []).append(ref.location)

    @classmethod
    def from_references(cls, refs: list[PackageReference]) -> ScanOutput:
        out = cls()
        for ref in refs:
            out.add(ref)
        return out


@dataclass
class ManifestInfo:
    """Declared dependencies of one manifest, split into runtime and dev."""

    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)

    @property
    def all_declared(self) -> list[str]:
        """Union of runtime and dev identifiers, runtime first, no duplicates."""
        return list(dict.fromkeys([*self.dependencies, *self.dev_dependencies]))


@dataclass
class UnusedDependency:
    package: str
    locations: list[PackageLocation] = field(default_factory=list)


@dataclass
class DependencyResult:
    """Final three-way classification of one analysis run."""

    missing: list[str] = field(default_factory=list)
    unused: list[UnusedDependency] = field(default_factory=list)
    not_installed: list[str] = field(default_factory=list)

    @property
    def issue_count(self) -> int:
        return len(self.missing) + len(self.unused) + len(self.not_installed)

    def to_dict(self) -> dict[str, Any]:
        return {
            "missing": list(self.missing),
            "unused": [
                {
                    "packageId": u.package,
                    "locations": [{"file": loc.file, "line": loc.line} for loc in u.locations],
                }
                for u in self.unused
            ],
            "notInstalled": list(self.not_installed),
        }
