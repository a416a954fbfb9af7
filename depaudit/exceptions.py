"""Custom exceptions for depaudit."""

from __future__ import annotations

from pathlib import Path


class AuditError(Exception):
    """Base exception for all depaudit errors."""


class NoManifestFoundError(AuditError):
    """Raised when the workspace contains no recognised manifest file."""

    def __init__(self, root: Path | str):
        self.root = str(root)
        super().__init__(f"No package manifest found in {self.root}")


class ManifestParseError(AuditError):
    """Raised when a manifest file cannot be read or parsed."""

    def __init__(self, path: Path | str, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to parse {self.path}: {reason}")


class UnsupportedManifestError(ManifestParseError):
    """Raised when no registered parser handles the given file."""

    def __init__(self, path: Path | str):
        super().__init__(path, "no parser registered for this file type")


class InventoryError(AuditError):
    """Raised when the installed-package inventory cannot be obtained."""
