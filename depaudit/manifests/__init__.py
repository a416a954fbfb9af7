"""Manifest discovery and parsing."""

from __future__ import annotations

from pathlib import Path

import structlog

# Ensure parsers are registered before any lookup runs.
import depaudit.manifests.parsers  # noqa: F401
from depaudit.exceptions import ManifestParseError, UnsupportedManifestError
from depaudit.manifests.registry import (
    MANIFEST_PRIORITY,
    PARSER_REGISTRY,
    ManifestParser,
    find_manifests,
    parser_for,
    register_parser,
)
from depaudit.models import ManifestInfo

log = structlog.get_logger("depaudit.manifests")


def load_manifest(path: Path) -> ManifestInfo:
    """Parse the manifest at *path*, raising on any failure.

    Raises :class:`UnsupportedManifestError` when no parser handles the file
    name and :class:`ManifestParseError` when it cannot be read or parsed.
    """
    path = Path(path)
    parser = parser_for(path)
    if parser is None:
        raise UnsupportedManifestError(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestParseError(path, str(exc)) from exc
    try:
        return parser.parse(path, content)
    except ValueError as exc:
        raise ManifestParseError(path, str(exc)) from exc


def parse_manifest(path: Path) -> ManifestInfo:
    """Like :func:`load_manifest`, but a failure yields an empty ManifestInfo."""
    try:
        return load_manifest(path)
    except ManifestParseError as exc:
        log.warning("manifest.parse_failed", file=str(path), error=exc.reason)
        return ManifestInfo()


__all__ = [
    "MANIFEST_PRIORITY",
    "PARSER_REGISTRY",
    "ManifestParser",
    "find_manifests",
    "load_manifest",
    "parse_manifest",
    "parser_for",
    "register_parser",
]
