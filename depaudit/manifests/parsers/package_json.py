"""Parser for npm / yarn package.json files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from depaudit.manifests.registry import register_parser
from depaudit.models import ManifestInfo


def _section(data: dict[str, Any], key: str) -> dict[str, str]:
    """Return a ``name -> version`` section, raising on a non-object value."""
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be an object, got {type(value).__name__}")
    return {str(name): str(version) for name, version in value.items()}


def load_json_object(content: str) -> dict[str, Any]:
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError("top-level JSON value is not an object")
    return data


class PackageJsonParser:
    manifest_type = "npm"
    file_patterns = ["package.json"]

    def parse(self, file_path: Path, content: str) -> ManifestInfo:
        data = load_json_object(content)
        return ManifestInfo(
            dependencies=_section(data, "dependencies"),
            dev_dependencies=_section(data, "devDependencies"),
        )


register_parser(PackageJsonParser())
