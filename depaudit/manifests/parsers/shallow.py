"""Shallow line-oriented parsers for TOML, YAML and other manifests.

These do not understand sections or nesting: every top-level
``key = "value"`` (TOML) or ``key: "value"`` (YAML) line is read as a
runtime dependency, wherever it appears. ``[package] name = "x"`` in a
Cargo.toml therefore yields a dependency called ``name``. Dev sections are
not distinguished either; all entries land in ``dependencies``.
"""

from __future__ import annotations

import re
from pathlib import Path

from depaudit.manifests.registry import register_parser
from depaudit.models import ManifestInfo

_TOML_PAIR_RE = re.compile(r"""^([a-zA-Z0-9_-]+)\s*=\s*["']([^"']+)["']""", re.MULTILINE)
_YAML_PAIR_RE = re.compile(r"""^([a-zA-Z0-9_-]+):\s*["']([^"']+)["']""", re.MULTILINE)


def _pairs(pattern: re.Pattern[str], content: str) -> dict[str, str]:
    return {m.group(1): m.group(2) for m in pattern.finditer(content)}


class ShallowTomlParser:
    manifest_type = "toml"
    file_patterns = ["Pipfile", "pyproject.toml", "Cargo.toml"]

    def parse(self, file_path: Path, content: str) -> ManifestInfo:
        return ManifestInfo(dependencies=_pairs(_TOML_PAIR_RE, content))


class ShallowYamlParser:
    manifest_type = "yaml"
    file_patterns = ["pubspec.yaml"]

    def parse(self, file_path: Path, content: str) -> ManifestInfo:
        return ManifestInfo(dependencies=_pairs(_YAML_PAIR_RE, content))


class GenericManifestParser:
    """Discovered formats without a dedicated parser.

    Only lines that happen to fit the TOML or YAML pair pattern are read;
    Gemfile ``gem`` calls, go.mod ``require`` blocks and XML are not, so
    these usually parse to no dependencies.
    """

    manifest_type = "generic"
    file_patterns = ["Gemfile", "go.mod", "pom.xml", "build.gradle", "*.csproj"]

    def parse(self, file_path: Path, content: str) -> ManifestInfo:
        deps = _pairs(_TOML_PAIR_RE, content)
        deps.update(_pairs(_YAML_PAIR_RE, content))
        return ManifestInfo(dependencies=deps)


register_parser(ShallowTomlParser())
register_parser(ShallowYamlParser())
register_parser(GenericManifestParser())
