"""Parser for PHP Composer composer.json files."""

from __future__ import annotations

from pathlib import Path

from depaudit.manifests.parsers.package_json import _section, load_json_object
from depaudit.manifests.registry import register_parser
from depaudit.models import ManifestInfo


class ComposerJsonParser:
    manifest_type = "composer"
    file_patterns = ["composer.json"]

    def parse(self, file_path: Path, content: str) -> ManifestInfo:
        data = load_json_object(content)
        return ManifestInfo(
            dependencies=_section(data, "require"),
            dev_dependencies=_section(data, "require-dev"),
        )


register_parser(ComposerJsonParser())
