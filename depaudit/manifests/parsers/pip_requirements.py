"""Parser for pip requirements.txt files."""

from __future__ import annotations

import re
from pathlib import Path

from depaudit.manifests.registry import register_parser
from depaudit.models import ManifestInfo

# Matches: package name, optional [extras], optional pin operator + version
_REQ_RE = re.compile(
    r"^([A-Za-z0-9]([A-Za-z0-9._-]*[A-Za-z0-9])?)"  # package name
    r"(?:\[[^\]]*\])?"  # optional extras
    r"\s*"
    r"(?:(==|>=|<=|~=)\s*([0-9][0-9A-Za-z.*+!-]*))?"  # pin operator + version
)

_INLINE_COMMENT_RE = re.compile(r"\s+#.*$")


class PipRequirementsParser:
    """All entries are runtime dependencies; the format has no dev section."""

    manifest_type = "pip-requirements"
    file_patterns = ["requirements.txt"]

    def parse(self, file_path: Path, content: str) -> ManifestInfo:
        deps: dict[str, str] = {}

        for raw_line in content.splitlines():
            line = _INLINE_COMMENT_RE.sub("", raw_line.strip())
            if not line or line.startswith("#"):
                continue
            if line.startswith(("-r", "-c", "-e", "--")):
                continue

            m = _REQ_RE.match(line)
            if not m:
                continue

            deps[m.group(1)] = m.group(4) or "*"

        return ManifestInfo(dependencies=deps)


register_parser(PipRequirementsParser())
