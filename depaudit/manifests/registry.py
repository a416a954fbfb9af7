"""Parser registry — discover manifest files and match them to parsers."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from depaudit.config import DEFAULT_IGNORE_GLOBS
from depaudit.models import ManifestInfo
from depaudit.references import iter_files


@runtime_checkable
class ManifestParser(Protocol):
    """Interface that every manifest parser must satisfy.

    ``file_patterns`` are file-name globs (``package.json``, ``*.csproj``).
    ``parse`` raises ``ValueError`` on content it cannot interpret.
    """

    manifest_type: str
    file_patterns: list[str]

    def parse(self, file_path: Path, content: str) -> ManifestInfo: ...


# Discovery priority, highest first.
MANIFEST_PRIORITY: list[str] = [
    "package.json",  # npm / yarn
    "composer.json",  # PHP Composer
    "requirements.txt",  # pip
    "Pipfile",  # pipenv
    "pyproject.toml",  # poetry
    "Gemfile",  # Bundler
    "Cargo.toml",  # cargo
    "go.mod",  # Go modules
    "pom.xml",  # Maven
    "build.gradle",  # Gradle
    "*.csproj",  # .NET
    "pubspec.yaml",  # Dart / Flutter
]

PARSER_REGISTRY: dict[str, ManifestParser] = {}


def register_parser(parser: ManifestParser) -> None:
    """Register a parser instance by its manifest_type."""
    PARSER_REGISTRY[parser.manifest_type] = parser


def parser_for(file_path: Path) -> ManifestParser | None:
    """Return the registered parser whose patterns match *file_path*'s name."""
    for parser in PARSER_REGISTRY.values():
        for pattern in parser.file_patterns:
            if Path(file_path.name).match(pattern):
                return parser
    return None


def find_manifests(root: Path, ignore_globs: Iterable[str] | None = None) -> list[Path]:
    """Find manifest files under *root*, ordered by :data:`MANIFEST_PRIORITY`.

    Within one pattern, shallower files come first, then path order, so a
    manifest at the workspace root outranks nested ones.
    """
    root = Path(root)
    globs = tuple(DEFAULT_IGNORE_GLOBS if ignore_globs is None else ignore_globs)
    candidates = iter_files(
        root, globs, lambda name: any(Path(name).match(p) for p in MANIFEST_PRIORITY)
    )

    found: list[Path] = []
    for pattern in MANIFEST_PRIORITY:
        hits = [p for p in candidates if Path(p.name).match(pattern)]
        hits.sort(key=lambda p: (len(p.relative_to(root).parts), p.relative_to(root).as_posix()))
        found.extend(h for h in hits if h not in found)
    return found
