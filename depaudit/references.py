"""Reference scanner — extract package references from source files.

Extraction is lexical: each file extension maps to an ordered tuple of
extraction rules, each a line regex plus the ecosystem whose
normalizer turns the captured text into a package id. Adding a language is
adding one entry to :data:`RULES_BY_EXTENSION`.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path

import structlog

from depaudit.classifier import is_excluded
from depaudit.config import DEFAULT_IGNORE_GLOBS
from depaudit.models import PackageReference, ScanOutput
from depaudit.normalizer import JS, PHP, PYTHON, RUBY, normalize

log = structlog.get_logger("depaudit.scanner")


@dataclass(frozen=True)
class ExtractionRule:
    """A line pattern and the normalizer applied to what it captures.

    ``split`` turns one captured group into several raw references
    (``import a, b``); by default the capture is a single reference.
    """

    pattern: re.Pattern[str]
    language: str
    split: Callable[[str], Iterable[str]] | None = None

    def extract(self, line: str) -> Iterator[str]:
        for m in self.pattern.finditer(line):
            raw = m.group(1)
            if self.split is None:
                yield raw
            else:
                yield from self.split(raw)


def _split_python_imports(expr: str) -> list[str]:
    """``a.b as c, d`` -> ``["a.b", "d"]``"""
    names = []
    for part in expr.split(","):
        tokens = part.split()
        if tokens:
            names.append(tokens[0])
    return names


# import x from 'y' / import {a, b} from "y" / import 'y' / export * from 'y'
_ES_MODULE_RE = re.compile(
    r"\b(?:import|export)\s+(?:type\s+)?"
    r"(?:[\w$*{}\s,]+?\s+from\s+)?"
    r"['\"`]([^'\"`]+)['\"`]"
)
_COMMONJS_RE = re.compile(r"\brequire\s*\(\s*['\"`]([^'\"`]+)['\"`]\s*\)")

_PHP_RE = re.compile(r"\b(?:require_once|include_once|require|include|use)\s+([^;]+)")

_PY_IMPORT_RE = re.compile(r"^\s*import\s+([\w.]+(?:\s+as\s+\w+)?(?:\s*,\s*[\w.]+(?:\s+as\s+\w+)?)*)")
_PY_FROM_RE = re.compile(r"^\s*from\s+(\S+)\s+import\b")

_RUBY_RE = re.compile(r"\brequire\s*\(?\s*['\"]([^'\"]+)['\"]")

_JS_RULES = (
    ExtractionRule(_ES_MODULE_RE, JS),
    ExtractionRule(_COMMONJS_RE, JS),
)

RULES_BY_EXTENSION: dict[str, tuple[ExtractionRule, ...]] = {
    ".js": _JS_RULES,
    ".jsx": _JS_RULES,
    ".ts": _JS_RULES,
    ".tsx": _JS_RULES,
    ".mjs": _JS_RULES,
    ".cjs": _JS_RULES,
    ".vue": _JS_RULES,
    ".svelte": _JS_RULES,
    ".php": (ExtractionRule(_PHP_RE, PHP),),
    ".py": (
        ExtractionRule(_PY_IMPORT_RE, PYTHON, split=_split_python_imports),
        ExtractionRule(_PY_FROM_RE, PYTHON),
    ),
    ".rb": (ExtractionRule(_RUBY_RE, RUBY),),
    # Enumerated but no extraction rules yet.
    ".go": (),
    ".rs": (),
    ".java": (),
    ".cs": (),
}

SOURCE_EXTENSIONS = frozenset(RULES_BY_EXTENSION)


def is_ignored(rel_path: str, ignore_globs: Iterable[str]) -> bool:
    """Match a root-relative POSIX path against ignore globs.

    The path is also tried with a leading ``/`` so that ``**/name/**``
    matches a top-level ``name/`` directory.
    """
    anchored = "/" + rel_path
    return any(fnmatchcase(rel_path, g) or fnmatchcase(anchored, g) for g in ignore_globs)


def iter_files(
    root: Path,
    ignore_globs: Iterable[str],
    accept: Callable[[str], bool],
) -> list[Path]:
    """Walk *root* pruning ignored directories; return accepted files sorted by path."""
    globs = tuple(ignore_globs)
    hits: list[tuple[str, Path]] = []
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root).as_posix()
        prefix = "" if rel_dir == "." else rel_dir + "/"
        dirnames[:] = [d for d in dirnames if not is_ignored(f"{prefix}{d}/", globs)]
        for name in filenames:
            rel = prefix + name
            if accept(name) and not is_ignored(rel, globs):
                hits.append((rel, Path(dirpath) / name))
    hits.sort(key=lambda h: h[0])
    return [path for _, path in hits]


def extract_from_line(line: str, rules: Iterable[ExtractionRule]) -> list[str]:
    """Package ids referenced on one line, deduplicated, in match order."""
    found: dict[str, None] = {}
    for rule in rules:
        for raw in rule.extract(line):
            pkg = normalize(raw, rule.language)
            if pkg and not is_excluded(pkg):
                found[pkg] = None
    return list(found)


def scan_file(path: Path, rel_path: str) -> list[PackageReference]:
    """Extract references from one file. Raises ``OSError`` if unreadable."""
    rules = RULES_BY_EXTENSION.get(path.suffix.lower(), ())
    if not rules:
        return []
    text = path.read_text(encoding="utf-8", errors="replace")
    refs: list[PackageReference] = []
    # Lines end at "\n" only, not at \x0c or \u2028 as with splitlines().
    for lineno, line in enumerate(text.split("\n"), start=1):
        line = line.removesuffix("\r")
        for pkg in extract_from_line(line, rules):
            refs.append(PackageReference(package_id=pkg, file=rel_path, line=lineno))
    return refs


def scan(root: Path, ignore_globs: Iterable[str] | None = None) -> ScanOutput:
    """Scan every source file under *root* for package references.

    File paths in the result are relative to *root*. An unreadable file is
    logged and skipped.
    """
    root = Path(root)
    globs = tuple(DEFAULT_IGNORE_GLOBS if ignore_globs is None else ignore_globs)
    files = iter_files(
        root, globs, lambda name: os.path.splitext(name)[1].lower() in SOURCE_EXTENSIONS
    )

    refs: list[PackageReference] = []
    for path in files:
        rel = path.relative_to(root).as_posix()
        try:
            refs.extend(scan_file(path, rel))
        except OSError as exc:
            log.warning("scanner.read_failed", file=rel, error=str(exc))

    out = ScanOutput.from_references(refs)
    log.debug("scanner.done", files=len(files), packages=len(out.locations))
    return out
