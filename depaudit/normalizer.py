"""Package-name normalization: raw import path -> canonical package id.

Each ecosystem has its own rule:

    npm     lodash/fp          -> lodash
            @scope/name/sub    -> @scope/name
    php     Vendor\\Pkg\\Class   -> Vendor/Pkg
    python  os.path            -> os
    ruby    active_support     -> active_support  (identity)

A reference that starts with ``.`` or ``/`` is a relative or absolute file
path and never normalizes to a package id.
"""

from __future__ import annotations

import re

JS = "js"
PHP = "php"
PYTHON = "python"
RUBY = "ruby"

# Leading namespace segment pair: optional "\", optional import keyword, vendor, package.
_PHP_NAMESPACE_RE = re.compile(
    r"^\\?(?:(?:function|const)\s+)?\\?"
    r"([A-Za-z_][A-Za-z0-9_-]*)"  # vendor
    r"[\\/]"
    r"([A-Za-z_][A-Za-z0-9_-]*)"  # package
)


def is_relative(raw: str) -> bool:
    return raw.startswith((".", "/"))


def _npm(raw: str) -> str | None:
    # node:fs, https://esm.sh/... are not registry packages
    if ":" in raw:
        return None
    parts = raw.split("/")
    if raw.startswith("@") and len(parts) >= 2:
        return f"{parts[0]}/{parts[1]}"
    return parts[0] or None


def _php(raw: str) -> str | None:
    m = _PHP_NAMESPACE_RE.match(raw)
    if not m:
        return None
    return f"{m.group(1)}/{m.group(2)}"


def _python(raw: str) -> str | None:
    return raw.split(".", 1)[0] or None


def _ruby(raw: str) -> str | None:
    return raw or None


_RULES = {
    JS: _npm,
    PHP: _php,
    PYTHON: _python,
    RUBY: _ruby,
}


def normalize(raw: str, language: str) -> str | None:
    """Return the canonical package id for *raw*, or ``None``.

    ``None`` means *raw* is not a package reference (relative path, file
    include, URL, empty string). Raises ``KeyError`` for an unknown language.
    """
    rule = _RULES[language]
    raw = raw.strip()
    if not raw or is_relative(raw):
        return None
    return rule(raw)
