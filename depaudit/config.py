"""Runtime configuration, read from environment variables.

    DEPAUDIT_IGNORE             extra ignore globs, comma-separated
    DEPAUDIT_INVENTORY_COMMAND  installed-package listing command
                                (default: npm ls --depth=0 --json)
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field

DEFAULT_IGNORE_GLOBS: tuple[str, ...] = (
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/.git/**",
    "**/vendor/**",
    "**/__pycache__/**",
)

DEFAULT_INVENTORY_COMMAND: tuple[str, ...] = ("npm", "ls", "--depth=0", "--json")


def _split_globs(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(g.strip() for g in raw.split(",") if g.strip())


@dataclass
class AuditConfig:
    ignore_globs: tuple[str, ...] = DEFAULT_IGNORE_GLOBS
    inventory_command: tuple[str, ...] = DEFAULT_INVENTORY_COMMAND
    extra_ignore: tuple[str, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        if self.extra_ignore:
            self.ignore_globs = tuple(dict.fromkeys(self.ignore_globs + self.extra_ignore))

    @classmethod
    def from_env(cls, extra_ignore: tuple[str, ...] = ()) -> AuditConfig:
        """Build a config from ``DEPAUDIT_*`` env vars plus *extra_ignore*."""
        command = os.environ.get("DEPAUDIT_INVENTORY_COMMAND")
        return cls(
            inventory_command=(
                tuple(shlex.split(command)) if command else DEFAULT_INVENTORY_COMMAND
            ),
            extra_ignore=_split_globs(os.environ.get("DEPAUDIT_IGNORE")) + tuple(extra_ignore),
        )
