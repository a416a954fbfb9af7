"""Manifest parsers — auto-registered on import, in priority order."""

from depaudit.manifests.parsers import (
    package_json,  # noqa: F401
    composer_json,  # noqa: F401
    pip_requirements,  # noqa: F401
    shallow,  # noqa: F401
)
