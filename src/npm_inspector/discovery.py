"""Project root discovery by walking up from a starting directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path


logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


def list_directory(path: Path) -> list[str]:
    """Return the sorted file names contained in ``path``."""
    return sorted(os.listdir(path))


def resolve_project_dir(start: Path) -> Path | None:
    """Return the nearest directory at or above ``start`` holding a manifest.

    Returns None once the filesystem root has been checked without a match.
    Errors raised while listing a directory are left to the caller.
    """
    current = Path(os.path.abspath(start))
    while True:
        logger.debug("Checking %s", current)
        if MANIFEST_NAME in list_directory(current):
            return current

        parent = current.parent
        if parent == current:
            return None
        current = parent
