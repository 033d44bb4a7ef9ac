"""Human-readable rendering of lockfile status and manifest scripts."""

from __future__ import annotations

import shutil

from .lockfiles import LOCKFILES
from .models import LockfilePresence, ManifestDocument
from .styling import HEADER, INFO, SCRIPT_COMMAND, SCRIPT_NAME, WARNING, Styler


DEFAULT_COLUMNS = 80
GUTTER = 8
ELLIPSIS = "..."

NO_SCRIPTS_MESSAGE = "No scripts found in package.json."
MULTIPLE_LOCKFILES_MESSAGE = (
    "Multiple lockfiles found. Consider using a single package manager to avoid conflicts."
)


def terminal_width(fallback: int = DEFAULT_COLUMNS) -> int:
    """Return the terminal column count, or ``fallback`` when it is unknown."""
    return shutil.get_terminal_size(fallback=(fallback, 24)).columns


def truncate(command: str, limit: int) -> str:
    """Cut ``command`` to ``limit`` characters, marking any cut with an ellipsis."""
    limit = max(limit, 0)
    if len(command) <= limit:
        return command
    return command[:limit] + ELLIPSIS


def render_lockfiles(presence: LockfilePresence, style: Styler) -> list[str]:
    """One line per lockfile present, plus a caution when several coexist.

    Nothing is rendered when no lockfile is present.
    """
    lines = []
    for filename in presence.found:
        lines.append(style(f"Lockfile Found: {LOCKFILES[filename]} ({filename})", INFO))
    if presence.has_multiple:
        lines.append(style(MULTIPLE_LOCKFILES_MESSAGE, WARNING))
    return lines


def render_scripts(manifest: ManifestDocument, width: int, style: Styler) -> list[str]:
    """Render the scripts mapping as an aligned two-column table."""
    if not manifest.has_scripts:
        return [style(NO_SCRIPTS_MESSAGE, WARNING)]

    name_width = max(len(name) for name in manifest.scripts)
    available = width - name_width - GUTTER

    lines = [style("Available scripts:", HEADER)]
    for name, command in manifest.scripts.items():
        lines.append(
            style(name.ljust(name_width), SCRIPT_NAME)
            + " "
            + style(truncate(command, available), SCRIPT_COMMAND)
        )
    return lines
