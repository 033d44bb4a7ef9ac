"""Core inspection entrypoint.

This module never touches the process: it takes the start directory
explicitly and returns the lines to print together with an exit code, so the
CLI wrapper is the only place with global side effects.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .discovery import MANIFEST_NAME, list_directory, resolve_project_dir
from .lockfiles import detect_lockfiles
from .models import InspectionResult
from .parsers.package_json import parse as parse_package_json
from .report import DEFAULT_COLUMNS, render_lockfiles, render_scripts
from .styling import INFO, WARNING, PlainStyler, Styler


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1


def inspect_directory(
    start: Path,
    *,
    style: Styler | None = None,
    width: int = DEFAULT_COLUMNS,
) -> InspectionResult:
    """Inspect the nearest project at or above ``start``.

    Params:
        start: directory to begin the upward search from
        style: text styler; defaults to unstyled output
        width: terminal width used to fit the scripts table

    Filesystem and manifest errors propagate to the caller.
    """
    style = style or PlainStyler()

    project_dir = resolve_project_dir(start)
    if project_dir is None:
        logger.info("No %s above %s", MANIFEST_NAME, start)
        message = f"No {MANIFEST_NAME} found in {start} or any parent directory."
        return InspectionResult(exit_code=EXIT_NOT_FOUND, lines=(style(message, WARNING),))

    logger.info("Resolved project directory %s", project_dir)
    manifest = parse_package_json(project_dir / MANIFEST_NAME)

    found = f"Found {MANIFEST_NAME} in {project_dir}"
    if manifest.label:
        found += f" ({manifest.label})"
    lines = [style(found, INFO)]

    presence = detect_lockfiles(list_directory(project_dir))
    logger.debug("Lockfile presence: %s", presence.to_dict())
    lines.extend(render_lockfiles(presence, style))
    lines.extend(render_scripts(manifest, width, style))

    return InspectionResult(exit_code=EXIT_OK, lines=tuple(lines), project_dir=project_dir)
