"""Inspection result model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class InspectionResult:
    """Outcome of one inspection run: rendered lines plus the exit status."""

    exit_code: int
    lines: tuple[str, ...]
    project_dir: Path | None = None
