"""Data models for directory inspection results."""

from __future__ import annotations

from .inspection_result import InspectionResult
from .lockfile_presence import LockfilePresence
from .manifest import ManifestDocument

__all__ = [
    "InspectionResult",
    "LockfilePresence",
    "ManifestDocument",
]
