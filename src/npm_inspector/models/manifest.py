"""Parsed package.json model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ManifestDocument:
    """The parts of a package.json the inspector reports on.

    ``scripts`` keeps the key order of the source document.
    """

    path: Path
    name: str | None = None
    version: str | None = None
    scripts: dict[str, str] = field(default_factory=dict)

    @property
    def has_scripts(self) -> bool:
        return bool(self.scripts)

    @property
    def label(self) -> str | None:
        """``name@version``, just ``name``, or None for an unnamed package."""
        if not self.name:
            return None
        if self.version:
            return f"{self.name}@{self.version}"
        return self.name

    @classmethod
    def from_mapping(cls, path: Path, data: Mapping[str, Any]) -> ManifestDocument:
        name = data.get("name")
        version = data.get("version")
        return cls(
            path=path,
            name=name if isinstance(name, str) else None,
            version=version if isinstance(version, str) else None,
            scripts=dict(data.get("scripts") or {}),
        )
