"""Lockfile presence model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LockfilePresence:
    """Which of the known lockfiles exist in a project directory."""

    npm: bool = False
    pnpm: bool = False
    yarn: bool = False

    @property
    def found(self) -> list[str]:
        """Filenames of the lockfiles present, in display order."""
        flags = (
            ("package-lock.json", self.npm),
            ("pnpm-lock.yaml", self.pnpm),
            ("yarn.lock", self.yarn),
        )
        return [filename for filename, present in flags if present]

    @property
    def has_multiple(self) -> bool:
        return sum((self.npm, self.pnpm, self.yarn)) > 1

    def to_dict(self) -> dict[str, bool]:
        return {
            "npm": self.npm,
            "pnpm": self.pnpm,
            "yarn": self.yarn,
        }
