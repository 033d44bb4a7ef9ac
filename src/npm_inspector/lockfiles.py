"""Lockfile presence checks for a resolved project directory."""

from __future__ import annotations

from collections.abc import Iterable

from .models import LockfilePresence


# filename -> package manager label, in display order
LOCKFILES: dict[str, str] = {
    "package-lock.json": "npm",
    "pnpm-lock.yaml": "pnpm",
    "yarn.lock": "Yarn",
}


def detect_lockfiles(listing: Iterable[str]) -> LockfilePresence:
    """Classify which known lockfiles appear in a directory listing.

    Matching is exact and case-sensitive; file contents are never read.
    """
    names = set(listing)
    return LockfilePresence(
        npm="package-lock.json" in names,
        pnpm="pnpm-lock.yaml" in names,
        yarn="yarn.lock" in names,
    )
