"""Parse package.json into a ManifestDocument."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from ..models import ManifestDocument


MANIFEST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "scripts": {
            "type": ["object", "null"],
            "additionalProperties": {"type": "string"},
        },
    },
}


class ManifestError(ValueError):
    """Raised when package.json is not valid JSON or has an unusable shape."""


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate(document: Any, path: Path) -> None:
    """Check the manifest shape; raise ManifestError listing every violation."""
    validator = Draft202012Validator(MANIFEST_SCHEMA)
    errors = sorted(validator.iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise ManifestError(f"Invalid manifest {path}:\n" + _format_errors(errors))


def parse(path: Path) -> ManifestDocument:
    """Return the manifest at ``path``.

    A missing or null ``scripts`` field yields an empty mapping. Malformed JSON is
    reported as ManifestError chained from the decoder error.
    """
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {path}: {exc}") from exc

    validate(data, path)
    return ManifestDocument.from_mapping(path, data)
