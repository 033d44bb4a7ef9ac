import json
from pathlib import Path

import pytest


@pytest.fixture
def write_manifest():
    """Write a package.json into a directory and return its path."""

    def _write(directory: Path, data: dict | None = None) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "package.json"
        path.write_text(json.dumps(data if data is not None else {"name": "demo"}, indent=2))
        return path

    return _write


@pytest.fixture
def no_manifest_anywhere(monkeypatch):
    """Hide package.json from every directory listing."""
    from npm_inspector import discovery

    real_list = discovery.list_directory

    def _listing(path):
        return [name for name in real_list(path) if name != discovery.MANIFEST_NAME]

    monkeypatch.setattr(discovery, "list_directory", _listing)
