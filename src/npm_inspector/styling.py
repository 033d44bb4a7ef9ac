"""Text styling for terminal output.

Report code only needs something that turns ``(text, role)`` into a string.
``ClickStyler`` colours by role; ``PlainStyler`` leaves text untouched.
"""

from __future__ import annotations

from typing import Any, Protocol

import click


HEADER = "header"
INFO = "info"
WARNING = "warning"
ERROR = "error"
SCRIPT_NAME = "script_name"
SCRIPT_COMMAND = "script_command"

ROLE_STYLES: dict[str, dict[str, Any]] = {
    HEADER: {"fg": "cyan", "bold": True},
    INFO: {"fg": "green"},
    WARNING: {"fg": "yellow"},
    ERROR: {"fg": "red", "bold": True},
    SCRIPT_NAME: {"fg": "blue", "bold": True},
    SCRIPT_COMMAND: {"fg": "white", "dim": True},
}


class Styler(Protocol):
    def __call__(self, text: str, role: str) -> str: ...


class ClickStyler:
    """Apply ANSI colours with ``click.style``."""

    def __call__(self, text: str, role: str) -> str:
        try:
            options = ROLE_STYLES[role]
        except KeyError:
            raise ValueError(f"Unknown style role: {role}") from None
        return click.style(text, **options)


class PlainStyler:
    def __call__(self, text: str, role: str) -> str:
        if role not in ROLE_STYLES:
            raise ValueError(f"Unknown style role: {role}")
        return text


def get_styler(color: bool) -> Styler:
    return ClickStyler() if color else PlainStyler()
