"""Command line entrypoint.

Usage:
  npm-inspector

Searches upward from the current directory for package.json, then reports
lockfiles and scripts. This is the only module that reads the working
directory, writes to the terminal or decides the process exit status.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import click

from . import __version__
from .core import inspect_directory
from .report import terminal_width
from .settings import ConfigError, load_settings
from .styling import ERROR, get_styler


EXIT_CONFIG_ERROR = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="npm-inspector",
        description="Show lockfiles and scripts of the nearest package.json.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as exc:
        click.echo(get_styler(True)(str(exc), ERROR), err=True)
        return EXIT_CONFIG_ERROR

    logging.basicConfig(
        level=settings.log_level_number,
        format="%(levelname)s %(name)s: %(message)s",
    )

    result = inspect_directory(
        Path.cwd(),
        style=get_styler(settings.color),
        width=terminal_width(settings.fallback_columns),
    )
    for line in result.lines:
        click.echo(line)
    return result.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
