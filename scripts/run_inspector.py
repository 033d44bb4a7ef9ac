#!/usr/bin/env python3
"""Local entrypoint to run the inspector from a source checkout.

Usage:
  python scripts/run_inspector.py

This calls the same cli.main used by the installed ``npm-inspector`` command.
"""

from __future__ import annotations

from npm_inspector.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
