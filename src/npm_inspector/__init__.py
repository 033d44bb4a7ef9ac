"""npm-inspector core package.

Locates the nearest ``package.json`` above a directory and reports its
lockfiles and scripts. The scanning logic is callable without the CLI wrapper.
"""

__version__ = "0.1.0"

__all__ = [
    "core",
]
