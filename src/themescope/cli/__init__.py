"""
themescope CLI package.

- app.py: main Typer application and entry point
- themes.py: theme configuration, lookup, and output commands
- utils.py: shared utilities (version, diagnostics, output)
"""

from themescope.cli.app import app, main
from themescope.cli.utils import get_version, version_callback

__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]
