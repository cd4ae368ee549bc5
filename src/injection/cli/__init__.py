"""CLI module for injection.

Provides command-line tools for inspecting and checking composition roots.
"""

from injection.cli.app import app

__all__ = ["app"]
