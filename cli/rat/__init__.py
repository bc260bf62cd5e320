"""rat CLI - Boilerplate manager.

Command-line interface for creating projects from boilerplate directories.
"""

__version__ = "0.1.0"

from cli.rat.cli import app, main

__all__ = ["__version__", "app", "main"]
