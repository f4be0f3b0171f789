"""Command line interface for localetable."""

from localetable.cli.commands import main

__all__ = ["main"]
