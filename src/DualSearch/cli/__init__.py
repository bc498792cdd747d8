"""CLI package for DualSearch command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from DualSearch.cli.runner import CommandRunner
from DualSearch.cli.ui import cli


def main() -> None:
    """Run DualSearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
