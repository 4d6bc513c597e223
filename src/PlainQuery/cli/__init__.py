"""CLI package for PlainQuery command orchestration.

This package contains the CLI components for the translate and tree
commands, split into interface, runner and command modules.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from PlainQuery.cli.runner import CommandRunner
from PlainQuery.cli.ui import cli


def main() -> None:
    """Run PlainQuery CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
