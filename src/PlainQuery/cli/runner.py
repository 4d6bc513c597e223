"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from PlainQuery.cli.commands import TranslateCommand, TreeCommand, read_query_file
from PlainQuery.config import AppConfig
from PlainQuery.core.errors import QueryError
from PlainQuery.core.models import TranslationResult
from PlainQuery.services import create_translator
from PlainQuery.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, component creation and error handling for
    CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def _configure_logging(self, action: str) -> None:
        log_path = configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        if log_path:
            log.debug("Logging to %s", log_path)

    def run_translate(
        self,
        action: str,
        queries: Sequence[str],
        input_path: Path | None = None,
    ) -> list[TranslationResult]:
        """Translate queries given inline and/or read from a file.

        Args:
            action: The CLI command name (e.g., 'translate').
            queries: Queries given on the command line.
            input_path: Optional file holding one query per line.

        Returns:
            One result per query, inline queries first.

        Raises:
            click.Abort: When the command cannot run at all.
        """
        self._configure_logging(action)
        try:
            batch = list(queries)
            if input_path is not None:
                batch.extend(read_query_file(input_path))
                log.info("Read queries from %s", input_path)

            command = TranslateCommand(translator=create_translator(self.config))
            return command.execute(batch)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Translate failed: %s", e)
            raise click.Abort from e

    def run_tree(self, action: str, query: str) -> str:
        """Parse one query and return its normalized tree.

        Raises:
            click.Abort: When the query cannot be parsed.
        """
        self._configure_logging(action)
        try:
            return TreeCommand().execute(query)
        except QueryError as e:
            log.error("%s: %s", type(e).__name__, e)
            raise click.Abort from e
