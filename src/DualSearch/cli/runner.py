"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

from typing import Iterable

import click

from DualSearch.cli.commands import ClassifyCommand, MatchCommand, SessionCommand
from DualSearch.config import AppConfig
from DualSearch.renderers import create_output_writer
from DualSearch.services import create_search_session
from DualSearch.sources.registry import build_provider
from DualSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Configures logging per action, builds the components a command needs and
    turns any failure into ``click.Abort`` at the CLI boundary.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def run_classify(self, action: str, text: str) -> None:
        self._configure_logging(action)
        try:
            ClassifyCommand(echo=click.echo).execute(text)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Classify failed: %s", e)
            raise click.Abort from e

    def run_match(self, action: str, query: str) -> None:
        self._configure_logging(action)
        try:
            provider = build_provider(self.config.candidates.source, config=self.config)
            MatchCommand(provider=provider, echo=click.echo).execute(query)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Match failed: %s", e)
            raise click.Abort from e

    def run_session(self, action: str, lines: Iterable[str], *, per_char: bool = False) -> None:
        """Run an event-replay session.

        Args:
            action: The CLI command name (e.g., 'session').
            lines: Input lines, one event per line.
            per_char: Feed plain lines one keystroke at a time.

        Raises:
            click.Abort: When the session fails.
        """
        self._configure_logging(action)
        try:
            command = SessionCommand(
                session=create_search_session(self.config),
                output_writer=create_output_writer(self.config),
                per_char=per_char,
            )
            command.execute(lines)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Session failed: %s", e)
            raise click.Abort from e
