"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from DualSearch.cli.commands import SESSION_EVENTS
from DualSearch.cli.runner import CommandRunner
from DualSearch.config import DEFAULT_CONFIG_PATH, load_config, load_config_with_defaults


@click.group(help="DualSearch: classify queries and preview typeahead results.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    envvar="DUALSEARCH_CONFIG",
    help="Path to YAML config file, merged over config/default.yml when that exists.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from a .env file before resolving config, so
    DUALSEARCH_CONFIG may be set there.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()

    if config_path != DEFAULT_CONFIG_PATH and DEFAULT_CONFIG_PATH.exists():
        cfg = load_config_with_defaults(config_path)
    else:
        cfg = load_config(config_path)
    ctx.obj = cfg


@cli.command("classify")
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def classify_cmd(ctx: click.Context, words: tuple[str, ...]) -> None:
    """Classify TEXT as natural-language (ai) or keyword search."""
    CommandRunner(ctx.obj).run_classify(ctx.command.name, " ".join(words))


@cli.command("match")
@click.argument("query")
@click.pass_context
def match_cmd(ctx: click.Context, query: str) -> None:
    """Show typeahead matches for QUERY from the configured candidates."""
    CommandRunner(ctx.obj).run_match(ctx.command.name, query)


@cli.command("session", help=f"Replay stdin lines as search input events ({', '.join(SESSION_EVENTS)}).")
@click.option("--per-char", is_flag=True, help="Feed each line one keystroke at a time.")
@click.pass_context
def session_cmd(ctx: click.Context, per_char: bool) -> None:
    """Run an interactive search session reading events from stdin.

    Args:
        ctx: Click context.
        per_char: Feed each line one keystroke at a time.

    Raises:
        click.Abort: When the session fails.
    """
    stdin = click.get_text_stream("stdin")
    CommandRunner(ctx.obj).run_session(ctx.command.name, stdin, per_char=per_char)
