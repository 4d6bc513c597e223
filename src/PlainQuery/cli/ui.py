"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from PlainQuery.cli.runner import CommandRunner
from PlainQuery.config import apply_overrides, load_config_with_defaults
from PlainQuery.renderers import render_results


def _parse_boosts(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str] | None:
    """Turn repeated `--boost FIELD=SUFFIX` options into a mapping."""
    del ctx
    if not values:
        return None
    boosts: dict[str, str] = {}
    for value in values:
        name, sep, suffix = value.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"expected FIELD=SUFFIX, got {value!r}", param=param)
        boosts[name.strip()] = suffix.strip()
    return boosts


@click.group(help="PlainQuery: translate plain-English queries into Lucene syntax.")
@click.version_option(package_name="plainquery")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    envvar="PLAINQUERY_CONFIG",
    help="Path to YAML config file merged over the built-in defaults.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override log.level from the config.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Optional path to YAML config file.
        log_level: Optional log level override.
    """
    load_dotenv()

    cfg = load_config_with_defaults(config_path)
    ctx.obj = apply_overrides(cfg, log_level=log_level)


@cli.command("translate")
@click.argument("queries", nargs=-1)
@click.option("--field", default=None, help="Primary field searched by every term.")
@click.option("--similarity", default=None, help="Suffix appended to every term, e.g. ~0.6.")
@click.option(
    "--boost",
    "boosts",
    multiple=True,
    callback=_parse_boosts,
    metavar="FIELD=SUFFIX",
    help="Add a boosted clause for FIELD, e.g. title=^10. Repeatable.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default=None,
    help="Output format.",
)
@click.option(
    "--input",
    "input_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="File with one query per line.",
)
@click.pass_context
def translate_cmd(
    ctx: click.Context,
    queries: tuple[str, ...],
    field: str | None,
    similarity: str | None,
    boosts: dict[str, str] | None,
    output_format: str | None,
    input_path: Path | None,
) -> None:
    """Translate queries and print the Lucene query for each.

    Exits with status 1 when any query fails to translate.
    """
    if not queries and input_path is None:
        raise click.UsageError("Give at least one QUERY or --input FILE.")
    try:
        cfg = apply_overrides(
            ctx.obj,
            field=field,
            similarity=similarity,
            boosts=boosts,
            output_format=output_format,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    results = CommandRunner(cfg).run_translate(ctx.command.name, queries, input_path)
    click.echo(render_results(results, cfg.output.format))
    if any(not result.ok for result in results):
        ctx.exit(1)


@cli.command("tree")
@click.argument("query")
@click.pass_context
def tree_cmd(ctx: click.Context, query: str) -> None:
    """Print the normalized query tree for QUERY."""
    click.echo(CommandRunner(ctx.obj).run_tree(ctx.command.name, query))
