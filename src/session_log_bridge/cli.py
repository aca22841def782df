"""Click command group exposing metadata, the severity map, and a live demo.

Contents
--------
* :func:`cli` - root group; prints the metadata banner without a subcommand.
* ``info`` / ``levels`` / ``demo`` subcommands.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import os
from typing import Sequence

import click
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from . import config as config_module
from .adapters.console import RichConsoleSink
from .bridge import SessionLogBridge, summary_info
from .domain import DEFAULT_CATEGORY, ROOT_NAMESPACE, SessionLevel, TargetLevel

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_THRESHOLDS = [level.value for level in TargetLevel if level.emits]


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from a nearby .env before running commands (env: {config_module.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool) -> None:
    """Inspect and exercise the session log bridge."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    try:
        wanted = config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR))
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint=config_module.DOTENV_ENV_VAR) from exc
    if wanted:
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


def _build_bridge() -> SessionLogBridge:
    """Return a bridge configured from the environment, reporting bad switches as CLI errors."""

    try:
        return SessionLogBridge()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("levels", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--categories/--no-categories", default=False, help="Also list the logger name of every category.")
def cli_levels(categories: bool) -> None:
    """Show how host severities map onto facility levels."""

    bridge = _build_bridge()
    console = Console(highlight=False, width=100)

    table = Table(title="Severity map")
    table.add_column("Session level")
    table.add_column("Code", justify="right")
    table.add_column("Target level")
    for source, target in bridge.translator.items():
        table.add_row(source.name, str(int(source)), target.name)
    table.add_row(SessionLevel.OFF.name, str(int(SessionLevel.OFF)), bridge.translate(SessionLevel.OFF).name)
    console.print(table)

    if categories:
        names = Table(title="Category loggers")
        names.add_column("Category")
        names.add_column("Logger name")
        for category in bridge.registry.names():
            names.add_row(category, bridge.registry.handle_name(category))
        console.print(names)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--threshold",
    type=click.Choice(_THRESHOLDS, case_sensitive=False),
    default=TargetLevel.INFO.value,
    show_default=True,
    help=f"Level the demo sets on the {ROOT_NAMESPACE!r} logger.",
)
@click.option(
    "--category",
    default="sql",
    show_default=True,
    help=f"Category to log under; unknown names fall back to {DEFAULT_CATEGORY!r}.",
)
@click.option("--no-color", is_flag=True, help="Disable colour output.")
def cli_demo(threshold: str, category: str, no_color: bool) -> None:
    """Log one entry per session level and report how many were emitted."""

    level = TargetLevel.from_name(threshold)
    sink = RichConsoleSink(console=Console(no_color=no_color, highlight=False, width=120))
    bridge = _build_bridge()
    sink.attach(ROOT_NAMESPACE, level)
    emitted = 0
    sources = [source for source in SessionLevel if source is not SessionLevel.OFF]
    try:
        for source in sources:
            if bridge.should_log(source, category):
                emitted += 1
            bridge.log_message(source, f"demo {source.name} entry", category=category, session="demo")
    finally:
        sink.detach(ROOT_NAMESPACE)

    click.echo(f"emitted {emitted} of {len(sources)} entries to {bridge.registry.handle_name(category)} at threshold {level.name}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the click group in a test-friendly manner.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0.1...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


__all__ = ["cli", "main"]
