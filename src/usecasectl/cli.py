"""Root CLI group for usecasectl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from usecasectl import __version__
from usecasectl.commands import register_commands
from usecasectl.commands._base import UcGroup
from usecasectl.commands._context import AppContext
from usecasectl.config.settings import UcSettings


@click.group(
    cls=UcGroup,
    invoke_without_command=True,
    examples="""\
  usecasectl lint title Purchase Items
  usecasectl create purchase-items.json
  usecasectl list
  usecasectl --storage-dir ./use-cases --json list""",
)
@click.version_option(version=__version__, prog_name="usecasectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--storage-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding use-case records.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    storage_dir: Path | None,
) -> None:
    """usecasectl — author and store goal-oriented use cases."""
    settings = UcSettings.from_cli(
        config_path=config_path,
        storage_dir=storage_dir,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
