from __future__ import annotations

import os
from pathlib import Path

import typer

from cbuild import __version__
from cbuild.cli.commands.build_cmd import build
from cbuild.cli.commands.help_cmd import help_cmd
from cbuild.core.config import CONFIG_ENV_VAR


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode=None,
)


# Commands
app.command()(build)
app.command("help")(help_cmd)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Path to cbuild.toml (overrides $CBUILD_CONFIG and ./cbuild.toml)",
        show_default=False,
    ),
) -> None:
    # Checked when a command loads it.
    if config is not None:
        os.environ[CONFIG_ENV_VAR] = str(config.expanduser())


def main() -> None:
    app()
