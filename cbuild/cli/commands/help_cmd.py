"""Help command - print the one-line usage.

Needs no configuration, so a broken cbuild.toml or --config path never
stops it from printing.
"""

from __future__ import annotations

from cbuild.output.console import RichConsole
from cbuild.services.build import CargoBuildTool, Command, dispatch


def help_cmd() -> None:
    """Show usage for the build overrides."""
    console = RichConsole()
    dispatch(Command.help, [], tool=CargoBuildTool(console=console), console=console)
