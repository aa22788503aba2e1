"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from cbuild.services.build import CargoBuildTool

if TYPE_CHECKING:
    from cbuild.cli.context import CLIContext


def exit_with_code(code: int) -> None:
    """Exit with ``code`` unless it is 0."""
    if code != 0:
        raise typer.Exit(code=code)


def cargo_tool(ctx: CLIContext) -> CargoBuildTool:
    return CargoBuildTool(
        console=ctx.console,
        command=ctx.config.tool.command,
        cwd=ctx.config.tool.manifest_dir,
    )
