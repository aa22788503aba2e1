"""Build command - run cargo build with flags from make-style overrides."""

from __future__ import annotations

import os

import typer

from cbuild.cli.commands._helpers import cargo_tool, exit_with_code
from cbuild.cli.context import build_context
from cbuild.core.errors import ErrorCode
from cbuild.core.flags import resolve_flags
from cbuild.core.overrides import parse_overrides
from cbuild.core.result import Err, Ok
from cbuild.output.console import Style
from cbuild.services.build import USAGE, Command, dispatch


def build(
    overrides: list[str] | None = typer.Argument(
        None,
        metavar="[release] [target=<name>]",
        help="Overrides; the 'release' and 'target' env vars are used when omitted.",
        show_default=False,
    ),
) -> None:
    """Build with cargo, in release mode and/or for one target if requested."""
    ctx = build_context()

    match parse_overrides(overrides or [], os.environ):
        case Err(e):
            ctx.console.error(e.message)
            if e.hint:
                ctx.console.print(f"hint: {e.hint}", Style.DIM)
            ctx.console.print(USAGE, Style.DIM)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        case Ok(parsed):
            pass

    flags = resolve_flags(parsed, ctx.console)
    exit_with_code(dispatch(Command.build, flags, tool=cargo_tool(ctx), console=ctx.console))
