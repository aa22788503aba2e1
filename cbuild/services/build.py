"""Build dispatch: run the build tool or print usage."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from pathlib import Path
from typing import Protocol

from cbuild.core.config import DEFAULT_COMMAND
from cbuild.core.errors import ErrorCode
from cbuild.core.result import Err, Ok
from cbuild.output.console import ConsoleProtocol, Style
from cbuild.platform.process import format_command, run_passthrough

__all__ = [
    "USAGE",
    "BuildTool",
    "CargoBuildTool",
    "Command",
    "dispatch",
]

USAGE = "usage: cbuild build [release=1] [target=<target>]"


class Command(StrEnum):
    """Commands accepted by dispatch."""

    build = "build"
    help = "help"


class BuildTool(Protocol):
    """External build tool. Returns the tool's exit status."""

    def build(self, flags: Sequence[str]) -> int: ...


class CargoBuildTool:
    """Runs ``cargo build <flags...>`` (or a configured replacement command)."""

    install_hint: str = "Install Rust via https://rustup.rs/"

    def __init__(
        self,
        console: ConsoleProtocol,
        command: Sequence[str] = DEFAULT_COMMAND,
        cwd: Path | None = None,
    ) -> None:
        self._console = console
        self._command = tuple(command)
        self._cwd = cwd

    def command_line(self, flags: Sequence[str]) -> list[str]:
        return [*self._command, "build", *flags]

    def build(self, flags: Sequence[str]) -> int:
        cmd = self.command_line(flags)
        self._console.print(format_command(cmd), Style.DIM)

        match run_passthrough(cmd, cwd=self._cwd):
            case Ok(returncode):
                return returncode
            case Err(error):
                self._console.error(str(error))
                self._console.print(f"hint: {self.install_hint}", Style.DIM)
                return int(ErrorCode.ENV_ERROR)


def dispatch(
    command: Command,
    flags: Sequence[str],
    *,
    tool: BuildTool,
    console: ConsoleProtocol,
) -> int:
    """Run ``command`` and return its exit status.

    ``build`` passes ``flags`` to the tool in order and returns its status
    unchanged. ``help`` prints the usage line and ignores ``flags``.
    """
    match command:
        case Command.build:
            return tool.build(list(flags))
        case Command.help:
            console.print(USAGE)
            return int(ErrorCode.OK)
