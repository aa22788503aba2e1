from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from cbuild.core.config import Config, find_config, load_config_or_default
from cbuild.core.errors import ErrorCode
from cbuild.core.result import Err
from cbuild.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol


def build_context() -> CLIContext:
    console = RichConsole()

    config_result = load_config_or_default(find_config(None, os.environ, Path.cwd()))
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(config=config_result.value, console=console)
