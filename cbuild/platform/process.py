"""Run the external build tool with its output streamed to the terminal.

The child's exit status is returned as-is. Only a failure to start the
process at all is reported as an error.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from cbuild.core.result import Err, Ok, Result

__all__ = ["ProcessError", "format_command", "run_passthrough"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """The command could not be started.

    Attributes:
        command: The command that was executed.
        message: OS error text (e.g. "No such file or directory").
    """

    command: tuple[str, ...]
    message: str

    def __str__(self) -> str:
        return f"{self.command[0]}: {self.message}"


def format_command(cmd: list[str]) -> str:
    return " ".join(cmd)


def run_passthrough(
    cmd: list[str],
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
) -> Result[int, ProcessError]:
    """Execute a command without capturing output.

    Ctrl-C reaches the child through the terminal's process group; the child
    is left to shut down on its own and its status is returned.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory (current directory if None).
        env: Environment variables (uses current env if None).

    Returns:
        Ok(returncode) once the process has exited, whatever the code.
        Err(ProcessError) if the process could not be started.
    """
    try:
        proc = subprocess.Popen(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            env=env,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), message=e.strerror or str(e)))

    try:
        returncode = proc.wait()
    except KeyboardInterrupt:
        returncode = proc.wait()

    if returncode < 0:
        # Killed by a signal: report it the way a shell would.
        return Ok(128 - returncode)
    return Ok(returncode)
