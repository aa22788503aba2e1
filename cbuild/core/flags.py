"""Turn build overrides into flags for the build tool."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .overrides import Overrides

if TYPE_CHECKING:
    from cbuild.output.console import ConsoleProtocol

__all__ = ["RELEASE_FLAG", "TARGET_FLAG", "resolve_flags", "target_flag"]

RELEASE_FLAG = "--release"
TARGET_FLAG = "--target"


def target_flag(name: str) -> str:
    """Single-token flag restricting the build to ``name``."""
    return f"{TARGET_FLAG}={name}"


def resolve_flags(overrides: Overrides, console: ConsoleProtocol | None = None) -> list[str]:
    """Return the flags for ``overrides``, release flag first.

    Each override that is set is announced on ``console`` (if given).
    Overrides that are not set add nothing, so the result may be empty.
    """
    flags: list[str] = []

    if overrides.release:
        if console is not None:
            console.info("building 'release'")
        flags.append(RELEASE_FLAG)

    if overrides.target is not None:
        if console is not None:
            console.info(f"Target is '{overrides.target}'")
        flags.append(target_flag(overrides.target))

    return flags
