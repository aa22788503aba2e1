"""Build overrides given as make-style assignments.

Two overrides are recognized:

- ``release``: any non-empty value (or the bare word) requests a release build
- ``target=<name>``: restricts the build to the named target

Each one can come from the command line or from an environment variable of the
same name. The command line wins, as with make. An empty value is treated as
not set, matching make's ``ifdef``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .result import Err, Ok, Result

__all__ = ["Overrides", "OverrideError", "RELEASE", "TARGET", "parse_overrides"]

RELEASE = "release"
TARGET = "target"


@dataclass(frozen=True, slots=True)
class Overrides:
    """Overrides for a single invocation. Both default to "not set"."""

    release: bool = False
    target: str | None = None


@dataclass(frozen=True, slots=True)
class OverrideError:
    """A command-line token that is not a valid override."""

    token: str
    message: str
    hint: str | None = None


def _split(token: str) -> tuple[str, str | None]:
    key, sep, value = token.partition("=")
    return key.strip(), (value if sep else None)


def _defined(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def parse_overrides(
    args: Sequence[str],
    environ: Mapping[str, str] | None = None,
) -> Result[Overrides, OverrideError]:
    """Build Overrides from command-line tokens and the environment.

    Args:
        args: Tokens such as ``["release", "target=foo"]``.
        environ: Environment used for overrides missing from args
            (no environment lookup if None).

    Returns:
        Ok(Overrides), or Err(OverrideError) for the first bad token.
    """
    given: dict[str, str] = {}
    for token in args:
        key, value = _split(token)
        if key == RELEASE:
            given[RELEASE] = "1" if value is None else value
        elif key == TARGET:
            if value is None:
                return Err(
                    OverrideError(
                        token=token,
                        message="target needs a value",
                        hint="use target=<name>",
                    )
                )
            given[TARGET] = value
        else:
            return Err(
                OverrideError(
                    token=token,
                    message=f"unknown override: {token}",
                    hint="supported overrides: release, target=<name>",
                )
            )

    env = environ or {}
    release = _defined(given[RELEASE] if RELEASE in given else env.get(RELEASE))
    target = _defined(given[TARGET] if TARGET in given else env.get(TARGET))

    return Ok(Overrides(release=release is not None, target=target))
