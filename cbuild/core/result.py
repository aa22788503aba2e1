"""Result type for explicit error handling.

Fallible steps (parsing overrides, loading config, starting the build tool)
return ``Ok(value)`` or ``Err(error)`` instead of raising:

    match parse_overrides(args, os.environ):
        case Ok(overrides):
            flags = resolve_flags(overrides)
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result carrying ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result carrying ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
