"""Platform abstraction layer."""

from .process import (
    ProcessError,
    run_passthrough,
)

__all__ = [
    "ProcessError",
    "run_passthrough",
]
