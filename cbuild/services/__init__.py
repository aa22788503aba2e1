"""Services layer."""

from .build import USAGE, BuildTool, CargoBuildTool, Command, dispatch

__all__ = [
    "USAGE",
    "BuildTool",
    "CargoBuildTool",
    "Command",
    "dispatch",
]
