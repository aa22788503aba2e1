"""Typed loading of the optional cbuild.toml.

Example:

    [tool]
    command = ["cargo", "+nightly"]
    manifest_dir = "crates/app"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_str_list, get_table

__all__ = [
    "CONFIG_FILENAME",
    "CONFIG_ENV_VAR",
    "Config",
    "ConfigError",
    "ToolConfig",
    "find_config",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "cbuild.toml"
CONFIG_ENV_VAR = "CBUILD_CONFIG"
DEFAULT_COMMAND = ("cargo",)


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class ToolConfig:
    """External build tool settings."""

    command: tuple[str, ...] = DEFAULT_COMMAND
    manifest_dir: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    tool: ToolConfig = field(default_factory=ToolConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object], base_dir: Path | None = None) -> Config:
        """Create Config from parsed TOML.

        ``manifest_dir`` is resolved against ``base_dir`` when relative.
        """
        tool: StrDict = get_table(data, "tool") or {}

        if "command" in tool:
            command_list = get_str_list(tool, "command")
            command_str = get_str(tool, "command")
            if command_list:
                command = tuple(command_list)
            elif command_str is not None:
                command = (command_str,)
            else:
                raise ValueError("tool.command must be a string or a list of strings")
        else:
            command = DEFAULT_COMMAND

        manifest_dir: Path | None = None
        raw_dir = get_str(tool, "manifest_dir")
        if raw_dir is not None:
            manifest_dir = Path(raw_dir).expanduser()
            if base_dir is not None and not manifest_dir.is_absolute():
                manifest_dir = base_dir / manifest_dir

        return cls(tool=ToolConfig(command=command, manifest_dir=manifest_dir))


def find_config(
    explicit: Path | None,
    environ: Mapping[str, str],
    cwd: Path,
) -> Path | None:
    """Pick the config path: explicit option, then $CBUILD_CONFIG, then ./cbuild.toml.

    Returns None when nothing was requested and ./cbuild.toml doesn't exist.
    """
    if explicit is not None:
        return explicit.expanduser()
    env_value = environ.get(CONFIG_ENV_VAR, "").strip()
    if env_value:
        return Path(env_value).expanduser()
    candidate = cwd / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to cbuild.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value, base_dir=path.parent))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path | None) -> Result[Config, ConfigError]:
    """Load config from ``path``, or return the defaults when ``path`` is None."""
    if path is None:
        return Ok(Config())
    return load_config(path)
