"""Core domain types and logic."""

from .config import Config, ConfigError, load_config
from .errors import ErrorCode
from .flags import resolve_flags
from .overrides import OverrideError, Overrides, parse_overrides
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    # errors
    "ErrorCode",
    # flags
    "resolve_flags",
    # overrides
    "OverrideError",
    "Overrides",
    "parse_overrides",
    # result
    "Err",
    "Ok",
    "Result",
]
