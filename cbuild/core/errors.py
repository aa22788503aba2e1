"""Exit codes for the cbuild CLI.

Only errors raised by cbuild itself are listed here. A failing build is not
one of them: the build tool's own exit status is returned unchanged.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success
    - 1: User error (unknown override, malformed assignment)
    - 2: Environment error (build tool missing, unreadable config)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2

