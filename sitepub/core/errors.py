"""Error codes for CLI exit status.

Each failure class of a publish run maps to its own process exit code so
wrapper scripts can tell a broken build apart from a failed swap.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad input, declined confirmation)
    - 2: Configuration error (missing or invalid sitepub.toml)
    - 3: Build error (build command returned non-zero)
    - 4: Publish error (publish command returned non-zero)
    - 5: I/O error (clearing the target, writing or removing the marker)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    BUILD_ERROR = 3
    PUBLISH_ERROR = 4
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
