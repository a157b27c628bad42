"""Process exit codes for the tvcode CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes, grouped by category in ranges of ten."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    INTERRUPTED = 2

    # Configuration (10-19)
    CONFIG_ERROR = 11

    # Targets (20-29)
    TARGET_NOT_FOUND = 20

    # External tools (30-39)
    TOOL_NOT_AVAILABLE = 30

    # Operations (40-49)
    OPERATION_FAILED = 40
