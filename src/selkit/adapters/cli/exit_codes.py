"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values instead
of a bare ``1``. Signal codes (130, 141, 143) are informational only;
``lib_cli_exit_tools`` performs signal-to-exit-code translation itself.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    * 0-1: generic success / failure
    * 2: ENOENT, expression document not found
    * 22: EINVAL, selector rule violation or malformed document
    * 78: EX_CONFIG (sysexits.h), invalid ``[selkit]`` settings
    * 128+N: signal N (informational only)

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
