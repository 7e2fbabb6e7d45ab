"""Values shared by the root group and every subcommand."""

from __future__ import annotations

from typing import Final

#: ``-h`` works everywhere ``--help`` does.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Traceback text is cut to this many characters unless ``--traceback`` is given.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Upper bound on traceback text with ``--traceback``.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
