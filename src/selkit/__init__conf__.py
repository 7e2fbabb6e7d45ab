"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml``; the ``LAYEREDCONF_*``
identifiers determine where lib_layered_config looks for configuration files.

Contents:
    * Module-level metadata constants.
    * :func:`print_info` - Render the metadata block used by ``selkit info``.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "selkit"
#: Human-readable summary shown in CLI help output.
title = "Fluent CSS selector builder with validated part ordering"
#: Current release version.
version = "1.0.0"
#: Repository homepage.
homepage = "https://github.com/selkit/selkit"
#: Author attribution.
author = "selkit contributors"
#: Contact email.
author_email = "selkit@users.noreply.github.com"
#: Console-script name published by the package.
shell_command = "selkit"

#: Vendor segment for macOS/Windows configuration paths.
LAYEREDCONF_VENDOR = "selkit"
#: Application segment for macOS/Windows configuration paths.
LAYEREDCONF_APP = "selkit"
#: Slug used for Linux (XDG) configuration paths and environment prefixes.
LAYEREDCONF_SLUG = "selkit"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for selkit:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
