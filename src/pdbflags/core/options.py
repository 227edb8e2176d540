"""Option-token classification for MSVC-style command lines."""

from __future__ import annotations

OPTION_PREFIXES: tuple[str, ...] = ("/", "-")
"""Characters that introduce an option. ``cl.exe`` accepts both forms."""


def is_command_line_option(argument: str) -> bool:
    """Return True if *argument* is an option rather than a positional input.

    Args:
        argument: A single token produced by the tokenizer.

    Returns:
        True when the token starts with ``/`` or ``-``.
    """
    return argument.startswith(OPTION_PREFIXES)
