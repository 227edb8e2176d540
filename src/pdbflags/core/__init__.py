"""Command-line resolution for PDB-recorded compiler invocations.

Submodules
----------
- ``tokenizer``: ``command_line_to_argv`` (Windows argument splitting).
- ``options``: ``is_command_line_option`` (option vs. positional).
- ``warning_directives``: ``WarningState`` and per-warning directive handling.
- ``command_line``: ``CompilerCommandLine``, the resolved settings record.

All public names are re-exported here::

    from pdbflags.core import CompilerCommandLine
"""

from pdbflags.core.command_line import CompilerCommandLine
from pdbflags.core.options import is_command_line_option
from pdbflags.core.tokenizer import command_line_to_argv
from pdbflags.core.warning_directives import (
    WarningState,
    is_warning_enabled,
    parse_warning_directive,
)

__all__ = [
    "CompilerCommandLine",
    "WarningState",
    "command_line_to_argv",
    "is_command_line_option",
    "is_warning_enabled",
    "parse_warning_directive",
]
