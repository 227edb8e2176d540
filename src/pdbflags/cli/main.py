"""pdbflags CLI — Compiler settings from PDB-recorded command lines.

Entry point for the ``pdbflags`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    parse — Resolve and display the settings of one or more command lines.
    check — Report whether specific warnings are explicitly disabled.

Usage::

    pdbflags parse "cl.exe /c /W3 /wd4996 /wd4100"
    pdbflags parse --file cmdlines.txt --format json
    pdbflags check "cl.exe /c /W1 /wd4265" -w 4265 -w 4996
"""

from __future__ import annotations

import click

from pdbflags import __version__
from pdbflags.cli.check_cmd import check_command
from pdbflags.cli.parse_cmd import parse_command


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """pdbflags: Resolve compiler settings recorded in PDB command lines.

    Derives warning level, warnings-as-errors, optimization, C runtime,
    string pooling, whole program optimization and explicitly disabled
    warnings from the command line a compiler stored in debug metadata.
    """


# Register all subcommands
cli.add_command(parse_command)
cli.add_command(check_command)
