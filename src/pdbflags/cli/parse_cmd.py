"""``pdbflags parse [COMMAND_LINE]...`` — Resolve compiler settings.

Each positional argument is one complete command line (quote it in your
shell). ``--file`` adds one command line per non-blank line of a UTF-8 text
file, or of stdin when the path is ``-``.

Exit Codes:
    0 — All command lines were resolved.
    2 — No command lines were supplied, or input/config could not be read.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from pdbflags.config import OUTPUT_FORMATS, load_config
from pdbflags.core import CompilerCommandLine
from pdbflags.exceptions import InputError, PdbFlagsError

logger = logging.getLogger(__name__)


def read_command_lines(path: str) -> list[str]:
    """Read one command line per non-blank line from *path* (``-`` = stdin).

    Args:
        path: File path, or ``-`` for standard input.

    Returns:
        The non-blank lines, with surrounding whitespace removed.

    Raises:
        InputError: If the file cannot be read or is not valid UTF-8.
    """
    if path == "-":
        text = click.get_text_stream("stdin").read()
    else:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputError(f"Cannot read command lines from {path}: {exc}") from exc

    lines = [line.strip() for line in text.splitlines()]
    command_lines = [line for line in lines if line]
    logger.debug(
        "Read %d command lines from %s (%d blank lines skipped)",
        len(command_lines), path, len(lines) - len(command_lines),
    )
    return command_lines


@click.command("parse")
@click.argument("command_lines", nargs=-1)
@click.option(
    "--file", "input_file",
    type=str,
    default=None,
    help="Read additional command lines from a file, one per line ('-' for stdin).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(list(OUTPUT_FORMATS)),
    default=None,
    help="Output format: text or json (default: from config, else text).",
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: .pdbflags.yaml if present).",
)
def parse_command(
    command_lines: tuple[str, ...],
    input_file: str | None,
    output_format: str | None,
    config_path: Path | None,
) -> None:
    """Resolve compiler settings from PDB-recorded command lines.

    Prints warning level, warnings-as-errors, optimization, C runtime,
    string pooling, whole program optimization and the explicitly disabled
    warnings for every COMMAND_LINE.
    """
    try:
        config = load_config(config_path)
        inputs = list(command_lines)
        if input_file is not None:
            inputs.extend(read_command_lines(input_file))
    except PdbFlagsError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    output_format = output_format or config.format

    if not inputs:
        if output_format == "json":
            click.echo(json.dumps({"command_lines": [], "summary": "No command lines given"}))
        else:
            click.echo("No command lines given.")
        sys.exit(2)

    results = [CompilerCommandLine.parse(line) for line in inputs]

    if output_format == "json":
        click.echo(json.dumps([r.as_dict() for r in results], indent=2))
    else:
        from pdbflags.cli.output import print_settings
        for result in results:
            print_settings(result)

    sys.exit(0)
