"""``pdbflags check COMMAND_LINE`` — Report whether warnings are disabled.

Warning numbers come from ``--warning`` (repeatable) or, when none are
given, from ``watch_warnings`` in the config file.

Exit Codes:
    0 — None of the listed warnings is explicitly disabled.
    1 — At least one listed warning is explicitly disabled.
    2 — No warnings to check, or the config could not be read.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from pdbflags.config import OUTPUT_FORMATS, load_config
from pdbflags.core import CompilerCommandLine
from pdbflags.exceptions import PdbFlagsError


def _report_to_json(settings: CompilerCommandLine, warnings: list[int]) -> dict:
    """Convert a warning report to a JSON-serializable dict.

    Args:
        settings: Resolved settings record.
        warnings: Warning numbers that were checked.

    Returns:
        Dictionary with the command line, level and per-warning status.
    """
    return {
        "command_line": settings.raw,
        "warning_level": settings.warning_level,
        "warnings": [
            {
                "warning": number,
                "explicitly_disabled": settings.is_warning_explicitly_disabled(number),
            }
            for number in warnings
        ],
    }


@click.command("check")
@click.argument("command_line")
@click.option(
    "--warning", "-w", "warnings",
    type=click.IntRange(min=0),
    multiple=True,
    help="Warning number to check (repeatable), e.g. -w 4996.",
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
def check_command(
    command_line: str,
    warnings: tuple[int, ...],
    output_format: str | None,
    config_path: Path | None,
) -> None:
    """Check whether COMMAND_LINE explicitly disables given warnings.

    Exit code 0 if none are disabled, 1 if any are.
    """
    try:
        config = load_config(config_path)
    except PdbFlagsError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    output_format = output_format or config.format
    to_check = list(dict.fromkeys(warnings)) or list(config.watch_warnings)
    if not to_check:
        click.echo(
            "Error: no warnings to check; pass --warning or set watch_warnings.",
            err=True,
        )
        sys.exit(2)

    settings = CompilerCommandLine.parse(command_line)

    if output_format == "json":
        click.echo(json.dumps(_report_to_json(settings, to_check), indent=2))
    else:
        from pdbflags.cli.output import print_warning_report
        print_warning_report(settings, to_check)

    any_disabled = any(settings.is_warning_explicitly_disabled(n) for n in to_check)
    sys.exit(1 if any_disabled else 0)
