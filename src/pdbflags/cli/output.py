"""Rich output formatting helpers for the pdbflags CLI.

Settings that weaken analysis or hardening are highlighted:
    optimizations off, debug C runtime = yellow
    explicitly disabled warnings = bold red
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pdbflags.core import CompilerCommandLine

console = Console()


def _flag_text(value: bool, bad_when: bool | None = None) -> Text:
    """Render a boolean setting, styled yellow when it equals *bad_when*."""
    label = "yes" if value else "no"
    if bad_when is not None and value == bad_when:
        return Text(label, style="yellow")
    return Text(label, style="green" if value else "dim")


def print_settings(settings: CompilerCommandLine) -> None:
    """Print the resolved settings for one command line.

    Args:
        settings: Resolved settings record.
    """
    console.print(Panel(Text(settings.raw or "(empty)"), title="Command Line"))

    table = Table(show_header=True, header_style="bold")
    table.add_column("Setting", style="bold")
    table.add_column("Value", justify="center")
    table.add_row("Warning level", str(settings.warning_level))
    table.add_row("Warnings as errors", _flag_text(settings.warnings_as_errors))
    table.add_row(
        "Optimizations",
        _flag_text(settings.optimizations_enabled, bad_when=False),
    )
    table.add_row(
        "Debug C runtime",
        _flag_text(settings.uses_debug_c_runtime, bad_when=True),
    )
    table.add_row(
        "String pooling (/GF)",
        _flag_text(settings.eliminate_duplicate_strings_enabled),
    )
    table.add_row(
        "Whole program optimization (/GL)",
        _flag_text(settings.whole_program_optimization_enabled),
    )
    console.print(table)

    disabled = settings.warnings_explicitly_disabled
    if disabled:
        numbers = ", ".join(f"C{n}" for n in disabled)
        console.print(f"  Explicitly disabled: [bold red]{numbers}[/bold red]")
    else:
        console.print("  [green]No warnings explicitly disabled.[/green]")


def print_warning_report(
    settings: CompilerCommandLine,
    warnings: list[int],
) -> None:
    """Print a table showing whether each warning is explicitly disabled.

    Args:
        settings: Resolved settings record.
        warnings: Warning numbers to report on, in display order.
    """
    table = Table(title="Warning Status", show_header=True, header_style="bold")
    table.add_column("Warning", style="bold")
    table.add_column("Status", justify="center")
    for number in warnings:
        if settings.is_warning_explicitly_disabled(number):
            status = Text("DISABLED", style="bold red")
        else:
            status = Text("not disabled", style="green")
        table.add_row(f"C{number}", status)
    console.print(table)

    disabled = sum(1 for n in warnings if settings.is_warning_explicitly_disabled(n))
    console.print(
        f"[bold]{len(warnings)}[/bold] warnings checked | "
        f"[red]{disabled} disabled[/red] | warning level {settings.warning_level}"
    )

