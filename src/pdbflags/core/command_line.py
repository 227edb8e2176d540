"""Resolve the compiler settings recorded in a PDB command line.

``CompilerCommandLine.parse`` takes the raw ``cl.exe`` command line that the
compiler embedded in a PDB and derives the settings that matter for
code-quality and security analysis: warning level, warnings-as-errors,
optimization, C runtime flavor, string pooling, whole program optimization,
and the set of warnings that were explicitly turned off.

Resolution is a single left-to-right pass over the option tokens. For every
setting the last relevant option wins, just as it does in the driver.
Unrecognized options and positional arguments are skipped, so parsing never
fails.

References
----------
.. [CLO] "Compiler options listed alphabetically", Microsoft Learn.
.. [OPT] "/O options (Optimize code)", Microsoft Learn.
.. [GF] "/GF (Eliminate duplicate strings)", Microsoft Learn. "/GF is in
   effect when /O1 or /O2 is used."
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from pdbflags.core.options import is_command_line_option
from pdbflags.core.tokenizer import command_line_to_argv
from pdbflags.core.warning_directives import (
    WarningState,
    is_warning_enabled,
    parse_warning_directive,
)


# ---------------------------------------------------------------------------
# Flag table: option text (introducer stripped) -> settings it assigns
# ---------------------------------------------------------------------------

_OPTIMIZE = (("optimizations_enabled", True),)
_OPTIMIZE_AND_POOL_STRINGS = (
    ("optimizations_enabled", True),
    ("eliminate_duplicate_strings_enabled", True),
)

_FLAG_EFFECTS: dict[str, tuple[tuple[str, Any], ...]] = {
    # Warning level
    "w": (("warning_level", 0),),
    "W0": (("warning_level", 0),),
    "W1": (("warning_level", 1),),
    "W2": (("warning_level", 2),),
    "W3": (("warning_level", 3),),
    "W4": (("warning_level", 4),),
    "Wall": (("warning_level", 4),),
    "WX": (("warnings_as_errors", True),),
    "WX-": (("warnings_as_errors", False),),
    # Optimization
    "O1": _OPTIMIZE_AND_POOL_STRINGS,
    "O2": _OPTIMIZE_AND_POOL_STRINGS,
    "Og": _OPTIMIZE,
    "Os": _OPTIMIZE,
    "Ot": _OPTIMIZE,
    "Ox": _OPTIMIZE,
    "Od": (("optimizations_enabled", False),),
    # C runtime
    "MT": (("uses_debug_c_runtime", False),),
    "MD": (("uses_debug_c_runtime", False),),
    "MTd": (("uses_debug_c_runtime", True),),
    "MDd": (("uses_debug_c_runtime", True),),
    # Code generation
    "GL": (("whole_program_optimization_enabled", True),),
    "GL-": (("whole_program_optimization_enabled", False),),
    "GF": (("eliminate_duplicate_strings_enabled", True),),
}
"""Exact-match option table. Case matters: ``/w`` and ``/W`` differ."""


# ---------------------------------------------------------------------------
# CompilerCommandLine: the resolved settings record
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CompilerCommandLine:
    """Compiler settings resolved from one PDB-recorded command line.

    Instances are immutable. Build them with ``parse()``; the defaults are
    the settings of an empty command line.

    Attributes:
        raw: The command line exactly as recorded (``""`` if absent).
        warning_level: Global warning level in ``[0, 4]`` (``/W0``-``/W4``,
            ``/w``, ``/Wall``).
        warnings_as_errors: Whether ``/WX`` is in effect.
        optimizations_enabled: Whether any of ``/O1 /O2 /Og /Os /Ot /Ox``
            is in effect and was not undone by a later ``/Od``.
        uses_debug_c_runtime: Whether ``/MTd`` or ``/MDd`` is in effect.
        eliminate_duplicate_strings_enabled: Whether string pooling
            (``/GF``, implied by ``/O1`` and ``/O2``) is in effect.
        whole_program_optimization_enabled: Whether ``/GL`` is in effect.
        warnings_explicitly_disabled: Warning numbers turned off by per-warning
            directives, ascending and without duplicates.
    """

    raw: str = ""
    warning_level: int = 0
    warnings_as_errors: bool = False
    optimizations_enabled: bool = False
    uses_debug_c_runtime: bool = False
    eliminate_duplicate_strings_enabled: bool = False
    whole_program_optimization_enabled: bool = False
    warnings_explicitly_disabled: tuple[int, ...] = ()

    @classmethod
    def parse(cls, command_line: str | None) -> CompilerCommandLine:
        """Resolve the settings in effect for a raw compiler command line.

        Options are applied in order, so a later option overrides an earlier
        one in the same family. Per-warning directives are collected into a
        map keyed by warning number (last directive wins) and evaluated
        against the *final* warning level once the pass is complete.

        Args:
            command_line: The raw command line. ``None`` is treated as ``""``.

        Returns:
            The resolved settings. Never raises for any string input.
        """
        raw = command_line or ""
        settings: dict[str, Any] = {}
        explicit_warnings: dict[int, WarningState] = {}

        for argument in command_line_to_argv(raw):
            if not is_command_line_option(argument):
                continue

            effects = _FLAG_EFFECTS.get(argument[1:])
            if effects is not None:
                settings.update(effects)
                continue

            directive = parse_warning_directive(argument)
            if directive is not None:
                number, state = directive
                explicit_warnings[number] = state

        warning_level = settings.get("warning_level", 0)
        disabled = sorted(
            number
            for number, state in explicit_warnings.items()
            if not is_warning_enabled(state, warning_level)
        )

        return cls(
            raw=raw,
            warnings_explicitly_disabled=tuple(disabled),
            **settings,
        )

    def is_warning_explicitly_disabled(self, warning_number: int) -> bool:
        """Return True if *warning_number* was turned off by this command line."""
        return warning_number in self.warnings_explicitly_disabled

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view of the settings."""
        data = asdict(self)
        data["warnings_explicitly_disabled"] = list(self.warnings_explicitly_disabled)
        return data
