"""Per-warning directives: ``/wdNNNN``, ``/weNNNN``, ``/woNNNN``, ``/wLNNNN``.

``cl.exe`` stores the "once" and "as error" markers of a warning in the
same slot as its level, so a later ``/wo4265`` replaces an earlier
``/w14265`` instead of combining with it. ``WarningState`` models that slot
as a single value per warning number. The conflation is the compiler's, and
it is reproduced here because suppression decisions have to agree with what
the compiler actually emitted::

    cl.exe /c /W1 /wd4265 /w14265 /wo4265 C4265.cpp   # no C4265
    cl.exe /c /W1 /wd4265 /w14265 C4265.cpp           # C4265 emitted

References
----------
.. [WL] "/w, /W0, /W1, /W2, /W3, /W4, /w1, /w2, /w3, /w4, /Wall, /wd, /we,
   /wo, /Wv, /WX (Warning level)", Microsoft Learn.
"""

from __future__ import annotations

import logging
from enum import IntEnum

logger = logging.getLogger(__name__)

_DIRECTIVE_LENGTH = 7


# ---------------------------------------------------------------------------
# WarningState: the most recent directive seen for one warning number
# ---------------------------------------------------------------------------


class WarningState(IntEnum):
    """Override recorded for a single warning number.

    ``LEVEL1`` through ``LEVEL4`` carry their level as their integer value,
    so ``state.value`` is directly comparable to a global warning level.
    The remaining members have no numeric meaning.
    """

    LEVEL1 = 1
    LEVEL2 = 2
    LEVEL3 = 3
    LEVEL4 = 4
    AS_ERROR = 5
    ONCE = 6
    DISABLED = 7


_MODE_STATES: dict[str, WarningState] = {
    "d": WarningState.DISABLED,
    "e": WarningState.AS_ERROR,
    "o": WarningState.ONCE,
    "1": WarningState.LEVEL1,
    "2": WarningState.LEVEL2,
    "3": WarningState.LEVEL3,
    "4": WarningState.LEVEL4,
}


def parse_warning_directive(argument: str) -> tuple[int, WarningState] | None:
    """Decode a per-warning option such as ``/wd4996`` or ``-w14265``.

    Only the seven-character form is recognized: an option introducer,
    ``w``, a mode character and a four-digit warning number.

    Args:
        argument: An option token, introducer included.

    Returns:
        ``(warning_number, state)``, or None if the token is not a
        well-formed per-warning directive.
    """
    if len(argument) != _DIRECTIVE_LENGTH or argument[1] != "w":
        return None

    state = _MODE_STATES.get(argument[2])
    if state is None:
        return None

    digits = argument[3:]
    if not (digits.isascii() and digits.isdigit()):
        logger.debug("Ignoring warning directive with bad number: %s", argument)
        return None

    return int(digits), state


def is_warning_enabled(state: WarningState, warning_level: int) -> bool:
    """Decide whether a warning with override *state* is still emitted.

    ``AS_ERROR`` and ``ONCE`` always count as enabled, whatever the global
    level. ``LEVELn`` is enabled when the final global *warning_level* is at
    least ``n``.

    Args:
        state: The last directive seen for the warning.
        warning_level: The fully resolved global warning level.

    Returns:
        False only when the warning is explicitly turned off.
    """
    if state in (WarningState.AS_ERROR, WarningState.ONCE):
        return True
    if state == WarningState.DISABLED:
        return False
    if state in (
        WarningState.LEVEL1,
        WarningState.LEVEL2,
        WarningState.LEVEL3,
        WarningState.LEVEL4,
    ):
        return warning_level >= state.value

    # Unreachable for real WarningState values. Never drop a warning we
    # could not classify.
    logger.debug("Unexpected warning state %r treated as enabled", state)
    return True
