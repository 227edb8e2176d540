"""Windows command-line splitting, matching ``CommandLineToArgvW``.

Compilers record the command line in a PDB exactly as the driver received
it, so it has to be split the same way the driver split it. The rules are
those of ``shell32!CommandLineToArgvW``:

- The first token is the program name. If it starts with a double quote it
  runs to the next double quote, with no escape processing; otherwise it
  runs to the next space or tab.
- The remaining tokens are separated by runs of spaces and tabs that fall
  outside double quotes.
- ``2n`` backslashes followed by ``"`` produce ``n`` backslashes and the
  quote toggles quoting. ``2n + 1`` backslashes followed by ``"`` produce
  ``n`` backslashes and a literal ``"``. Backslashes not followed by a
  quote are literal.
- Inside a quoted run, ``""`` produces a literal ``"`` and closes the run.

References
----------
.. [CLA] "CommandLineToArgvW function (shellapi.h)", Microsoft Learn.
.. [PCA] "Parsing C++ command-line arguments", Microsoft Learn.
"""

from __future__ import annotations

_SEPARATORS = " \t"


def command_line_to_argv(command_line: str | None) -> list[str]:
    """Split a raw Windows command line into its argument tokens.

    Args:
        command_line: The raw command line. ``None`` is treated as empty.

    Returns:
        The ordered argument tokens, program name first. Empty when the
        input is empty or contains only spaces and tabs.
    """
    if not command_line or not command_line.strip(_SEPARATORS):
        return []

    length = len(command_line)
    pos = _skip_separators(command_line, 0)
    program, pos = _read_program_name(command_line, pos)
    argv = [program]

    while True:
        pos = _skip_separators(command_line, pos)
        if pos >= length:
            break
        argument, pos = _read_argument(command_line, pos)
        argv.append(argument)

    return argv


def _skip_separators(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _SEPARATORS:
        pos += 1
    return pos


def _read_program_name(text: str, pos: int) -> tuple[str, int]:
    """Read the program-name token, which gets no escape processing."""
    if text[pos] == '"':
        end = text.find('"', pos + 1)
        if end == -1:
            return text[pos + 1:], len(text)
        return text[pos + 1:end], end + 1

    end = pos
    while end < len(text) and text[end] not in _SEPARATORS:
        end += 1
    return text[pos:end], end


def _read_argument(text: str, pos: int) -> tuple[str, int]:
    """Read one argument starting at *pos*.

    Returns:
        The unescaped argument and the position just past it.
    """
    length = len(text)
    chars: list[str] = []
    in_quotes = False

    while pos < length:
        char = text[pos]

        if char in _SEPARATORS and not in_quotes:
            break

        if char == "\\":
            start = pos
            while pos < length and text[pos] == "\\":
                pos += 1
            count = pos - start
            if pos < length and text[pos] == '"':
                chars.append("\\" * (count // 2))
                if count % 2:
                    chars.append('"')
                    pos += 1
                # An even run leaves the quote for the next iteration.
            else:
                chars.append("\\" * count)
            continue

        if char == '"':
            if in_quotes and pos + 1 < length and text[pos + 1] == '"':
                chars.append('"')
                in_quotes = False
                pos += 2
                continue
            in_quotes = not in_quotes
            pos += 1
            continue

        chars.append(char)
        pos += 1

    return "".join(chars), pos
