"""Tests for command_line_to_argv (CommandLineToArgvW splitting rules).

Covers the program-name token, whitespace separation, quoting, and the
backslash-before-quote escaping rules.
"""

from __future__ import annotations

import pytest

from pdbflags.core import command_line_to_argv


class TestEmptyInput:
    """None, empty and whitespace-only input produce no tokens."""

    @pytest.mark.parametrize("raw", [None, "", " ", "\t", "  \t  "])
    def test_no_tokens(self, raw: str | None) -> None:
        assert command_line_to_argv(raw) == []


class TestSeparators:
    """Spaces and tabs outside quotes separate tokens."""

    def test_simple_split(self) -> None:
        assert command_line_to_argv("cl.exe /c /W3") == ["cl.exe", "/c", "/W3"]

    def test_runs_of_whitespace_collapse(self) -> None:
        assert command_line_to_argv("cl\t/c \t  /W4 ") == ["cl", "/c", "/W4"]

    def test_leading_whitespace_skipped(self) -> None:
        assert command_line_to_argv("   cl /c") == ["cl", "/c"]

    def test_first_token_may_be_an_option(self) -> None:
        """PDB command lines often omit the program name."""
        assert command_line_to_argv("-c -Zi -W3") == ["-c", "-Zi", "-W3"]


class TestProgramName:
    """The first token is read without escape processing."""

    def test_quoted_program_with_spaces(self) -> None:
        raw = '"C:\\Program Files\\VC\\cl.exe" /c'
        assert command_line_to_argv(raw) == ["C:\\Program Files\\VC\\cl.exe", "/c"]

    def test_trailing_backslash_before_quote_is_literal(self) -> None:
        assert command_line_to_argv('"C:\\dir\\" /c') == ["C:\\dir\\", "/c"]

    def test_unterminated_quoted_program(self) -> None:
        assert command_line_to_argv('"C:\\my tools\\cl.exe') == ["C:\\my tools\\cl.exe"]


class TestQuoting:
    """Double quotes group text and are removed."""

    def test_quoted_argument(self) -> None:
        assert command_line_to_argv('cl "a b" c') == ["cl", "a b", "c"]

    def test_quotes_inside_argument(self) -> None:
        assert command_line_to_argv('cl /DNAME="a b" x') == ["cl", "/DNAME=a b", "x"]

    def test_quoted_option(self) -> None:
        assert command_line_to_argv('cl "/W4"') == ["cl", "/W4"]

    def test_empty_quoted_argument(self) -> None:
        assert command_line_to_argv('cl "" x') == ["cl", "", "x"]

    def test_doubled_quote_inside_quotes_is_literal_and_closes(self) -> None:
        assert command_line_to_argv('cl "a""b" c') == ["cl", 'a"b c']

    def test_unterminated_quote_runs_to_end(self) -> None:
        assert command_line_to_argv('cl "abc def') == ["cl", "abc def"]


class TestBackslashes:
    """Backslashes are special only when they precede a double quote."""

    def test_plain_backslashes_are_literal(self) -> None:
        assert command_line_to_argv(r"cl a\b c:\\share") == ["cl", r"a\b", r"c:\\share"]

    def test_odd_backslashes_escape_quote(self) -> None:
        assert command_line_to_argv(r'cl a\"b') == ["cl", 'a"b']

    def test_three_backslashes_before_quote(self) -> None:
        assert command_line_to_argv(r'cl a\\\"b') == ["cl", r'a\"b']

    def test_even_backslashes_before_quote_toggle_quoting(self) -> None:
        assert command_line_to_argv(r'cl a\\"b c"') == ["cl", r"a\b c"]

    def test_trailing_backslashes_kept(self) -> None:
        assert command_line_to_argv("cl /Fo.\\out\\") == ["cl", "/Fo.\\out\\"]
