"""Shared fixtures for CLI tests.

Provides a CliRunner rooted in an empty working directory and helpers
for writing batch input files.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner(work_dir: Path) -> CliRunner:
    """Create a Click CliRunner that runs inside an empty directory."""
    return CliRunner()


@pytest.fixture
def command_line_file(work_dir: Path) -> Path:
    """Create a batch file with two command lines and blank lines."""
    path = work_dir / "cmdlines.txt"
    path.write_text(
        "cl.exe /c /W3 /wd4996 /wd4100 a.cpp\n"
        "\n"
        "   \n"
        "cl.exe /O2 /MDd /GL b.cpp\n",
        encoding="utf-8",
    )
    return path
