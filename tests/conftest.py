"""Shared fixtures for pdbflags tests."""

import pathlib

import pytest


@pytest.fixture
def work_dir(tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> pathlib.Path:
    """Run the test from an empty temporary directory.

    Keeps a stray ``.pdbflags.yaml`` in the real working directory from
    leaking into config discovery.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def json_config(work_dir: pathlib.Path) -> pathlib.Path:
    """Create a default config file selecting JSON output."""
    config = work_dir / ".pdbflags.yaml"
    config.write_text("format: json\nwatch_warnings:\n  - 4996\n  - 4265\n")
    return config
