"""Shared pytest fixtures for the outdir_tempdir test suite."""

from __future__ import annotations

# Disable Rich colors and force wide terminal BEFORE any imports
# Rich checks these at import time
import os

os.environ["NO_COLOR"] = "1"
os.environ["TERM"] = "dumb"
os.environ["FORCE_COLOR"] = "0"
os.environ["COLUMNS"] = "200"  # Prevent text wrapping in CLI output

from collections.abc import Iterator
from pathlib import Path

import pytest

from outdir_tempdir.root import ROOT_ENV_VAR

# pylint: disable=redefined-outer-name


@pytest.fixture(scope="session", autouse=True)
def session_root(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Path]:
    """Point OUTDIR_TEMPDIR_ROOT at a session-wide directory.

    Plays the part of the build tool that provides the sandbox root.
    """
    root = tmp_path_factory.mktemp("outdir")
    with pytest.MonkeyPatch.context() as mp:
        mp.setenv(ROOT_ENV_VAR, str(root))
        yield root


@pytest.fixture
def sandbox(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return a fresh, empty sandbox root private to the test."""
    root = tmp_path / "sandbox"
    root.mkdir()
    monkeypatch.setenv(ROOT_ENV_VAR, str(root))
    return root
