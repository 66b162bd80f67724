"""Tests for the public package interface."""

from __future__ import annotations

import outdir_tempdir
from outdir_tempdir import meta


def test_public_exports() -> None:
    """Everything in __all__ is importable from the package."""
    for name in outdir_tempdir.__all__:
        assert hasattr(outdir_tempdir, name), name


def test_version_matches_meta() -> None:
    """The package version comes from meta."""
    assert outdir_tempdir.__version__ == meta.__version__


def test_root_env_var_name() -> None:
    """The sandbox root variable name is stable."""
    assert outdir_tempdir.ROOT_ENV_VAR == "OUTDIR_TEMPDIR_ROOT"
