"""Tests for the pytest fixtures registered by outdir_tempdir."""

from __future__ import annotations

from pathlib import Path

import pytest

from outdir_tempdir.tempdir import RANDOM_PREFIX, TempDir


def test_outdir_root_fixture(outdir_root: Path, session_root: Path) -> None:
    """The root fixture resolves OUTDIR_TEMPDIR_ROOT."""
    assert outdir_root == session_root


def test_outdir_tempdir_fixture(outdir_tempdir: TempDir, session_root: Path) -> None:
    """The tempdir fixture yields a random auto-removed directory."""
    assert outdir_tempdir.path.is_dir()
    assert outdir_tempdir.path.parent == session_root
    assert outdir_tempdir.path.name.startswith(RANDOM_PREFIX)
    assert outdir_tempdir.autorm is True


def test_outdir_tempdir_removed_after_teardown(pytester: pytest.Pytester, sandbox: Path) -> None:
    """The fixture's directory and its contents are gone once the test ends."""
    pytester.makepyfile(
        """
        from pathlib import Path

        def test_writes(outdir_tempdir):
            (outdir_tempdir.path / "payload.txt").write_text("x", encoding="utf-8")
            Path("seen.txt").write_text(str(outdir_tempdir.path), encoding="utf-8")
        """
    )

    result = pytester.runpytest()

    result.assert_outcomes(passed=1)
    seen = Path((pytester.path / "seen.txt").read_text(encoding="utf-8"))
    assert seen.parent == sandbox
    assert not seen.exists()
    assert list(sandbox.iterdir()) == []
