"""Tests for the outdir_tempdir.exceptions module."""

from __future__ import annotations

from pathlib import Path, PurePath

import pytest

from outdir_tempdir.exceptions import (
    CleanupError,
    InvalidPathError,
    ParentDirError,
    PathEscapeError,
    RootDirError,
    RootNotFoundError,
    TempDirError,
    TempDirIOError,
)


class TestHierarchy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "exc_type",
        [TempDirIOError, CleanupError, PathEscapeError, ParentDirError, RootDirError, RootNotFoundError, InvalidPathError],
    )
    def test_all_are_tempdir_errors(self, exc_type: type[Exception]) -> None:
        """Every package error inherits from TempDirError."""
        assert issubclass(exc_type, TempDirError)

    def test_io_error_is_os_error(self) -> None:
        """TempDirIOError is also an OSError."""
        assert issubclass(TempDirIOError, OSError)

    def test_cleanup_error_is_io_error(self) -> None:
        """CleanupError inherits from TempDirIOError."""
        assert issubclass(CleanupError, TempDirIOError)

    def test_escape_errors_are_value_errors(self) -> None:
        """Path escapes are also ValueError."""
        assert issubclass(ParentDirError, PathEscapeError)
        assert issubclass(RootDirError, PathEscapeError)
        assert issubclass(PathEscapeError, ValueError)

    def test_invalid_path_is_value_error(self) -> None:
        """InvalidPathError is also a ValueError."""
        assert issubclass(InvalidPathError, ValueError)


class TestMessages:
    """Tests for error messages and attributes."""

    def test_parent_dir(self) -> None:
        """ParentDirError names the path."""
        exc = ParentDirError(PurePath("../x"))
        assert str(exc) == f"{PurePath('../x')} contains parent dir"
        assert exc.path == PurePath("../x")

    def test_root_dir(self) -> None:
        """RootDirError names the path."""
        exc = RootDirError(PurePath("/x"))
        assert str(exc) == f"{PurePath('/x')} contains root dir"
        assert exc.path == PurePath("/x")

    def test_root_not_found(self) -> None:
        """RootNotFoundError carries the reason."""
        exc = RootNotFoundError("OUTDIR_TEMPDIR_ROOT is not set")
        assert str(exc) == "Root dir for test not found: OUTDIR_TEMPDIR_ROOT is not set"
        assert exc.reason == "OUTDIR_TEMPDIR_ROOT is not set"

    def test_invalid_path(self) -> None:
        """InvalidPathError names the path."""
        exc = InvalidPathError(".")
        assert str(exc) == "Invalid path ."
        assert exc.path == "."

    def test_io_error(self) -> None:
        """TempDirIOError keeps the path."""
        exc = TempDirIOError("Cannot create /x", Path("/x"))
        assert str(exc) == "Cannot create /x"
        assert exc.path == Path("/x")

    def test_cleanup_error(self) -> None:
        """CleanupError keeps path and reason."""
        exc = CleanupError(Path("/x"), "gone")
        assert str(exc) == f"Failed to remove {Path('/x')}: gone"
        assert exc.reason == "gone"

    def test_catch_as_tempdir_error(self) -> None:
        """Catchable as TempDirError."""
        with pytest.raises(TempDirError):
            raise ParentDirError(PurePath(".."))
