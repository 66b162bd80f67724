"""Specialized exceptions raised by the outdir_tempdir package.

Exception hierarchy::

    TempDirError (base for all package errors)
        TempDirIOError (filesystem failure, also OSError)
            CleanupError (recursive removal failed)
        PathEscapeError (path would leave the sandbox, also ValueError)
            ParentDirError (contains a ``..`` component)
            RootDirError (contains a root or drive component)
        RootNotFoundError (sandbox root unavailable)
        InvalidPathError (path resolves to the sandbox root, also ValueError)
"""

from __future__ import annotations

from pathlib import PurePath


class TempDirError(Exception):
    """Base exception for all outdir_tempdir errors.

    Examples:
        >>> raise TempDirError("Something went wrong")
        Traceback (most recent call last):
        ...
        outdir_tempdir.exceptions.TempDirError: Something went wrong
    """


class TempDirIOError(TempDirError, OSError):
    """A filesystem operation on the sandbox failed.

    The original ``OSError`` is chained as ``__cause__``.

    Attributes:
        path: Filesystem path the operation was applied to.
    """

    def __init__(self, message: str, path: PurePath) -> None:
        """Initialize TempDirIOError.

        Args:
            message: Human-readable error message.
            path: Filesystem path the operation was applied to.
        """
        super().__init__(message)
        self.path = path


class CleanupError(TempDirIOError):
    """Removing an auto-removed directory tree failed.

    Attributes:
        path: Top-level directory that could not be removed.
    """

    def __init__(self, path: PurePath, reason: str) -> None:
        """Initialize CleanupError.

        Args:
            path: Top-level directory that could not be removed.
            reason: Description of the underlying failure.
        """
        super().__init__(f"Failed to remove {path}: {reason}", path)
        self.reason = reason


class PathEscapeError(TempDirError, ValueError):
    """A requested path could escape the sandbox root.

    Attributes:
        path: The rejected input path, as given by the caller.
    """

    def __init__(self, message: str, path: PurePath) -> None:
        """Initialize PathEscapeError.

        Args:
            message: Human-readable error message.
            path: The rejected input path.
        """
        super().__init__(message)
        self.path = path


class ParentDirError(PathEscapeError):
    """The path contains a parent directory (``..``) component.

    Examples:
        >>> raise ParentDirError(PurePath("../tmp"))
        Traceback (most recent call last):
        ...
        outdir_tempdir.exceptions.ParentDirError: ../tmp contains parent dir
    """

    def __init__(self, path: PurePath) -> None:
        """Initialize ParentDirError.

        Args:
            path: The rejected input path.
        """
        super().__init__(f"{path} contains parent dir", path)


class RootDirError(PathEscapeError):
    """The path contains a root directory or drive component.

    Examples:
        >>> raise RootDirError(PurePath("/tmp/path"))
        Traceback (most recent call last):
        ...
        outdir_tempdir.exceptions.RootDirError: /tmp/path contains root dir
    """

    def __init__(self, path: PurePath) -> None:
        """Initialize RootDirError.

        Args:
            path: The rejected input path.
        """
        super().__init__(f"{path} contains root dir", path)


class RootNotFoundError(TempDirError):
    """The sandbox root could not be resolved from the environment.

    Attributes:
        reason: Why the root is unusable (unset, missing, not a directory...).
    """

    def __init__(self, reason: str) -> None:
        """Initialize RootNotFoundError.

        Args:
            reason: Why the root is unusable.
        """
        super().__init__(f"Root dir for test not found: {reason}")
        self.reason = reason


class InvalidPathError(TempDirError, ValueError):
    """The path is unusable, e.g. it resolves to the sandbox root itself.

    Attributes:
        path: The rejected input path.

    Examples:
        >>> raise InvalidPathError(".")
        Traceback (most recent call last):
        ...
        outdir_tempdir.exceptions.InvalidPathError: Invalid path .
    """

    def __init__(self, path: object) -> None:
        """Initialize InvalidPathError.

        Args:
            path: The rejected input path.
        """
        super().__init__(f"Invalid path {path}")
        self.path = path


__all__ = [
    "CleanupError",
    "InvalidPathError",
    "ParentDirError",
    "PathEscapeError",
    "RootDirError",
    "RootNotFoundError",
    "TempDirError",
    "TempDirIOError",
]
