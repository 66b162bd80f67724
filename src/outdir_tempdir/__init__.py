"""Sandboxed, path-sanitized temporary directories for test harnesses.

Directories are created beneath the single sandbox root named by the
``OUTDIR_TEMPDIR_ROOT`` environment variable. Requested paths are sanitized
first, so a handle can never create or remove anything outside that root.

Examples:
    Random directory removed when the block ends:

    >>> from outdir_tempdir import TempDir
    >>> with TempDir.create_random().auto_remove() as tmp:  # doctest: +SKIP
    ...     (tmp.path / "out.log").write_text("ok")

    Named directory kept after the handle is gone:

    >>> TempDir.create("foo/bar/baz").path  # doctest: +SKIP
    PosixPath('/path/to/sandbox/foo/bar/baz')
"""

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
from outdir_tempdir.meta import __version__
from outdir_tempdir.root import ROOT_ENV_VAR, resolve_root
from outdir_tempdir.sanitize import sanitize_path
from outdir_tempdir.tempdir import TempDir

__all__ = [
    "ROOT_ENV_VAR",
    "CleanupError",
    "InvalidPathError",
    "ParentDirError",
    "PathEscapeError",
    "RootDirError",
    "RootNotFoundError",
    "TempDir",
    "TempDirError",
    "TempDirIOError",
    "__version__",
    "resolve_root",
    "sanitize_path",
]
