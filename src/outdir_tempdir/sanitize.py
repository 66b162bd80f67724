"""Path sanitization for sandboxed temporary directories.

The sanitizer is the only gate between a caller-supplied path and the
filesystem calls that create or remove directories, so it is kept pure: it
never touches the disk and always returns the same result for the same input.
"""

from __future__ import annotations

import logging
import os
from pathlib import PurePath

from outdir_tempdir.exceptions import InvalidPathError, ParentDirError, RootDirError

log = logging.getLogger(__name__)

#: Accepted input types for a relative target path.
PathInput = str | os.PathLike[str]

_PARENT_DIR = ".."
_CURRENT_DIR = "."


def _as_pure_path(path: PathInput) -> PurePath:
    """Convert caller input into a platform ``PurePath``.

    Args:
        path: String or path-like object.

    Returns:
        The input parsed with the platform path flavour.

    Raises:
        InvalidPathError: If the input is not text or contains a NUL byte.
    """
    try:
        raw = os.fspath(path)
    except TypeError as e:
        raise InvalidPathError(path) from e
    if not isinstance(raw, str):
        raise InvalidPathError(path)
    if "\x00" in raw:
        raise InvalidPathError(repr(raw))
    return PurePath(raw)


def sanitize_path(path: PathInput) -> PurePath:
    """Validate a relative path and normalize it to plain name segments.

    Both ``/`` and the native separator are accepted. Current directory
    segments are dropped; parent directory segments and anchored paths
    (root, drive or UNC prefix) are rejected.

    Args:
        path: Relative path requested by the caller.

    Returns:
        A relative ``PurePath`` made only of normal segments. An input such
        as ``""`` or ``"."`` yields the empty path ``PurePath()``.

    Raises:
        ParentDirError: If any segment is ``..``.
        RootDirError: If the path is absolute or carries a drive.
        InvalidPathError: If the input is not a text path.

    Examples:
        >>> sanitize_path("./tmp/path").as_posix()
        'tmp/path'
        >>> sanitize_path("foo/bar/baz").as_posix()
        'foo/bar/baz'
        >>> sanitize_path("../tmp/path")
        Traceback (most recent call last):
            ...
        outdir_tempdir.exceptions.ParentDirError: ../tmp/path contains parent dir
    """
    raw = _as_pure_path(path)
    if raw.anchor:
        log.debug("Rejected anchored path: %s", raw)
        raise RootDirError(raw)

    result = PurePath()
    for part in raw.parts:
        if part == _CURRENT_DIR:
            continue
        if part == _PARENT_DIR:
            log.debug("Rejected parent dir traversal: %s", raw)
            raise ParentDirError(raw)
        # A segment such as "C:name" would switch drives when joined on Windows
        if PurePath(part).anchor:
            log.debug("Rejected drive-relative segment %r in %s", part, raw)
            raise RootDirError(raw)
        result /= part
    return result


__all__ = [
    "PathInput",
    "sanitize_path",
]
