"""Scoped temporary directories created under the sandbox root.

A ``TempDir`` owns a directory created beneath the sandbox root named by
``OUTDIR_TEMPDIR_ROOT``. By default the directory outlives the handle; after
``auto_remove()`` the top-level directory created for the handle is deleted
recursively when the handle is closed, leaves a ``with`` block, is
garbage-collected or the interpreter exits.

Examples:
    Random directory removed at the end of the block:

    >>> with TempDir.create_random().auto_remove() as tmp:  # doctest: +SKIP
    ...     (tmp.path / "data.txt").write_text("payload")

    Named directory kept on disk for inspection:

    >>> tmp = TempDir.create("foo/bar/baz")  # doctest: +SKIP
    >>> tmp.path  # doctest: +SKIP
    PosixPath('/path/to/sandbox/foo/bar/baz')
"""

from __future__ import annotations

import logging
import shutil
import uuid
import weakref
from typing import TYPE_CHECKING

from outdir_tempdir.exceptions import CleanupError, InvalidPathError, TempDirIOError
from outdir_tempdir.root import resolve_root
from outdir_tempdir.sanitize import sanitize_path

if TYPE_CHECKING:
    from pathlib import Path, PurePath
    from types import TracebackType

    from outdir_tempdir.sanitize import PathInput

log = logging.getLogger(__name__)

#: Name prefix of directories created by ``TempDir.create_random``.
RANDOM_PREFIX = "test-"


def random_name() -> str:
    """Return a fresh random directory name (``test-<uuid4>``)."""
    return f"{RANDOM_PREFIX}{uuid.uuid4()}"


def _remove_tree(top: Path) -> None:
    """Recursively delete ``top``; failures are logged and raised.

    Registered with ``weakref.finalize``, so it must not reference the handle.

    Raises:
        CleanupError: If the tree cannot be removed (including when it has
            already disappeared).
    """
    try:
        shutil.rmtree(top)
    except OSError as e:
        log.critical("Failed to remove temporary directory %s: %s", top, e)
        raise CleanupError(top, str(e)) from e
    log.debug("Removed temporary directory tree: %s", top)


class TempDir:
    """A directory created under the sandbox root.

    The directory exists on disk as soon as the constructor returns. Use
    ``auto_remove()`` to have the top-level segment of the target deleted,
    with everything beneath it, when the handle's scope ends.

    Args:
        path: Relative target path. ``None`` picks a random ``test-<uuid4>``
            name.

    Raises:
        ParentDirError: If ``path`` contains ``..``.
        RootDirError: If ``path`` is absolute or carries a drive.
        RootNotFoundError: If the sandbox root is unavailable.
        InvalidPathError: If ``path`` resolves to the sandbox root itself.
        TempDirIOError: If the directory cannot be created.
    """

    def __init__(self, path: PathInput | None = None) -> None:
        """Sanitize ``path``, resolve it under the sandbox root and create it."""
        requested = random_name() if path is None else path
        target = sanitize_path(requested)
        root = resolve_root()
        full = root / target

        # An empty target would hand the sandbox root itself to the cleanup
        if full == root:
            raise InvalidPathError(requested)

        try:
            full.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TempDirIOError(f"Cannot create {full}: {e}", full) from e
        log.debug("Created temporary directory: %s", full)

        self._root = root
        self._target = target
        self._path = full
        self._autorm = False
        self._finalizer: weakref.finalize | None = None

    @classmethod
    def create(cls, path: PathInput) -> TempDir:
        """Create a temporary directory at ``path`` under the sandbox root.

        Args:
            path: Relative target path, ``/`` or native separated.

        Returns:
            A handle whose directory exists, with auto-removal disabled.

        Examples:
            >>> TempDir.create("foo/bar/baz").path.is_dir()  # doctest: +SKIP
            True
        """
        return cls(path)

    @classmethod
    def create_random(cls) -> TempDir:
        """Create a randomly named ``test-<uuid4>`` temporary directory.

        No check is made against existing directories; collisions are
        negligible with 122 random bits.
        """
        return cls(random_name())

    @property
    def root(self) -> Path:
        """Return the sandbox root the directory was created in."""
        return self._root

    @property
    def target(self) -> PurePath:
        """Return the sanitized path relative to the sandbox root."""
        return self._target

    @property
    def path(self) -> Path:
        """Return the full path of the temporary directory."""
        return self._path

    @property
    def autorm(self) -> bool:
        """Return True if the directory is removed when the handle ends."""
        return self._autorm

    @property
    def closed(self) -> bool:
        """Return True once the auto-removal has run."""
        return self._finalizer is not None and not self._finalizer.alive

    def auto_remove(self) -> TempDir:
        """Enable automatic removal and return this handle.

        The removal deletes ``root / target.parts[0]``, so nested targets
        such as ``"a/b/c"`` remove the whole ``"a"`` subtree.

        Returns:
            The same handle, for chaining after construction.
        """
        if self._autorm:
            return self
        self._autorm = True
        if self._target.parts:
            top = self._root / self._target.parts[0]
            self._finalizer = weakref.finalize(self, _remove_tree, top)
        log.debug("Auto-removal enabled for %s", self._path)
        return self

    def close(self) -> None:
        """Run the cleanup now if auto-removal is enabled.

        Idempotent: the removal happens at most once per handle.

        Raises:
            CleanupError: If the directory tree cannot be removed.
        """
        if self._finalizer is not None:
            self._finalizer()

    def __enter__(self) -> TempDir:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __fspath__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self._path)!r}, autorm={self._autorm})"


__all__ = [
    "RANDOM_PREFIX",
    "TempDir",
    "random_name",
]
