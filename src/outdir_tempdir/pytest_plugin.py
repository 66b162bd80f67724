"""pytest fixtures for sandboxed temporary directories.

Registered through the ``pytest11`` entry point, so installing the package is
enough to make the fixtures available. Both fixtures require
``OUTDIR_TEMPDIR_ROOT`` to name an existing directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from outdir_tempdir.root import resolve_root
from outdir_tempdir.tempdir import TempDir

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def outdir_root() -> Path:
    """Return the sandbox root for the running test."""
    return resolve_root()


@pytest.fixture
def outdir_tempdir() -> Iterator[TempDir]:
    """Yield a random auto-removed directory, deleted at teardown."""
    with TempDir.create_random().auto_remove() as tmp:
        yield tmp
