"""Sandbox root resolution.

The sandbox root is the single directory under which every temporary
directory is created. It is provided by the environment (typically by the
test runner or build tool) and re-read for every handle, never cached.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from outdir_tempdir.exceptions import RootNotFoundError

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)

#: Environment variable naming the sandbox root directory.
ROOT_ENV_VAR = "OUTDIR_TEMPDIR_ROOT"


def resolve_root(environ: Mapping[str, str] | None = None) -> Path:
    """Return the sandbox root named by ``OUTDIR_TEMPDIR_ROOT``.

    Args:
        environ: Environment mapping to read from (defaults to ``os.environ``).

    Returns:
        Absolute path of an existing directory.

    Raises:
        RootNotFoundError: If the variable is unset or empty, or does not
            name an existing absolute directory.

    Examples:
        >>> resolve_root({"OUTDIR_TEMPDIR_ROOT": "/"})  # doctest: +SKIP
        PosixPath('/')
    """
    env = os.environ if environ is None else environ
    value = env.get(ROOT_ENV_VAR, "")
    if not value:
        raise RootNotFoundError(f"{ROOT_ENV_VAR} is not set")

    root = Path(value).expanduser()
    if not root.is_absolute():
        raise RootNotFoundError(f"{ROOT_ENV_VAR} must be an absolute path, got {value!r}")
    if not root.exists():
        raise RootNotFoundError(f"{root} does not exist")
    if not root.is_dir():
        raise RootNotFoundError(f"{root} is not a directory")

    log.debug("Sandbox root resolved: %s", root)
    return root


__all__ = [
    "ROOT_ENV_VAR",
    "resolve_root",
]
