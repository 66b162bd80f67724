"""Fixtures for the CLI tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Undo logger changes made by ``--verbose`` runs."""
    package_logger = logging.getLogger("outdir_tempdir")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
