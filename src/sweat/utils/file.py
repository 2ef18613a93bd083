"""File utility functions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> None:
    """Create directory if it doesn't exist.

    Args:
        directory: Path to create
    """
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory: %s", directory)


def read_lines(file_path: Path) -> list[str]:
    """Read a decoded station file as a list of record lines.

    Args:
        file_path: Path to a decoded (not gzip) ISD file

    Returns:
        Lines without line terminators
    """
    return file_path.read_text(encoding="utf-8").splitlines()
