"""Sequence input loading."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger


def load_data(name: str) -> str:
    """
    Load sequence data for submission.

    Args:
        name: "-" for standard input, a path to a readable file, or the
            sequence itself

    Returns:
        The sequence payload
    """
    if name == "-":
        logger.debug("Reading sequence from standard input")
        return sys.stdin.read()

    path = Path(name)
    try:
        is_file = path.is_file()
    except OSError:
        # Sequence strings can exceed the platform's file name limit
        is_file = False

    if is_file:
        logger.debug(f"Reading sequence file: {path}")
        with open(path, 'r') as f:
            return f.read()

    logger.debug("Using argument as literal sequence data")
    return name
