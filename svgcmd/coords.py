"""Numeric helpers for parsed path commands.

The parser keeps coordinates as text. These helpers give verification code a
numeric view of the same records.
"""

import logging
import math
from typing import Sequence

import numpy as np

from .parser import CommandRecord

# Set up logging
logger = logging.getLogger(__name__)


def to_number(text: str) -> float:
    """Convert raw coordinate text to a float.

    Args:
        text: Raw coordinate text (e.g., " 20.5", "-1e3")

    Returns:
        Parsed value, or NaN if the text is empty or not a number
    """
    value = text.strip()
    if not value:
        return math.nan

    try:
        return float(value)
    except ValueError:
        logger.debug(f"Could not parse coordinate: {text!r}")
        return math.nan


def commands_to_array(commands: Sequence[CommandRecord]) -> np.ndarray:
    """Convert command records to an array of (x, y) points.

    Args:
        commands: Parsed command records

    Returns:
        Float array of shape (n, 2)
    """
    if not commands:
        return np.empty((0, 2), dtype=float)

    return np.array(
        [[to_number(cmd.x), to_number(cmd.y)] for cmd in commands],
        dtype=float,
    )


def command_codes(commands: Sequence[CommandRecord]) -> str:
    """Join the command letters of the records in order."""
    return "".join(cmd.command or "" for cmd in commands)
