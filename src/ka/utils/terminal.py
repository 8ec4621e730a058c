"""Terminal geometry."""

import os
import sys
from typing import Tuple


def terminal_size(fallback: Tuple[int, int] = (80, 24)) -> Tuple[int, int]:
    """Return (columns, lines) of the terminal attached to stdout.

    Falls back when stdout is not a terminal or the size is unknown.
    """
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        return fallback
    if size.columns <= 0 or size.lines <= 0:
        return fallback
    return size.columns, size.lines
