"""Shared utility functions for ka."""

from .subprocess_utils import (
    SubprocessError,
    run_command,
)
from .process_utils import send_signal, current_pid
from .terminal import terminal_size
from .logging_setup import setup_logging

__all__ = [
    # Subprocess utilities
    "SubprocessError",
    "run_command",
    # Process management
    "send_signal",
    "current_pid",
    # Terminal
    "terminal_size",
    # Logging
    "setup_logging",
]
