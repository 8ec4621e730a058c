"""Signal delivery and process identity helpers."""

import os


def send_signal(pid: int, sig: int) -> None:
    """Send a numeric signal to a single process.

    Raises whatever os.kill raises (ProcessLookupError, PermissionError,
    OSError); callers decide whether that is fatal.
    """
    os.kill(pid, sig)


def current_pid() -> int:
    """Pid of this ka process, excluded from every candidate set."""
    return os.getpid()
