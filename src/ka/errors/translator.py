"""Translate signal-delivery failures into short user-facing reasons."""

import errno
import re


ERROR_PATTERNS = {
    r"ProcessLookupError|No such process": "no such process",
    r"PermissionError|Operation not permitted": "operation not permitted",
    r"Invalid argument": "invalid signal",
}


def describe_os_error(error: Exception) -> str:
    """Convert an os.kill failure to a terse reason string."""
    if isinstance(error, OSError):
        if error.errno == errno.ESRCH:
            return "no such process"
        if error.errno == errno.EPERM:
            return "operation not permitted"
        if error.errno == errno.EINVAL:
            return "invalid signal"

    full_error = f"{type(error).__name__}: {error}"
    for pattern, reason in ERROR_PATTERNS.items():
        if re.search(pattern, full_error, re.IGNORECASE):
            return reason

    # Fallback for unknown errors
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error) or type(error).__name__
