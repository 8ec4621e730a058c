"""Standardized subprocess utilities for the external process tools."""

import logging
import subprocess
from typing import List, Optional

logger = logging.getLogger(__name__)


class SubprocessError(Exception):
    """Exception raised when a subprocess command fails or cannot start."""

    def __init__(self, cmd: str, returncode: int, stderr: str, stdout: str = ""):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        self.stdout = stdout
        super().__init__(
            f"Command failed with exit code {returncode}: {cmd}\nstderr: {stderr}"
        )


def run_command(
    cmd: List[str],
    *,
    check: bool = True,
) -> subprocess.CompletedProcess:
    """
    Run a command to completion, capturing its output.

    The child is always reaped before this returns.

    Args:
        cmd: Command and arguments
        check: Raise exception on non-zero exit

    Returns:
        CompletedProcess with stdout, stderr, returncode

    Raises:
        SubprocessError: If the executable is missing, or check=True and
            the command exits non-zero
    """
    cmd_str = " ".join(cmd)
    logger.debug(f"Running: {cmd_str}")

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=False,  # We handle check ourselves for better error messages
        )
    except OSError as e:
        # Executable missing or not runnable
        raise SubprocessError(cmd=cmd_str, returncode=-1, stderr=str(e)) from e

    if check and result.returncode != 0:
        raise SubprocessError(
            cmd=cmd_str,
            returncode=result.returncode,
            stderr=result.stderr,
            stdout=result.stdout,
        )

    return result
