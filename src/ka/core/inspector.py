"""Describe candidate pids with a single batched ``ps`` call."""

import logging
from typing import List, Optional, Sequence

from ..errors import MetadataFetchError
from ..utils.subprocess_utils import SubprocessError, run_command
from .models import ProcessCandidate
from .resolver import Runner

logger = logging.getLogger(__name__)


def parse_ps_line(line: str) -> Optional[ProcessCandidate]:
    """Parse ``pid comm args...`` into a candidate, or None if malformed."""
    fields = line.split(None, 2)
    if len(fields) < 3:
        return None
    pid_str, name, cmdline = fields
    try:
        pid = int(pid_str)
    except ValueError:
        return None
    if pid < 1:
        return None
    return ProcessCandidate(pid=pid, name=name, cmdline=cmdline.strip())


def describe_processes(
    pids: Sequence[int],
    *,
    runner: Runner = run_command,
) -> List[ProcessCandidate]:
    """
    Fetch name and command line for every pid in one external call.

    Results follow the order of ``pids``; pids that ps did not report
    (exited in the meantime) are dropped.

    Raises:
        MetadataFetchError: If ps fails for a non-empty pid set
    """
    if not pids:
        return []

    cmd = ["ps", "-o", "pid=,comm=,args=", "-p", ",".join(str(pid) for pid in pids)]
    try:
        result = runner(cmd, check=True)
    except SubprocessError as e:
        raise MetadataFetchError(e.stderr.strip() or f"exit status {e.returncode}") from e

    by_pid = {}
    for line in result.stdout.splitlines():
        candidate = parse_ps_line(line)
        if candidate is None:
            if line.strip():
                logger.debug(f"Skipping malformed ps line: {line!r}")
            continue
        by_pid.setdefault(candidate.pid, candidate)

    return [by_pid[pid] for pid in pids if pid in by_pid]
