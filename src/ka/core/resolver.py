"""Find pids whose command line matches a pattern."""

import logging
import subprocess
from typing import Callable, List, Optional

from ..errors import NoMatchError
from ..utils.process_utils import current_pid
from ..utils.subprocess_utils import SubprocessError, run_command

logger = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]


def discover_pids(pattern: str, *, runner: Runner = run_command) -> List[str]:
    """Run ``pgrep -f`` once and return its raw pid tokens.

    pgrep exits 1 when nothing matches, which is indistinguishable here from
    any other failure: both mean no candidates.
    """
    try:
        result = runner(["pgrep", "-f", pattern], check=True)
    except SubprocessError as e:
        logger.debug(f"pgrep found nothing for {pattern!r}: exit {e.returncode}")
        return []
    return result.stdout.split()


def parse_pids(tokens: List[str], exclude: int) -> List[int]:
    """Convert pid tokens to ints, skipping junk, repeats and ``exclude``."""
    pids: List[int] = []
    seen = set()
    for token in tokens:
        try:
            pid = int(token)
        except ValueError:
            logger.debug(f"Skipping unparseable pid token: {token!r}")
            continue
        if pid == exclude or pid in seen:
            continue
        seen.add(pid)
        pids.append(pid)
    return pids


def resolve_candidates(
    pattern: str,
    *,
    own_pid: Optional[int] = None,
    runner: Runner = run_command,
) -> List[int]:
    """
    Return matching pids in discovery order, never including our own.

    Raises:
        NoMatchError: If nothing (other than ourselves) matched
    """
    if own_pid is None:
        own_pid = current_pid()

    pids = parse_pids(discover_pids(pattern, runner=runner), exclude=own_pid)
    if not pids:
        raise NoMatchError(pattern)

    logger.debug(f"Resolved {len(pids)} candidate(s) for {pattern!r}: {pids}")
    return pids
