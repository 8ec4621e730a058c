"""Turn candidate pids into a signal plan, prompting only when it matters."""

import logging
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from ..errors import NoMatchError, PromptError
from ..utils.terminal import terminal_size
from .config import KaConfig
from .formatter import build_rows
from .inspector import describe_processes
from .models import DisplayRow, Invocation, ProcessCandidate, SelectionPlan

logger = logging.getLogger(__name__)


class SelectPrompt(Protocol):
    """Interactive multi-select capability."""

    def select(
        self,
        message: str,
        options: List[str],
        default: List[str],
        page_size: int,
    ) -> List[str]:
        """Return the chosen subset of ``options``; raise PromptError on abort."""
        ...


def page_size_for(height: int, margin: int) -> int:
    """Rows visible at once: terminal height minus prompt chrome, at least 1."""
    return max(1, height - margin)


def pids_for_choices(rows: Sequence[DisplayRow], chosen: Sequence[str]) -> List[int]:
    """Map chosen row texts back to pids through the row/pid pairing."""
    index = {row.text: row.pid for row in rows}
    pids = []
    for text in chosen:
        pid = index.get(text)
        if pid is None:
            logger.warning(f"Prompt returned an unknown option, ignoring: {text!r}")
            continue
        pids.append(pid)
    return pids


class SelectionResolver:
    """Decide which candidates get signalled.

    ``-y`` and single-candidate runs never prompt. Anything else is
    described, formatted and handed to the prompt with every row
    pre-selected, so confirming without changes kills them all.
    """

    def __init__(
        self,
        prompt: SelectPrompt,
        config: Optional[KaConfig] = None,
        *,
        size_provider: Callable[[Tuple[int, int]], Tuple[int, int]] = terminal_size,
        describe: Callable[[Sequence[int]], List[ProcessCandidate]] = describe_processes,
    ):
        self.prompt = prompt
        self.config = config or KaConfig()
        self.size_provider = size_provider
        self.describe = describe

    def resolve(self, pids: Sequence[int], invocation: Invocation) -> SelectionPlan:
        if invocation.assume_yes:
            logger.debug(f"Auto-confirm: selecting all {len(pids)} candidate(s)")
            return SelectionPlan.build(pids, invocation.signal)

        if len(pids) <= 1:
            return SelectionPlan.build(pids, invocation.signal)

        chosen = self._prompt_for(pids, invocation.pattern)
        return SelectionPlan.build(chosen, invocation.signal)

    def _prompt_for(self, pids: Sequence[int], pattern: str) -> List[int]:
        width, height = self.size_provider(
            (self.config.fallback_width, self.config.fallback_height)
        )
        candidates = self.describe(pids)
        if not candidates:
            # Everything exited between discovery and inspection
            raise NoMatchError(pattern)

        rows = build_rows(candidates, pattern, width, self.config.display)
        options = [row.text for row in rows]
        page_size = page_size_for(height, self.config.page_margin)
        logger.debug(f"Prompting for {len(options)} rows (width={width}, page_size={page_size})")

        try:
            chosen = self.prompt.select(
                self.config.prompt_message,
                options,
                list(options),
                page_size,
            )
        except PromptError:
            raise
        except Exception as e:
            raise PromptError(str(e) or type(e).__name__) from e

        return pids_for_choices(rows, chosen)
