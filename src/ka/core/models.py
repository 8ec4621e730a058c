"""Value objects passed between the resolve, format, select and dispatch steps."""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class Invocation:
    """Parsed command line."""
    pattern: str
    signal: int
    assume_yes: bool = False


@dataclass(frozen=True)
class ProcessCandidate:
    """A running process that matched the pattern."""
    pid: int
    name: str
    cmdline: str


@dataclass(frozen=True)
class DisplayRow:
    """One formatted line of the selection list and the pid it stands for."""
    pid: int
    text: str


@dataclass(frozen=True)
class SelectionPlan:
    """Ordered pids to signal and the signal to send them."""
    pids: Tuple[int, ...]
    signal: int

    @classmethod
    def build(cls, pids: Iterable[int], signal: int) -> "SelectionPlan":
        # dict preserves first-seen order while dropping repeats
        return cls(pids=tuple(dict.fromkeys(pids)), signal=signal)

    def __len__(self) -> int:
        return len(self.pids)


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of signalling one pid."""
    pid: int
    ok: bool
    error: Optional[str] = None
