"""Render candidates as fixed-width, highlighted selection rows.

Everything here is pure: layout constants arrive through ``DisplayConfig``
and the terminal width is a parameter.
"""

from typing import List, Sequence

from .config import DisplayConfig
from .models import DisplayRow, ProcessCandidate


def sanitize(text: str) -> str:
    """Replace newlines and carriage returns, which break one-line rows."""
    return text.replace("\n", " ").replace("\r", " ")


def command_width(width: int, display: DisplayConfig) -> int:
    """Width left for the command column, never below the configured floor."""
    remaining = width - display.pid_width - display.name_width - display.separator_overhead
    return max(display.min_cmd_width, remaining)


def truncate(text: str, width: int, ellipsis: str = "..") -> str:
    """Cut ``text`` to at most ``width`` characters.

    Longer text keeps its head plus ``ellipsis``. At widths of 3 or less,
    or when the marker would not fit, the text is hard-cut.
    """
    if len(text) <= width:
        return text
    if width > 3 and width > len(ellipsis):
        return text[: width - len(ellipsis)] + ellipsis
    return text[: max(width, 0)]


def highlight(text: str, pattern: str, start: str, end: str) -> str:
    """Wrap every literal occurrence of ``pattern`` in emphasis markers."""
    if not pattern:
        return text
    return text.replace(pattern, f"{start}{pattern}{end}")


def _column(text: str, width: int, pattern: str, display: DisplayConfig) -> str:
    cut = truncate(text, width, display.ellipsis)
    padding = " " * (width - len(cut))
    return highlight(cut, pattern, display.highlight_start, display.highlight_end) + padding


def format_row(
    candidate: ProcessCandidate,
    pattern: str,
    width: int,
    display: DisplayConfig,
) -> DisplayRow:
    """Compose ``pid  name  command`` for one candidate.

    Columns are padded on their visible length, so emphasis markers do not
    shift the columns that follow.
    """
    name = sanitize(candidate.name)
    cmdline = sanitize(candidate.cmdline)
    cmd_width = command_width(width, display)

    text = "{pid:<{pid_width}}  {name}  {cmd}".format(
        pid=candidate.pid,
        pid_width=display.pid_width,
        name=_column(name, display.name_width, pattern, display),
        cmd=_column(cmdline, cmd_width, pattern, display),
    )
    return DisplayRow(pid=candidate.pid, text=sanitize(text))


def build_rows(
    candidates: Sequence[ProcessCandidate],
    pattern: str,
    width: int,
    display: DisplayConfig,
) -> List[DisplayRow]:
    """One row per candidate, in candidate order."""
    return [format_row(candidate, pattern, width, display) for candidate in candidates]
