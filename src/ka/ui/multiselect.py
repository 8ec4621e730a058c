"""Checkbox list prompt rendered with rich and driven by raw key reads."""

import os
import select
import sys
from enum import Enum
from typing import List, Optional, Sequence, Set

from rich.console import Console
from rich.live import Live
from rich.text import Text

from ..errors import PromptError

# Unix-only imports for terminal handling
try:
    import termios
    import tty
    HAS_TTY = True
except ImportError:
    HAS_TTY = False


KEY_UP = "\x1b[A"
KEY_DOWN = "\x1b[B"
KEY_RIGHT = "\x1b[C"
KEY_LEFT = "\x1b[D"
KEY_ESCAPE = "\x1b"
KEY_CTRL_C = "\x03"


class Outcome(str, Enum):
    """What a keypress did to the prompt as a whole."""
    CONFIRM = "confirm"
    ABORT = "abort"


class SelectionState:
    """Cursor, checked set and scroll window of a checkbox list."""

    def __init__(self, options: Sequence[str], default: Sequence[str] = (), page_size: int = 7):
        self.options = list(options)
        wanted = set(default)
        self.checked: Set[int] = {i for i, option in enumerate(self.options) if option in wanted}
        self.cursor = 0
        self.offset = 0
        self.page_size = max(1, page_size)

    def move(self, delta: int) -> None:
        if not self.options:
            return
        self.cursor = (self.cursor + delta) % len(self.options)
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + self.page_size:
            self.offset = self.cursor - self.page_size + 1

    def toggle(self) -> None:
        if not self.options:
            return
        self.checked ^= {self.cursor}

    def select_all(self) -> None:
        self.checked = set(range(len(self.options)))

    def select_none(self) -> None:
        self.checked = set()

    def toggle_all(self) -> None:
        self.checked = set(range(len(self.options))) - self.checked

    def visible(self) -> range:
        return range(self.offset, min(self.offset + self.page_size, len(self.options)))

    def chosen(self) -> List[str]:
        """Checked options in their original order."""
        return [option for i, option in enumerate(self.options) if i in self.checked]

    def handle_key(self, key: str) -> Optional[Outcome]:
        if key in (KEY_UP, "k"):
            self.move(-1)
        elif key in (KEY_DOWN, "j"):
            self.move(1)
        elif key == " ":
            self.toggle()
        elif key == KEY_RIGHT:
            self.select_all()
        elif key == KEY_LEFT:
            self.select_none()
        elif key == "a":
            self.toggle_all()
        elif key in ("\r", "\n"):
            return Outcome.CONFIRM
        elif key in ("q", KEY_ESCAPE, KEY_CTRL_C):
            return Outcome.ABORT
        return None


class TerminalMultiSelect:
    """Default multi-select capability for a Unix terminal."""

    HELP = "↑/↓ move • space toggle • → all • ← none • a invert • enter confirm • q abort"

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, message: str, state: SelectionState) -> Text:
        text = Text(no_wrap=True, overflow="crop")
        text.append("? ", style="bold green")
        text.append(message, style="bold")
        text.append(f"  [{len(state.checked)}/{len(state.options)} selected]\n", style="dim")

        for i in state.visible():
            pointer = "❯ " if i == state.cursor else "  "
            box = "[x] " if i in state.checked else "[ ] "
            text.append(pointer, style="bold cyan")
            text.append(box, style="green" if i in state.checked else "")
            text.append_text(Text.from_ansi(state.options[i]))
            text.append("\n")

        text.append(self.HELP, style="dim")
        return text

    def select(
        self,
        message: str,
        options: List[str],
        default: List[str],
        page_size: int,
    ) -> List[str]:
        if not HAS_TTY or not sys.stdin.isatty():
            raise PromptError("interactive selection requires a terminal; use -y to skip it")

        state = SelectionState(options, default, page_size)
        fd = sys.stdin.fileno()
        try:
            old_settings = termios.tcgetattr(fd)
        except (termios.error, OSError) as e:
            raise PromptError(f"cannot read terminal settings: {e}") from e

        try:
            tty.setcbreak(fd)
            with Live(
                self.render(message, state),
                console=self.console,
                auto_refresh=False,
                transient=True,
            ) as live:
                while True:
                    outcome = state.handle_key(self._read_key(fd))
                    if outcome is Outcome.ABORT:
                        raise PromptError("selection aborted")
                    if outcome is Outcome.CONFIRM:
                        break
                    live.update(self.render(message, state), refresh=True)
        except KeyboardInterrupt as e:
            raise PromptError("selection aborted") from e
        finally:
            try:
                termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
            except (termios.error, OSError):
                pass

        chosen = state.chosen()
        self.console.print(Text.assemble(
            ("? ", "bold green"), (message, "bold"), (f" {len(chosen)} selected", "cyan"),
        ))
        return chosen

    def _read_key(self, fd: int) -> str:
        """Block for one keypress, folding arrow-key escape sequences."""
        data = os.read(fd, 1)
        if not data:
            raise PromptError("input closed before selection was confirmed")
        ch = data.decode(errors="ignore")
        if ch == KEY_ESCAPE:
            # A bare Esc has nothing following it
            if select.select([fd], [], [], 0.05)[0]:
                ch += os.read(fd, 2).decode(errors="ignore")
        return ch
