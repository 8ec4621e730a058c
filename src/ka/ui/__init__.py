"""Interactive terminal widgets."""

from .multiselect import SelectionState, TerminalMultiSelect

__all__ = ["SelectionState", "TerminalMultiSelect"]
