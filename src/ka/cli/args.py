"""Interpret the positional tokens click leaves behind."""

from typing import Optional, Sequence

from ..core.models import Invocation
from ..errors import InvalidSignalError, UsageError


def parse_signal(token: str, spec: str) -> int:
    """Parse a signal number, reporting ``token`` when it is not one."""
    try:
        value = int(spec)
    except ValueError:
        raise InvalidSignalError(token) from None
    if value < 0:
        raise InvalidSignalError(token)
    return value


def interpret_tokens(
    tokens: Sequence[str],
    *,
    signal_option: Optional[str] = None,
    assume_yes: bool = False,
    default_signal: int = 15,
) -> Invocation:
    """
    Build an Invocation from leftover tokens and the parsed flags.

    A bare ``-N`` token sets the signal and beats both ``-s`` and any earlier
    ``-N``. Exactly one non-dash token must remain as the pattern.

    Raises:
        InvalidSignalError: A dash token or -s value is not a number
        UsageError: No pattern, or more than one
    """
    signal = default_signal
    if signal_option is not None:
        signal = parse_signal(signal_option, signal_option)

    patterns = []
    for token in tokens:
        if token.startswith("-"):
            signal = parse_signal(token, token[1:])
        else:
            patterns.append(token)

    if not patterns:
        raise UsageError("Process name is required")
    if len(patterns) > 1:
        raise UsageError(f"Expected one process name, got {len(patterns)}: {' '.join(patterns)}")

    return Invocation(pattern=patterns[0], signal=signal, assume_yes=assume_yes)
