"""Exceptions raised while building or executing a kill plan."""


class KaError(Exception):
    """Base class for errors that end the run with a message."""

    exit_code = 1


class UsageError(KaError):
    """The invocation is missing its pattern or has too many."""


class InvalidSignalError(KaError):
    """A dash token or -s value is not a signal number."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid signal: {token}")


class NoMatchError(KaError):
    """Nothing matched the pattern. Not a failure."""

    exit_code = 0

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"No processes found matching '{pattern}'")


class MetadataFetchError(KaError):
    """Process details could not be read for a non-empty pid set."""

    def __init__(self, detail: str):
        super().__init__(f"Failed to get process information: {detail}")


class PromptError(KaError):
    """The interactive selection failed or was aborted."""


class SignalDeliveryError(KaError):
    """Delivering a signal to one pid failed.

    Recovered by the dispatcher; never escapes a batch.
    """

    def __init__(self, pid: int, reason: str):
        self.pid = pid
        self.reason = reason
        super().__init__(f"Failed to kill process {pid}: {reason}")
