"""Error taxonomy for ka."""

from .errors import (
    KaError,
    UsageError,
    InvalidSignalError,
    NoMatchError,
    MetadataFetchError,
    PromptError,
    SignalDeliveryError,
)
from .translator import describe_os_error

__all__ = [
    "KaError",
    "UsageError",
    "InvalidSignalError",
    "NoMatchError",
    "MetadataFetchError",
    "PromptError",
    "SignalDeliveryError",
    "describe_os_error",
]
