"""Core selection and dispatch logic."""

from .models import (
    Invocation,
    ProcessCandidate,
    DisplayRow,
    SelectionPlan,
    DeliveryResult,
)

__all__ = [
    "Invocation",
    "ProcessCandidate",
    "DisplayRow",
    "SelectionPlan",
    "DeliveryResult",
]
