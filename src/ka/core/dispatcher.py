"""Deliver the planned signal to each selected pid."""

import logging
from typing import Callable, List

import click

from ..errors import SignalDeliveryError, describe_os_error
from ..utils.process_utils import send_signal
from .models import DeliveryResult, SelectionPlan

logger = logging.getLogger(__name__)


class SignalDispatcher:
    """Signal pids one at a time; a failed pid never stops the batch."""

    def __init__(
        self,
        sender: Callable[[int, int], None] = send_signal,
        echo: Callable[[str], None] = click.echo,
    ):
        self.sender = sender
        self.echo = echo

    def deliver(self, pid: int, sig: int) -> DeliveryResult:
        try:
            self.sender(pid, sig)
        except (OSError, ValueError, OverflowError) as e:
            failure = SignalDeliveryError(pid, describe_os_error(e))
            logger.warning(f"Signal {sig} to pid {pid} failed: {e}")
            self.echo(str(failure))
            return DeliveryResult(pid=pid, ok=False, error=failure.reason)

        logger.debug(f"Sent signal {sig} to pid {pid}")
        self.echo(f"Killed process {pid}")
        return DeliveryResult(pid=pid, ok=True)

    def dispatch(self, plan: SelectionPlan) -> List[DeliveryResult]:
        return [self.deliver(pid, plan.signal) for pid in plan.pids]
