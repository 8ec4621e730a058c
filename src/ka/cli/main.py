"""Main CLI for ka."""

import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

import click
import yaml
from pydantic import ValidationError
from rich.console import Console

from .. import __version__
from ..core.config import KaConfig, load_config
from ..core.dispatcher import SignalDispatcher
from ..core.inspector import describe_processes
from ..core.models import DeliveryResult, Invocation
from ..core.resolver import Runner, resolve_candidates
from ..core.selection import SelectionResolver, SelectPrompt
from ..errors import KaError, NoMatchError, UsageError
from ..ui.multiselect import TerminalMultiSelect
from ..utils.logging_setup import setup_logging
from ..utils.process_utils import send_signal
from ..utils.subprocess_utils import run_command
from ..utils.terminal import terminal_size
from .args import interpret_tokens

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


def execute(
    invocation: Invocation,
    config: KaConfig,
    *,
    prompt: Optional[SelectPrompt] = None,
    runner: Optional[Runner] = None,
    sender: Optional[Callable[[int, int], None]] = None,
    own_pid: Optional[int] = None,
) -> List[DeliveryResult]:
    """Resolve, select and signal for one invocation.

    Raises:
        NoMatchError: Nothing to signal
        KaError: Any failure that prevents building a plan
    """
    runner = runner or run_command
    pids = resolve_candidates(invocation.pattern, own_pid=own_pid, runner=runner)

    resolver = SelectionResolver(
        prompt or TerminalMultiSelect(),
        config,
        size_provider=terminal_size,
        describe=lambda batch: describe_processes(batch, runner=runner),
    )
    plan = resolver.resolve(pids, invocation)
    logger.debug(f"Plan: signal {plan.signal} to {list(plan.pids)}")

    return SignalDispatcher(sender or send_signal).dispatch(plan)


def _load_config_or_exit(config_path: Optional[Path]) -> KaConfig:
    try:
        return load_config(config_path)
    except (OSError, yaml.YAMLError, ValidationError, ValueError) as e:
        err_console.print(f"Error: invalid configuration: {e}", style="red", markup=False, highlight=False)
        sys.exit(1)


@click.command(
    context_settings={"ignore_unknown_options": True, "help_option_names": ["--help"]},
)
@click.option("-s", "signal_option", metavar="N", help="Signal to send (e.g., -s 9 for SIGKILL)")
@click.option("-y", "assume_yes", is_flag=True,
              help="Assume yes; kill all matching processes without confirmation")
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Config file (default: $KA_CONFIG or ~/.config/ka/config.yaml)")
@click.version_option(__version__, prog_name="ka")
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, signal_option, assume_yes, verbose, config_path, tokens):
    """Kill processes whose command line matches PATTERN.

    \b
    Usage: ka [options] PATTERN
    A bare -N (e.g. -9) also sets the signal; the last one wins.
    """
    setup_logging(verbose)
    config = _load_config_or_exit(config_path)

    try:
        invocation = interpret_tokens(
            tokens,
            signal_option=signal_option,
            assume_yes=assume_yes,
            default_signal=config.default_signal,
        )
    except UsageError as e:
        click.echo(f"Error: {e}")
        click.echo(ctx.get_help())
        ctx.exit(e.exit_code)
    except KaError as e:
        err_console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        ctx.exit(e.exit_code)

    try:
        execute(invocation, config)
    except NoMatchError as e:
        click.echo(str(e))
        ctx.exit(e.exit_code)
    except KaError as e:
        logger.debug("Aborting", exc_info=True)
        err_console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        ctx.exit(e.exit_code)


def main():
    """Console script entry point."""
    cli(prog_name="ka")


if __name__ == "__main__":
    main()
