"""Shared state and error reporting for CLI commands."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional

import click

from tuxkbd.device import KeyboardController
from tuxkbd.exceptions import TuxKbdError, format_error_for_display
from tuxkbd.models import AppConfig

logger = logging.getLogger(__name__)


@dataclass
class CliState:
    """Objects created by the top-level group and shared with subcommands."""

    config: AppConfig
    config_path: Path
    log_path: Path
    # Set when config_path exists but could not be loaded
    config_error: Optional[TuxKbdError] = None

    def controller(self) -> KeyboardController:
        return KeyboardController.from_config(self.config)


pass_state = click.make_pass_decorator(CliState)


def fail(error: Exception, log_path: Path | None = None) -> NoReturn:
    """Print a clean error message (no traceback) and exit with status 1."""
    if isinstance(error, TuxKbdError):
        logger.error(f"Command failed: {error.log_message()}")
    else:
        logger.error(f"Command failed: {error!r}")

    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)

    sys.exit(1)
