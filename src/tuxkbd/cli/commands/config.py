"""
Config command implementations.

Commands:
    - config show                                # Display configuration
    - config set --device-root PATH ...          # Update configuration
    - config validate                            # Validate config file
    - config reset                               # Reset to defaults
"""

import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from tuxkbd.exceptions import wrap_pydantic_error
from tuxkbd.models import AppConfig, FailurePolicy
from tuxkbd.utils import PydanticPersistence

from ..context import CliState, fail, pass_state


@click.group(name="config")
def config():
    """Configure tuxkbd settings."""
    pass


@config.command(name="show")
@pass_state
def show_config(state: CliState):
    """Display the current configuration."""
    click.echo(f"Config file: {state.config_path}")
    if state.config_error is not None:
        click.echo(f"[FAIL] {state.config_error.user_message}, showing defaults")
    click.echo()
    for name, value in state.config.model_dump(mode="json").items():
        click.echo(f"  {name}: {value}")


@config.command(name="set")
@click.option(
    "--device-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the kernel module's attribute files"
)
@click.option(
    "--failure-policy",
    type=click.Choice([p.value for p in FailurePolicy], case_sensitive=False),
    default=None,
    help="Stop at the first failed attribute, or attempt all of them"
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Seconds to wait for a single attribute read/write"
)
@click.option("--no-timeout", is_flag=True, help="Wait forever for attribute reads/writes")
@pass_state
def set_config(
    state: CliState,
    device_root: Optional[Path],
    failure_policy: Optional[str],
    timeout: Optional[float],
    no_timeout: bool,
):
    """Update configuration values and save them."""
    if state.config_error is not None:
        # An unreadable file is only ever replaced by "config reset"
        fail(state.config_error, state.log_path)

    updates: dict = {}
    if device_root is not None:
        updates["device_root"] = device_root
    if failure_policy is not None:
        updates["failure_policy"] = failure_policy.lower()
    if timeout is not None:
        updates["operation_timeout"] = timeout
    if no_timeout:
        updates["operation_timeout"] = None

    if not updates:
        raise click.UsageError("Nothing to change. See 'tuxkbd config set --help' for options.")

    try:
        new_config = AppConfig.model_validate({**state.config.model_dump(), **updates})
    except ValidationError as e:
        fail(wrap_pydantic_error(e, str(state.config_path)), state.log_path)

    new_config.save(state.config_path)
    state.config = new_config

    for name in updates:
        click.echo(f"[OK] {name} = {getattr(new_config, name)}")


@config.command(name="validate")
@pass_state
def validate_config(state: CliState):
    """Validate the configuration file."""
    is_valid, error = PydanticPersistence.validate_json(state.config_path, AppConfig)

    if is_valid:
        click.echo(f"[OK] {state.config_path}")
    else:
        click.echo(f"[FAIL] {error}")
        sys.exit(1)


@config.command(name="reset")
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation")
@pass_state
def reset_config(state: CliState, yes: bool):
    """Reset the configuration to defaults."""
    if not yes:
        click.confirm(f"Reset {state.config_path} to defaults?", abort=True)

    defaults = AppConfig()
    defaults.save(state.config_path)
    state.config = defaults
    state.config_error = None
    click.echo(f"[OK] Configuration reset: {state.config_path}")
