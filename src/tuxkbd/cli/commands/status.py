"""Status command implementation."""

import click

from tuxkbd.exceptions import DeviceNotFoundError

from ..context import CliState, fail, pass_state


@click.command(name="status")
@pass_state
def status(state: CliState):
    """Check whether the Tuxedo Keyboard kernel module is available."""
    controller = state.controller()

    if not controller.presence_check():
        fail(DeviceNotFoundError(controller.root), state.log_path)

    click.echo(f"[OK] Kernel module found at {controller.root}")
