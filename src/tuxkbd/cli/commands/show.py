"""Show command implementation."""

import json

import click

from tuxkbd.exceptions import ConfigReadError, TuxKbdError
from tuxkbd.models import COLOR_FIELDS, is_single_color, normalize_record

from ..context import CliState, fail, pass_state


@click.command(name="show")
@click.option("--raw", is_flag=True, help="Print values exactly as read, without trimming")
@click.option("--json", "as_json", is_flag=True, help="Print the configuration as JSON")
@pass_state
def show(state: CliState, raw: bool, as_json: bool):
    """Show the current keyboard backlight configuration."""
    controller = state.controller()

    try:
        controller.require_present()
        record, success = controller.read_config()
        if not success:
            # A partial snapshot is never shown
            raise ConfigReadError(controller.root)
    except TuxKbdError as e:
        fail(e, state.log_path)

    if not raw:
        record = normalize_record(record)

    if as_json:
        click.echo(json.dumps(record, indent=2))
        return

    width = max(len(name) for name in record)
    for name in controller.schema.names:
        value = record[name] if not raw else repr(record[name])
        click.echo(f"{name:<{width}}  {value}")

    if any(name in record for name in COLOR_FIELDS):
        color_mode = "single" if is_single_color(normalize_record(record)) else "multiple"
        click.echo(f"\nColor mode: {color_mode}")
