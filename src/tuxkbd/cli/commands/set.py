"""Set command implementation."""

from typing import Optional

import click

from tuxkbd.exceptions import TuxKbdError
from tuxkbd.models import COLOR_FIELDS, format_color

from ..context import CliState, fail, pass_state


class ColorParamType(click.ParamType):
    """Hex color given as ``#rrggbb``, ``0xrrggbb`` or ``rrggbb``."""

    name = "color"

    def convert(self, value, param, ctx):
        try:
            return format_color(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


COLOR = ColorParamType()


@click.command(name="set")
@click.option(
    "--brightness", "-b",
    type=click.IntRange(0, 255),
    default=None,
    help="Backlight brightness (0-255)"
)
@click.option("--mode", "-m", type=str, default=None, help="Backlight mode number")
@click.option(
    "--state", "backlight_state",
    type=click.Choice(["on", "off"], case_sensitive=False),
    default=None,
    help="Turn the backlight on or off"
)
@click.option("--color", "-c", type=COLOR, default=None, help="Color for all regions")
@click.option("--color-left", type=COLOR, default=None, help="Left region color")
@click.option("--color-center", type=COLOR, default=None, help="Center region color")
@click.option("--color-right", type=COLOR, default=None, help="Right region color")
@click.option("--color-extra", type=COLOR, default=None, help="Extra region color")
@pass_state
def set_command(
    state: CliState,
    brightness: Optional[int],
    mode: Optional[str],
    backlight_state: Optional[str],
    color: Optional[str],
    color_left: Optional[str],
    color_center: Optional[str],
    color_right: Optional[str],
    color_extra: Optional[str],
):
    """
    Change keyboard backlight settings.

    Only the settings that differ from the current configuration are written.

    \b
    Examples:
      tuxkbd set --color "#00ff00"
      tuxkbd set --color-left ff0000 --color-right 0000ff
      tuxkbd set --brightness 200 --state on
    """
    changes: dict[str, str] = {}

    if brightness is not None:
        changes["brightness"] = str(brightness)
    if mode is not None:
        changes["mode"] = mode
    if backlight_state is not None:
        changes["state"] = "1" if backlight_state.lower() == "on" else "0"
    if color is not None:
        changes.update({name: color for name in COLOR_FIELDS})

    regions = {
        "color_left": color_left,
        "color_center": color_center,
        "color_right": color_right,
        "color_extra": color_extra,
    }
    changes.update({name: value for name, value in regions.items() if value is not None})

    if not changes:
        raise click.UsageError("Nothing to change. See 'tuxkbd set --help' for options.")

    controller = state.controller()

    try:
        controller.require_present()
        previous = controller.snapshot()
        desired = controller.apply(changes, previous)
    except TuxKbdError as e:
        fail(e, state.log_path)

    changed = [name for name in controller.schema.names if previous.get(name) != desired.get(name)]
    if not changed:
        click.echo("[OK] Already up to date")
        return

    for name in changed:
        click.echo(f"[OK] {name}: {previous.get(name, '')} -> {desired[name]}")
