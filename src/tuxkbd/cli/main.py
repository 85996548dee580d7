"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from tuxkbd import __version__
from tuxkbd.exceptions import TuxKbdError
from tuxkbd.models import DEFAULT_CONFIG_PATH, AppConfig

from .commands import config, set_command, show, status
from .context import CliState, fail

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = Path.home() / ".tuxkbd" / "logs"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Pick the log file: --log-file, then ./tuxkbd-debug.log with --debug, then the default."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "tuxkbd-debug.log"
    return DEFAULT_LOG_DIR / "tuxkbd.log"


def setup_logging(verbose: int, debug: bool, log_path: Path, log_level: Optional[str]) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log everything at DEBUG level
        log_path: File to log to
        log_level: Explicit level, overrides verbose/debug when given
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_level:
        level = getattr(logging, log_level.upper())

    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="tuxkbd")
@click.option(
    '--root',
    type=click.Path(path_type=Path),
    default=None,
    help='Override the kernel module attribute directory'
)
@click.option(
    '--config-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f'Application config file (default: {DEFAULT_CONFIG_PATH})'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./tuxkbd-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default=None,
    help='Log level for file logging'
)
def cli(
    ctx,
    root: Optional[Path],
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: Optional[str]
):
    """
    Tuxedo Keyboard Controller - backlight settings for the tuxedo_keyboard kernel module.

    Reads and writes the module's attribute files (brightness, region colors,
    mode and state). Writing usually requires root.

    \b
    Examples:
      # Check that the kernel module is loaded
      tuxkbd status

      # Show the current backlight settings
      tuxkbd show

      # Set every region to orange at half brightness
      sudo tuxkbd set --color ff8800 --brightness 128

      # Turn the backlight off
      sudo tuxkbd set --state off

      # Use a different attribute directory for one call
      tuxkbd --root /tmp/fake-keyboard show
    """
    log_path = resolve_log_path(debug, log_file)
    setup_logging(verbose, debug, log_path, log_level)

    config_path = config_file or DEFAULT_CONFIG_PATH

    config_error = None
    try:
        app_config = AppConfig.load_or_default(config_path)
    except TuxKbdError as e:
        # "config reset" must still work when the file is broken
        if ctx.invoked_subcommand != "config":
            fail(e, log_path)
        logger.warning(f"Ignoring invalid config {config_path}: {e.log_message()}")
        app_config = AppConfig()
        config_error = e

    if root is not None:
        app_config = app_config.model_copy(update={"device_root": root})

    ctx.obj = CliState(
        config=app_config,
        config_path=config_path,
        log_path=log_path,
        config_error=config_error,
    )


cli.add_command(status)
cli.add_command(show)
cli.add_command(set_command)
cli.add_command(config)

if __name__ == "__main__":
    cli()
