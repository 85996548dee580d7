"""CLI commands for tuxkbd."""

from .config import config
from .set import set_command
from .show import show
from .status import status

__all__ = ["config", "set_command", "show", "status"]
