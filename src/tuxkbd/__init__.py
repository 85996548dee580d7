"""tuxkbd: Backlight controller for the Tuxedo Keyboard kernel module."""

__version__ = "0.1.0"

from .device import ConfigReader, ConfigWriter, KeyboardController
from .models import KEYBOARD_SCHEMA, AppConfig, AttributeSchema

__all__ = [
    "AppConfig",
    "AttributeSchema",
    "ConfigReader",
    "ConfigWriter",
    "KEYBOARD_SCHEMA",
    "KeyboardController",
]
