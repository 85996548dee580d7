"""Attribute-file access for the Tuxedo Keyboard kernel module."""

from .controller import KeyboardController
from .io import read_attribute, run_isolated, write_attribute
from .presence import device_present
from .reader import ConfigReader
from .writer import ConfigWriter

__all__ = [
    "ConfigReader",
    "ConfigWriter",
    "KeyboardController",
    "device_present",
    "read_attribute",
    "run_isolated",
    "write_attribute",
]
