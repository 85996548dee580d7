"""Command-line interface for tuxkbd."""

from .main import cli

__all__ = ["cli"]
