"""Main entry point for tuxkbd."""

from tuxkbd.cli import cli

if __name__ == "__main__":
    cli()
