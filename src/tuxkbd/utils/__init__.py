"""Generic utility modules for tuxkbd."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
