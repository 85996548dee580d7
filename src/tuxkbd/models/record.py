"""Helpers for configuration records (field name -> string value)."""

import re

from .schema import COLOR_FIELDS

ConfigRecord = dict[str, str]

_HEX_COLOR = re.compile(r"^[0-9a-fA-F]{6}$")


def normalize_record(record: ConfigRecord) -> ConfigRecord:
    """Return a copy with surrounding whitespace stripped from every value.

    Attribute files usually end with a newline. Reads keep it, so callers
    that compare or display values normalize first.
    """
    return {name: value.strip() for name, value in record.items()}


def is_single_color(record: ConfigRecord) -> bool:
    """Check whether every color region present in the record has the same value."""
    colors = [record[name] for name in COLOR_FIELDS if name in record]
    return len(colors) > 0 and all(c == colors[0] for c in colors)


def format_color(value: str) -> str:
    """Convert ``#rrggbb``, ``0xrrggbb`` or ``rrggbb`` into ``0xrrggbb``.

    Raises:
        ValueError: If the value is not a 24-bit hex color
    """
    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    elif digits[:2].lower() == "0x":
        digits = digits[2:]

    if not _HEX_COLOR.match(digits):
        raise ValueError(f"Invalid color {value!r}, expected a hex color like #ff8800")
    return "0x" + digits.lower()
