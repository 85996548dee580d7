"""Enumerations for the keyboard controller."""

from enum import Enum


class FieldEncoding(str, Enum):
    """How an attribute's on-disk text is surfaced after a read.

    Encodings are applied on read only. Writes always send back the
    value they were given.
    """

    RAW = "raw"  # Surface the file content verbatim
    HEX_PREFIXED = "hex_prefixed"  # File holds bare hex digits, surface with "0x"

    def decode(self, raw: str) -> str:
        """Convert raw file content into its surfaced form."""
        if self is FieldEncoding.HEX_PREFIXED:
            return "0x" + raw
        return raw


class FailurePolicy(str, Enum):
    """What a read or write does after one attribute fails."""

    FAIL_FAST = "fail_fast"  # Stop at the first failure
    COLLECT_ALL = "collect_all"  # Attempt every field, report any failure
