"""Data models for the keyboard controller."""

from .config import DEFAULT_CONFIG_PATH, AppConfig
from .enums import FailurePolicy, FieldEncoding
from .record import ConfigRecord, format_color, is_single_color, normalize_record
from .schema import (
    COLOR_FIELDS,
    DEFAULT_DEVICE_ROOT,
    KEYBOARD_SCHEMA,
    AttributeField,
    AttributeSchema,
    attribute_path,
)

__all__ = [
    "AppConfig",
    # Schema
    "AttributeField",
    "AttributeSchema",
    "COLOR_FIELDS",
    "ConfigRecord",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_DEVICE_ROOT",
    "KEYBOARD_SCHEMA",
    # Enums
    "FailurePolicy",
    "FieldEncoding",
    # Helpers
    "attribute_path",
    "format_color",
    "is_single_color",
    "normalize_record",
]
