"""Tests for the attribute schema and record helpers."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tuxkbd.models import (
    COLOR_FIELDS,
    KEYBOARD_SCHEMA,
    AttributeField,
    AttributeSchema,
    FieldEncoding,
    attribute_path,
    format_color,
    is_single_color,
    normalize_record,
)


class TestFieldEncoding:
    """Test FieldEncoding decoding."""

    @pytest.mark.unit
    def test_raw_is_verbatim(self):
        """Test that RAW returns its input."""
        assert FieldEncoding.RAW.decode("128\n") == "128\n"

    @pytest.mark.unit
    def test_hex_prefixed_prepends_0x(self):
        """Test that HEX_PREFIXED prepends 0x."""
        assert FieldEncoding.HEX_PREFIXED.decode("ab") == "0xab"

    @pytest.mark.unit
    def test_hex_prefixed_keeps_trailing_newline(self):
        """Decoding never trims; callers normalize."""
        assert FieldEncoding.HEX_PREFIXED.decode("ff8800\n") == "0xff8800\n"


class TestKeyboardSchema:
    """Test the default schema for the tuxedo_keyboard module."""

    @pytest.mark.unit
    def test_field_order(self):
        """Test the keyboard schema's field order."""
        assert KEYBOARD_SCHEMA.names == [
            "brightness",
            "color_left",
            "color_center",
            "color_right",
            "color_extra",
            "mode",
            "state",
        ]

    @pytest.mark.unit
    def test_only_colors_are_hex_prefixed(self):
        """Test which fields are hex prefixed."""
        hex_fields = {
            f.name for f in KEYBOARD_SCHEMA.attributes
            if f.encoding is FieldEncoding.HEX_PREFIXED
        }
        assert hex_fields == set(COLOR_FIELDS)

    @pytest.mark.unit
    def test_contains_and_len(self):
        """Test membership and length."""
        assert "mode" in KEYBOARD_SCHEMA
        assert "volume" not in KEYBOARD_SCHEMA
        assert len(KEYBOARD_SCHEMA) == 7

    @pytest.mark.unit
    def test_get_unknown_field_raises(self):
        """Test get with a name outside the schema."""
        with pytest.raises(KeyError):
            KEYBOARD_SCHEMA.get("volume")

    @pytest.mark.unit
    def test_path_for(self):
        """Test building an attribute path."""
        root = Path("/sys/devices/platform/tuxedo_keyboard")
        assert KEYBOARD_SCHEMA.path_for(root, "mode") == root / "mode"
        assert attribute_path(root, "mode") == root / "mode"

    @pytest.mark.unit
    def test_decode_by_name(self):
        """Test decoding through the schema."""
        assert KEYBOARD_SCHEMA.decode("color_extra", "123456") == "0x123456"
        assert KEYBOARD_SCHEMA.decode("brightness", "10") == "10"

    @pytest.mark.unit
    def test_subset_keeps_schema_order(self):
        """Test that subset ignores argument order."""
        reduced = KEYBOARD_SCHEMA.subset("state", "brightness")
        assert reduced.names == ["brightness", "state"]

    @pytest.mark.unit
    def test_subset_unknown_field_raises(self):
        """Test subset with a name outside the schema."""
        with pytest.raises(KeyError):
            KEYBOARD_SCHEMA.subset("brightness", "volume")

    @pytest.mark.unit
    def test_schema_is_frozen(self):
        """Test that schemas cannot be modified."""
        with pytest.raises(ValidationError):
            KEYBOARD_SCHEMA.attributes = ()


class TestSchemaValidation:
    """Test schema construction rules."""

    @pytest.mark.unit
    def test_duplicate_names_rejected(self):
        """Test that field names must be unique."""
        with pytest.raises(ValidationError, match="Duplicate"):
            AttributeSchema(
                attributes=(AttributeField(name="mode"), AttributeField(name="mode"))
            )

    @pytest.mark.unit
    def test_empty_schema_rejected(self):
        """Test that a schema needs at least one field."""
        with pytest.raises(ValidationError):
            AttributeSchema(attributes=())

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "a/b", "..", "."])
    def test_invalid_names_rejected(self, name):
        """Test that names must be plain file names."""
        with pytest.raises(ValidationError):
            AttributeField(name=name)

    @pytest.mark.unit
    def test_encoding_from_string(self):
        """Test parsing an encoding from its value."""
        field = AttributeField(name="color_left", encoding="hex_prefixed")
        assert field.encoding is FieldEncoding.HEX_PREFIXED


class TestRecordHelpers:
    """Test normalize_record, is_single_color and format_color."""

    @pytest.mark.unit
    def test_normalize_strips_values(self, snapshot):
        """Test that normalize_record strips whitespace."""
        normalized = normalize_record(snapshot)
        assert normalized["brightness"] == "255"
        assert normalized["color_left"] == "0xff0000"
        # Original is untouched
        assert snapshot["brightness"] == "255\n"

    @pytest.mark.unit
    def test_is_single_color(self):
        """Test single and multiple color records."""
        same = {name: "0xff8800" for name in COLOR_FIELDS}
        assert is_single_color(same)
        assert not is_single_color(dict(same, color_extra="0x000000"))

    @pytest.mark.unit
    def test_is_single_color_without_colors(self):
        """Test that a record without colors is not single color."""
        assert not is_single_color({"brightness": "10"})

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["#FF8800", "0xff8800", "ff8800", " 0XFF8800 "])
    def test_format_color_accepts_common_forms(self, value):
        """Test the accepted color notations."""
        assert format_color(value) == "0xff8800"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", "#ff88", "red", "0xgg0000", "#ff880000"])
    def test_format_color_rejects_invalid(self, value):
        """Test that malformed colors raise ValueError."""
        with pytest.raises(ValueError):
            format_color(value)
