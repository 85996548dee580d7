"""Attribute schema for the Tuxedo Keyboard kernel module.

The schema is the ordered set of attribute files the controller knows
about. It is passed into the reader, writer and controller rather than
looked up globally, so tests can run against a temporary directory with a
reduced schema.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import FieldEncoding

DEFAULT_DEVICE_ROOT = Path("/sys/devices/platform/tuxedo_keyboard")


def attribute_path(root: Path | str, name: str) -> Path:
    """Build the path of the attribute file backing field ``name``."""
    return Path(root) / name


class AttributeField(BaseModel):
    """A single attribute file exposed by the kernel module."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Field name, also the attribute file's base name")
    encoding: FieldEncoding = Field(
        default=FieldEncoding.RAW, description="How the file content is surfaced after a read"
    )
    description: str = Field(default="", description="Human-readable description")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure the name is a plain file name inside the attribute directory."""
        if "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"Attribute name must be a plain file name, got {v!r}")
        return v

    def decode(self, raw: str) -> str:
        """Apply this field's encoding to raw file content."""
        return self.encoding.decode(raw)


class AttributeSchema(BaseModel):
    """Ordered, closed set of attribute fields.

    ``attributes`` keeps declaration order, which is also the order reads and
    writes process fields in.
    """

    model_config = ConfigDict(frozen=True)

    attributes: tuple[AttributeField, ...] = Field(min_length=1)

    @field_validator("attributes")
    @classmethod
    def validate_unique(cls, v: tuple[AttributeField, ...]) -> tuple[AttributeField, ...]:
        """Reject duplicate field names."""
        names = [f.name for f in v]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate attribute names: {', '.join(duplicates)}")
        return v

    @property
    def names(self) -> list[str]:
        """Field names in schema order."""
        return [f.name for f in self.attributes]

    def __len__(self) -> int:
        return len(self.attributes)

    def __contains__(self, name: object) -> bool:
        return any(f.name == name for f in self.attributes)

    def get(self, name: str) -> AttributeField:
        """Look up a field by name.

        Raises:
            KeyError: If the schema has no such field
        """
        for f in self.attributes:
            if f.name == name:
                return f
        raise KeyError(name)

    def path_for(self, root: Path | str, name: str) -> Path:
        """Attribute path for a field of this schema."""
        return attribute_path(root, self.get(name).name)

    def decode(self, name: str, raw: str) -> str:
        """Apply the named field's encoding to raw file content."""
        return self.get(name).decode(raw)

    def subset(self, *names: str) -> "AttributeSchema":
        """Build a reduced schema keeping the given fields, in schema order."""
        missing = [n for n in names if n not in self]
        if missing:
            raise KeyError(", ".join(missing))
        return AttributeSchema(attributes=tuple(f for f in self.attributes if f.name in names))


COLOR_FIELDS = ("color_left", "color_center", "color_right", "color_extra")

KEYBOARD_SCHEMA = AttributeSchema(
    attributes=(
        AttributeField(name="brightness", description="Backlight brightness (0-255)"),
        AttributeField(
            name="color_left",
            encoding=FieldEncoding.HEX_PREFIXED,
            description="Left region color",
        ),
        AttributeField(
            name="color_center",
            encoding=FieldEncoding.HEX_PREFIXED,
            description="Center region color",
        ),
        AttributeField(
            name="color_right",
            encoding=FieldEncoding.HEX_PREFIXED,
            description="Right region color",
        ),
        AttributeField(
            name="color_extra",
            encoding=FieldEncoding.HEX_PREFIXED,
            description="Extra region color",
        ),
        AttributeField(name="mode", description="Backlight animation mode"),
        AttributeField(name="state", description="Backlight on (1) or off (0)"),
    )
)
