"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from tuxkbd.utils.persistence import PydanticPersistence

from .enums import FailurePolicy
from .schema import DEFAULT_DEVICE_ROOT

DEFAULT_CONFIG_PATH = Path.home() / ".tuxkbd" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    device_root: Path = Field(
        default=DEFAULT_DEVICE_ROOT,
        description="Directory holding the keyboard driver's attribute files",
    )
    failure_policy: FailurePolicy = Field(
        default=FailurePolicy.FAIL_FAST,
        description=(
            "What to do after an attribute fails: 'fail_fast' stops at the first "
            "failure, 'collect_all' attempts every field and reports any failure"
        ),
    )
    operation_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds to wait for a single attribute read/write (None = wait forever)",
    )

    @field_serializer("device_root")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.tuxkbd/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
