"""Keyboard controller facade.

Bundles the presence check, reader and writer behind the three calls the
user interface makes, plus convenience methods that raise tuxkbd
exceptions instead of returning booleans.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from tuxkbd.exceptions import ConfigReadError, ConfigWriteError, DeviceNotFoundError
from tuxkbd.models import (
    DEFAULT_DEVICE_ROOT,
    KEYBOARD_SCHEMA,
    AppConfig,
    AttributeSchema,
    ConfigRecord,
    FailurePolicy,
    normalize_record,
)

from .presence import device_present
from .reader import ConfigReader
from .writer import ConfigWriter

logger = logging.getLogger(__name__)


class KeyboardController:
    """
    Stateless entry point for the keyboard's attribute interface.

    Usage Example:
        ```python
        controller = KeyboardController.from_config(AppConfig.load_or_default())

        if not controller.presence_check():
            ...

        current, ok = controller.read_config()
        desired = dict(current, brightness="128")
        ok = controller.write_config(current, desired)
        ```
    """

    def __init__(
        self,
        root: Path | str = DEFAULT_DEVICE_ROOT,
        schema: AttributeSchema = KEYBOARD_SCHEMA,
        policy: FailurePolicy = FailurePolicy.FAIL_FAST,
        timeout: Optional[float] = None,
    ):
        self.root = Path(root)
        self.schema = schema
        self._reader = ConfigReader(self.root, schema, policy, timeout)
        self._writer = ConfigWriter(self.root, schema, policy, timeout)

    @classmethod
    def from_config(
        cls, config: AppConfig, schema: AttributeSchema = KEYBOARD_SCHEMA
    ) -> "KeyboardController":
        """Create a controller from the application config."""
        return cls(
            root=config.device_root,
            schema=schema,
            policy=config.failure_policy,
            timeout=config.operation_timeout,
        )

    # =================================================================
    # Boundary operations
    # =================================================================

    def presence_check(self) -> bool:
        """Check whether the kernel module's attribute directory exists."""
        return device_present(self.root)

    def read_config(self) -> tuple[ConfigRecord, bool]:
        """Read every attribute. Returns (record, success)."""
        return self._reader.read()

    def write_config(self, previous: Mapping[str, str], desired: Mapping[str, str]) -> bool:
        """Write the fields of ``desired`` that differ from ``previous``."""
        return self._writer.write(previous, desired)

    # =================================================================
    # Convenience
    # =================================================================

    def require_present(self) -> None:
        """
        Raises:
            DeviceNotFoundError: If the attribute directory does not exist
        """
        if not self.presence_check():
            raise DeviceNotFoundError(self.root)

    def snapshot(self) -> ConfigRecord:
        """
        Read the configuration and strip surrounding whitespace from values.

        Raises:
            ConfigReadError: If any attribute could not be read
        """
        record, success = self.read_config()
        if not success:
            raise ConfigReadError(self.root)
        return normalize_record(record)

    def apply(
        self,
        changes: Mapping[str, str],
        previous: Optional[Mapping[str, str]] = None,
    ) -> ConfigRecord:
        """
        Apply ``changes`` on top of the current configuration.

        Args:
            changes: Field name -> new value
            previous: Snapshot to diff against (default: take a fresh one)

        Returns:
            The desired record that was written

        Raises:
            KeyError: If ``changes`` names a field outside the schema
            ConfigReadError: If the current configuration could not be read
            ConfigWriteError: If any changed field could not be written
        """
        unknown = sorted(set(changes) - set(self.schema.names))
        if unknown:
            raise KeyError(f"Unknown fields: {', '.join(unknown)}")

        if previous is None:
            previous = self.snapshot()
        desired = {**previous, **changes}
        changed = self._writer.changed_fields(previous, desired)

        if not self.write_config(previous, desired):
            raise ConfigWriteError(self.root, changed)

        logger.info(f"Applied {len(changed)} change(s): {', '.join(changed) or 'none'}")
        return desired
