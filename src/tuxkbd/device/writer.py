"""Write changed configuration fields back to the attribute files."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from tuxkbd.exceptions import collect_errors
from tuxkbd.models import KEYBOARD_SCHEMA, AttributeSchema, FailurePolicy

from .io import write_attribute

logger = logging.getLogger(__name__)


class ConfigWriter:
    """
    Writes the difference between two snapshots to the attribute files.

    Values are written verbatim; encodings only apply on read. A write that
    fails part way is not rolled back, so the keyboard may be left partially
    updated.
    """

    def __init__(
        self,
        root: Path | str,
        schema: AttributeSchema = KEYBOARD_SCHEMA,
        policy: FailurePolicy = FailurePolicy.FAIL_FAST,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the writer.

        Args:
            root: Directory holding the attribute files
            schema: Fields that may be written
            policy: Behaviour after a failed field
            timeout: Per-field timeout in seconds (None = wait forever)
        """
        self.root = Path(root)
        self.schema = schema
        self.policy = policy
        self.timeout = timeout

    def changed_fields(
        self, previous: Mapping[str, str], desired: Mapping[str, str]
    ) -> list[str]:
        """
        List the schema fields that need writing, in schema order.

        A field needs writing when it is in ``desired`` and ``previous``
        either lacks it or holds a different string.
        """
        changed = []
        for name in self.schema.names:
            if name not in desired:
                continue
            if name in previous and previous[name] == desired[name]:
                continue
            changed.append(name)
        return changed

    def write(self, previous: Mapping[str, str], desired: Mapping[str, str]) -> bool:
        """
        Write every changed field.

        Args:
            previous: Snapshot the device is believed to be in
            desired: Snapshot to apply

        Returns:
            True if every changed field was written
        """
        unknown = sorted(set(desired) - set(self.schema.names))
        if unknown:
            logger.warning(f"Ignoring fields outside the schema: {', '.join(unknown)}")

        changed = self.changed_fields(previous, desired)
        if not changed:
            logger.debug("Nothing to write, snapshots are identical")
            return True

        collector = collect_errors(f"write config to {self.root}")

        for name in changed:
            with collector.try_operation(f"write {name}"):
                write_attribute(
                    self.schema.path_for(self.root, name), name, desired[name], self.timeout
                )

            if collector.has_errors and self.policy is FailurePolicy.FAIL_FAST:
                break

        if collector.has_errors:
            logger.error(collector.get_summary())
            return False

        logger.info(f"Wrote {', '.join(changed)} to {self.root}")
        return True
