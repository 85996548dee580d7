"""Read the keyboard configuration from its attribute files."""

import logging
from pathlib import Path
from typing import Optional

from tuxkbd.exceptions import collect_errors
from tuxkbd.models import KEYBOARD_SCHEMA, AttributeSchema, ConfigRecord, FailurePolicy

from .io import read_attribute

logger = logging.getLogger(__name__)


class ConfigReader:
    """
    Reads every schema attribute into a fresh ConfigRecord.

    Fields are read one at a time, in schema order, each on its own
    isolated worker. Under FAIL_FAST the first failure stops the read and
    the fields read so far are returned; under COLLECT_ALL every field is
    attempted and failed ones are left out. Either way the success flag is
    False if anything failed, so callers must check it rather than the
    record's completeness.
    """

    def __init__(
        self,
        root: Path | str,
        schema: AttributeSchema = KEYBOARD_SCHEMA,
        policy: FailurePolicy = FailurePolicy.FAIL_FAST,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the reader.

        Args:
            root: Directory holding the attribute files
            schema: Fields to read
            policy: Behaviour after a failed field
            timeout: Per-field timeout in seconds (None = wait forever)
        """
        self.root = Path(root)
        self.schema = schema
        self.policy = policy
        self.timeout = timeout

    def read(self) -> tuple[ConfigRecord, bool]:
        """
        Read the current configuration.

        Returns:
            Tuple of (record, success)
        """
        record: ConfigRecord = {}
        collector = collect_errors(f"read config from {self.root}")

        for field in self.schema.attributes:
            with collector.try_operation(f"read {field.name}"):
                raw = read_attribute(
                    self.schema.path_for(self.root, field.name), field.name, self.timeout
                )
                record[field.name] = field.decode(raw)

            if collector.has_errors and self.policy is FailurePolicy.FAIL_FAST:
                break

        if collector.has_errors:
            logger.error(collector.get_summary())
            return record, False

        logger.info(f"Read {len(record)} attributes from {self.root}")
        return record, True
