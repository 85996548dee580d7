"""Kernel module presence check."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def device_present(root: Path | str) -> bool:
    """Check whether the driver's attribute directory exists.

    Errors raised by the check itself (permission denied on a parent,
    invalid path) count as "not present".
    """
    try:
        present = Path(root).is_dir()
    except (OSError, ValueError) as e:
        logger.warning(f"Unable to check {root}: {e}")
        return False

    logger.debug(f"Attribute directory {root} present: {present}")
    return present
