"""
Centralized error handling utilities.

Low-level code raises standard Python exceptions (OSError, pydantic's
ValidationError). The helpers here translate them into TuxKbdError
subclasses carrying user-facing messages and recovery hints, and give
batch operations a way to keep going after individual failures.

| Scenario | Use This |
|----------|----------|
| Attribute file I/O failed | `raise wrap_os_error(e, field, path, "read")` |
| Config file failed validation | `raise wrap_pydantic_error(e, str(path)) from e` |
| Try every field, report all failures | `collector = collect_errors("read config")` |
| Show an error in the CLI | `message, hint = format_error_for_display(e)` |
"""

import errno
import logging
from pathlib import Path
from typing import Optional

from .base import TuxKbdError
from .config import ConfigFileInvalidError, ConfigValidationError
from .device import (
    MODULE_URL,
    AttributeIOError,
    AttributeReadError,
    AttributeWriteError,
)

logger = logging.getLogger(__name__)


def wrap_os_error(
    error: OSError,
    field: str,
    path: Path | str,
    operation: str,
) -> AttributeIOError:
    """
    Convert an OSError from an attribute file into a tuxkbd exception.

    Args:
        error: The original OSError
        field: Name of the schema field being accessed
        path: The attribute file path
        operation: "read" or "write"

    Returns:
        AttributeReadError or AttributeWriteError with an errno-specific hint
    """
    error_type = AttributeWriteError if operation == "write" else AttributeReadError

    if error.errno in (errno.EACCES, errno.EPERM):
        hint = "Permission denied. Try to run tuxkbd as root."
    elif error.errno == errno.ENOENT:
        hint = (
            f"The attribute file does not exist. Make sure the Tuxedo Keyboard kernel "
            f"module is loaded (see {MODULE_URL})."
        )
    elif error.errno == errno.EINVAL and operation == "write":
        hint = "The kernel module rejected the value. Check it is in the accepted range."
    else:
        hint = None

    return error_type(
        field=field,
        path=path,
        original_error=f"{type(error).__name__}: {error}",
        recovery_hint=hint,
    )


def wrap_pydantic_error(error: Exception, file_path: str) -> TuxKbdError:
    """
    Convert Pydantic validation errors to tuxkbd exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        elif errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, TuxKbdError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Example:
        ```python
        collector = collect_errors("read config")

        for field in schema:
            with collector.try_operation(f"read {field.name}"):
                read_one(field)

        if collector.has_errors:
            logger.error(collector.get_summary())
        ```

    Args:
        operation: Description of the overall operation

    Returns:
        ErrorCollector instance
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Collects errors during batch operations.

    Allows operations to continue even if some fail, then
    report all failures at once. Only ``Exception`` subclasses are
    collected; anything else propagates.
    """

    def __init__(self, operation: str):
        """
        Initialize error collector.

        Args:
            operation: Description of the overall operation
        """
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of errors collected."""
        return len(self.errors)

    def try_operation(self, sub_operation: str):
        """
        Context manager for a single operation within the batch.

        Args:
            sub_operation: Description of this specific operation

        Returns:
            Context manager that catches and stores errors
        """
        return self._OperationContext(self, sub_operation)

    def get_summary(self) -> str:
        """
        Get a summary of collected errors.

        Returns:
            Multi-line summary string
        """
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        total = self.error_count + self.success_count
        summary = f"Failed to {self.operation}: {self.error_count} of {total} operations failed:\n"
        for sub_op, error in self.errors:
            if isinstance(error, TuxKbdError):
                summary += f"  - {sub_op}: {error.technical_message}\n"
            else:
                summary += f"  - {sub_op}: {error}\n"

        return summary.rstrip()

    class _OperationContext:
        """Internal context manager for individual operations."""

        def __init__(self, collector: "ErrorCollector", sub_operation: str):
            self.collector = collector
            self.sub_operation = sub_operation

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_type is None:
                self.collector.success_count += 1
                return False

            if not issubclass(exc_type, Exception):
                return False

            self.collector.errors.append((self.sub_operation, exc_val))
            logger.debug(f"{self.collector.operation}: {self.sub_operation} failed: {exc_val}")
            return True
