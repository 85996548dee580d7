"""Device-related exceptions.

This module defines exceptions for keyboard driver errors:
- DeviceError: Base class for device errors
- DeviceNotFoundError: The driver's attribute directory is missing
- AttributeIOError: A single attribute file could not be read or written
- AttributeTimeoutError: A single attribute operation did not finish in time
- WorkerFailedError: The worker running an attribute operation crashed
- ConfigReadError / ConfigWriteError: A whole read or write did not succeed
"""

from pathlib import Path

from .base import TuxKbdError

MODULE_URL = "https://github.com/tuxedocomputers/tuxedo-keyboard"

RUN_AS_ROOT_HINT = (
    "Try to run tuxkbd as root, and make sure the Tuxedo Keyboard kernel module "
    "was installed correctly."
)


class DeviceError(TuxKbdError):
    """Keyboard driver operation failed."""

    def __init__(self, user_message: str, root: Path | str | None = None, **kwargs):
        """
        Initialize device error.

        Args:
            user_message: User-friendly error message
            root: The attribute directory involved (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.root = root


class DeviceNotFoundError(DeviceError):
    """The Tuxedo Keyboard kernel module's attribute directory does not exist."""

    def __init__(self, root: Path | str):
        """
        Initialize device-not-found error.

        Args:
            root: The attribute directory that was checked
        """
        user_msg = "Unable to find the Tuxedo Keyboard kernel module."
        recovery = (
            f"If you haven't installed the module, see {MODULE_URL} for instructions. "
            f"If it is installed, make sure its attributes are at \"{root}\" and that "
            "tuxkbd has access to them (try running as root)."
        )

        super().__init__(
            user_message=user_msg,
            technical_message=f"Attribute directory {root} does not exist or is not accessible",
            root=root,
            recoverable=True,
            recovery_hint=recovery,
        )


class AttributeIOError(DeviceError):
    """A single attribute file could not be accessed."""

    operation = "access"

    def __init__(
        self,
        field: str,
        path: Path | str,
        original_error: str | None = None,
        recovery_hint: str | None = None,
    ):
        """
        Initialize attribute I/O error.

        Args:
            field: Name of the schema field
            path: Attribute file path
            original_error: The underlying OS error message
            recovery_hint: Suggestion for how to fix the issue
        """
        user_msg = f"Unable to {self.operation} attribute '{field}'."
        tech_msg = f"Failed to {self.operation} {path}"
        if original_error:
            tech_msg += f": {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint=recovery_hint or RUN_AS_ROOT_HINT,
        )
        self.field = field
        self.path = path
        self.original_error = original_error


class AttributeReadError(AttributeIOError):
    """An attribute file could not be read."""

    operation = "read"


class AttributeWriteError(AttributeIOError):
    """An attribute file could not be written."""

    operation = "write"


class AttributeTimeoutError(DeviceError):
    """An attribute operation did not complete within the configured timeout."""

    def __init__(self, operation: str, timeout: float):
        """
        Initialize attribute timeout error.

        Args:
            operation: Description of the operation (e.g., "read brightness")
            timeout: The timeout that elapsed, in seconds
        """
        super().__init__(
            user_message=f"Timed out trying to {operation}.",
            technical_message=f"{operation} did not complete within {timeout}s",
            recoverable=True,
            recovery_hint="The kernel module may be busy. Try again, or raise 'operation_timeout'.",
        )
        self.operation = operation
        self.timeout = timeout


class WorkerFailedError(DeviceError):
    """The isolated worker running an attribute operation failed unexpectedly."""

    def __init__(self, operation: str, original_error: BaseException):
        """
        Initialize worker failure error.

        Args:
            operation: Description of the operation (e.g., "write mode")
            original_error: The exception raised inside the worker
        """
        super().__init__(
            user_message=f"Unexpected failure while trying to {operation}.",
            technical_message=(
                f"Worker for '{operation}' raised {type(original_error).__name__}: {original_error}"
            ),
            recoverable=True,
        )
        self.operation = operation
        self.original_error = original_error


class ConfigReadError(DeviceError):
    """The keyboard configuration could not be read completely."""

    def __init__(self, root: Path | str):
        """
        Initialize config read error.

        Args:
            root: The attribute directory that was read
        """
        super().__init__(
            user_message="Unable to read the keyboard configuration.",
            technical_message=f"One or more attributes under {root} could not be read",
            root=root,
            recoverable=True,
            recovery_hint=RUN_AS_ROOT_HINT,
        )


class ConfigWriteError(DeviceError):
    """The keyboard configuration could not be written completely."""

    def __init__(self, root: Path | str, fields: list[str] | None = None):
        """
        Initialize config write error.

        Args:
            root: The attribute directory that was written
            fields: The fields that were meant to change
        """
        user_msg = (
            "Unable to write the keyboard configuration. "
            "The keyboard may be left partially updated."
        )
        tech_msg = f"Write under {root} did not fully succeed"
        if fields:
            tech_msg += f" (changed fields: {', '.join(fields)})"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            root=root,
            recoverable=True,
            recovery_hint=RUN_AS_ROOT_HINT,
        )
        self.fields = fields or []
