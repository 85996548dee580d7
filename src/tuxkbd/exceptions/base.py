"""Base exception for tuxkbd.

Every tuxkbd error carries two messages. ``user_message`` is the one line
the CLI prints under its ERROR banner; ``technical_message`` goes to the
log file and names paths, errno values and the like. ``recovery_hint``
is printed below the banner when present.

Subclasses attach their context (attribute directory, field, path,
config file) as plain attributes; ``log_message()`` folds the ones that
are set into a single log line.
"""

from typing import Optional

# Attributes reported by log_message(), in this order
CONTEXT_ATTRIBUTES = ("root", "field", "path", "operation", "file_path")


class TuxKbdError(Exception):
    """
    Base exception for all tuxkbd errors.

    Attributes:
        user_message: One-line message printed by the CLI
        technical_message: Message written to the log
        recoverable: True if retrying (e.g. as root) can succeed
        recovery_hint: What the user can do about it
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        *,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.technical_message!r})"

    def context(self) -> dict[str, str]:
        """Context attributes that are set on this error, as strings."""
        return {
            name: str(getattr(self, name))
            for name in CONTEXT_ATTRIBUTES
            if getattr(self, name, None) is not None
        }

    def log_message(self) -> str:
        """Single log line: class name, technical message and context."""
        msg = f"{type(self).__name__}: {self.technical_message}"
        context = self.context()
        if context:
            msg += " (" + ", ".join(f"{k}={v}" for k, v in context.items()) + ")"
        return msg

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg
