"""
Custom exception hierarchy for tuxkbd.

## Exception Hierarchy

```
TuxKbdError (base)
├── DeviceError
│   ├── DeviceNotFoundError
│   ├── AttributeIOError
│   │   ├── AttributeReadError
│   │   └── AttributeWriteError
│   ├── AttributeTimeoutError
│   ├── WorkerFailedError
│   ├── ConfigReadError
│   └── ConfigWriteError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `TuxKbdError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Missing kernel module

```python
from tuxkbd.exceptions import DeviceNotFoundError

raise DeviceNotFoundError("/sys/devices/platform/tuxedo_keyboard")

# User sees: "Unable to find the Tuxedo Keyboard kernel module."
# Recovery hint: "If you haven't installed the module, see ..."
```

The reader and writer themselves never raise these for per-field I/O
problems; they log them and report a boolean. The exceptions surface
through `KeyboardController.snapshot()` / `apply()` and the CLI.
"""

from .base import TuxKbdError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .device import (
    AttributeIOError,
    AttributeReadError,
    AttributeTimeoutError,
    AttributeWriteError,
    ConfigReadError,
    ConfigWriteError,
    DeviceError,
    DeviceNotFoundError,
    WorkerFailedError,
)
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    wrap_os_error,
    wrap_pydantic_error,
)

__all__ = [
    # Device
    "AttributeIOError",
    "AttributeReadError",
    "AttributeTimeoutError",
    "AttributeWriteError",
    "ConfigReadError",
    "ConfigWriteError",
    "DeviceError",
    "DeviceNotFoundError",
    "WorkerFailedError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Base
    "TuxKbdError",
    # Handlers
    "ErrorCollector",
    "collect_errors",
    "format_error_for_display",
    "wrap_os_error",
    "wrap_pydantic_error",
]
