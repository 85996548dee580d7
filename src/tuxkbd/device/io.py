"""Isolated attribute file I/O.

Every attribute read or write runs on its own single-thread executor and
the caller blocks until it finishes. Whatever the worker raises is turned
into a tuxkbd exception at the join point, so a bad attribute file can
never take down the calling (UI) thread.
"""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from pathlib import Path
from typing import Optional, TypeVar

from tuxkbd.exceptions import AttributeTimeoutError, WorkerFailedError, wrap_os_error

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENCODING = "utf-8"


def run_isolated(
    func: Callable[..., T],
    *args,
    operation: str,
    timeout: Optional[float] = None,
) -> T:
    """
    Run ``func(*args)`` on a dedicated worker thread and wait for it.

    Args:
        func: Callable to run
        *args: Positional arguments for ``func``
        operation: Description used in errors and logs (e.g., "read mode")
        timeout: Seconds to wait before giving up (None = wait forever)

    Returns:
        Whatever ``func`` returned

    Raises:
        OSError: If ``func`` raised an OSError (re-raised unchanged)
        AttributeTimeoutError: If ``timeout`` elapsed first
        WorkerFailedError: If ``func`` raised anything else, including
            BaseException subclasses such as SystemExit
    """
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="tuxkbd-io")
    try:
        future = executor.submit(func, *args)
        try:
            error = future.exception(timeout=timeout)
        except FuturesTimeoutError:
            # A hung sysfs call cannot be interrupted; abandon the worker
            future.cancel()
            logger.error(f"Timed out after {timeout}s: {operation}")
            raise AttributeTimeoutError(operation, timeout) from None

        if error is None:
            return future.result()

        if isinstance(error, OSError):
            raise error

        logger.error(f"Worker failed during {operation}: {type(error).__name__}: {error}")
        raise WorkerFailedError(operation, error) from error
    finally:
        executor.shutdown(wait=False)


def _read_text(path: Path) -> str:
    # newline="" keeps \r and \r\n as the driver wrote them
    with open(path, encoding=ENCODING, newline="") as f:
        return f.read()


def _write_text(path: Path, content: str) -> None:
    # Mode "w" truncates; the attribute is replaced, never appended to
    with open(path, "w", encoding=ENCODING, newline="") as f:
        f.write(content)


def read_attribute(path: Path, field: str, timeout: Optional[float] = None) -> str:
    """
    Read the full raw content of an attribute file.

    No trimming is done; a trailing newline from the kernel is kept.

    Raises:
        AttributeReadError: If the file could not be read
        AttributeTimeoutError: If the read did not finish in time
        WorkerFailedError: If the worker failed for any other reason
    """
    try:
        content = run_isolated(_read_text, path, operation=f"read {field}", timeout=timeout)
    except OSError as e:
        raise wrap_os_error(e, field, path, "read") from e

    logger.debug(f"Read {field} from {path}: {content!r}")
    return content


def write_attribute(
    path: Path, field: str, value: str, timeout: Optional[float] = None
) -> None:
    """
    Replace the content of an attribute file with ``value``, verbatim.

    Raises:
        AttributeWriteError: If the file could not be written
        AttributeTimeoutError: If the write did not finish in time
        WorkerFailedError: If the worker failed for any other reason
    """
    try:
        run_isolated(_write_text, path, value, operation=f"write {field}", timeout=timeout)
    except OSError as e:
        raise wrap_os_error(e, field, path, "write") from e

    logger.debug(f"Wrote {field} to {path}: {value!r}")
