"""Launcher error types and diagnostic reporting."""

import sys
from typing import NoReturn

ERROR_PREFIX = "LAUNCHER ERROR: "

_last_error: OSError | None = None


class LauncherError(Exception):
    """Base class for launcher utility errors."""

    pass


class InputMismatchError(LauncherError, ValueError):
    """Two paths cannot be related to each other."""

    def __init__(self, message: str, path: str, base: str) -> None:
        super().__init__(f"{message}\npath = {path}\nbase = {base}")
        self.path = path
        self.base = base


class PathConversionError(LauncherError, ValueError):
    """A path could not be converted to Windows form."""

    pass


def record_os_error(error: OSError) -> None:
    """Remember an OS failure for a later get_last_error_string()."""
    global _last_error
    _last_error = error


def clear_last_error() -> None:
    """Forget the recorded OS failure."""
    global _last_error
    _last_error = None


def get_last_error_string(error: OSError | None = None) -> str:
    """Describe an OS failure.

    Args:
        error: Failure to describe. Defaults to the last recorded one.

    Returns:
        "(error: N): message", or an empty string when there is nothing to report
    """
    error = error if error is not None else _last_error
    if error is None:
        return ""

    code = getattr(error, "winerror", None) or error.errno or 0
    message = error.strerror or str(error)
    return f"(error: {code}): {message}"


def _format(fmt: str, args: tuple[object, ...]) -> str:
    return fmt % args if args else fmt


def print_error(fmt: str, *args: object) -> None:
    """Report a non-fatal error on stderr and return.

    Args:
        fmt: printf-style message format
        *args: Format arguments
    """
    message = _format(fmt, args)
    sys.stderr.write(f"{ERROR_PREFIX}{message}\n")
    sys.stderr.flush()


def die(fmt: str, *args: object) -> NoReturn:
    """Report a fatal error on stderr and exit with status 1."""
    print_error(fmt, *args)
    sys.exit(1)
