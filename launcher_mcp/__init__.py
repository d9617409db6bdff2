"""Launcher MCP: command-line quoting and relative paths for native launchers."""

from launcher_mcp.utils.diagnostics import InputMismatchError, LauncherError
from launcher_mcp.utils.paths import relative_to
from launcher_mcp.utils.shell import bash_escape_arg, windows_escape_arg

__all__ = [
    "bash_escape_arg",
    "InputMismatchError",
    "LauncherError",
    "relative_to",
    "windows_escape_arg",
]
