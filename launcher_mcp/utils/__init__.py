"""Utilities for Launcher MCP."""

from launcher_mcp.utils.console import ColorfulFormatter
from launcher_mcp.utils.diagnostics import (
    InputMismatchError,
    LauncherError,
    PathConversionError,
    die,
    get_last_error_string,
    print_error,
)
from launcher_mcp.utils.env import get_env, get_random_str, set_env
from launcher_mcp.utils.fs import (
    delete_directory_by_path,
    delete_file_by_path,
    does_directory_path_exist,
    does_file_path_exist,
)
from launcher_mcp.utils.paths import (
    as_absolute_windows_path,
    as_windows_path,
    get_base_name_from_path,
    get_binary_path_with_extension,
    get_binary_path_without_extension,
    get_parent_dir_from_path,
    is_absolute,
    normalize_path,
    relative_to,
)
from launcher_mcp.utils.shell import bash_escape_arg, build_command_line, windows_escape_arg

__all__ = [
    "as_absolute_windows_path",
    "as_windows_path",
    "bash_escape_arg",
    "build_command_line",
    "ColorfulFormatter",
    "delete_directory_by_path",
    "delete_file_by_path",
    "die",
    "does_directory_path_exist",
    "does_file_path_exist",
    "get_base_name_from_path",
    "get_binary_path_with_extension",
    "get_binary_path_without_extension",
    "get_env",
    "get_last_error_string",
    "get_parent_dir_from_path",
    "get_random_str",
    "InputMismatchError",
    "is_absolute",
    "LauncherError",
    "normalize_path",
    "PathConversionError",
    "print_error",
    "relative_to",
    "set_env",
    "windows_escape_arg",
]
