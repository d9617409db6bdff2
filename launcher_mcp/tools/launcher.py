"""Launcher tools: argument escaping and path helpers."""

import logging

from launcher_mcp.state import get_settings
from launcher_mcp.utils.diagnostics import InputMismatchError, PathConversionError, print_error
from launcher_mcp.utils.paths import (
    as_windows_path,
    get_binary_path_with_extension,
    get_binary_path_without_extension,
    normalize_path,
    relative_to,
)
from launcher_mcp.utils.shell import bash_escape_arg, build_command_line, windows_escape_arg

logger = logging.getLogger(__name__)

QUOTING_STYLES = ("windows", "bash")


async def escape_arg(argument: str, style: str = "windows") -> str:
    """Escape a single argument for a command line.

    Args:
        argument: The unescaped argument.
        style: "windows" for CreateProcessW command lines,
            "bash" for shell-style command strings.

    Examples:
        escape_arg("a b") -> "a b" wrapped in double quotes
        escape_arg('say "hi"', style="bash")

    Returns:
        The escaped token, or an error message.
    """
    if style == "windows":
        return windows_escape_arg(argument)
    if style == "bash":
        return bash_escape_arg(argument)
    return f"Error: Unknown style {style!r}, expected one of: {', '.join(QUOTING_STYLES)}"


async def command_line(arguments: list[str], style: str = "windows") -> str:
    """Build a full command line from unescaped arguments.

    Args:
        arguments: Program path followed by its arguments.
        style: "windows" or "bash".

    Returns:
        Escaped arguments joined by single spaces, or an error message.
    """
    try:
        return build_command_line(arguments, style=style)
    except ValueError as e:
        return f"Error: {e}"


async def relative_path(path: str, base: str, normalize: bool = True) -> str:
    """Compute the relative path from base to path.

    Args:
        path: Target path, e.g. "C:\\work\\bin\\tool.exe".
        base: Directory to be relative to, e.g. "C:\\work\\out".
        normalize: Convert both paths to Windows form first. Paths are
            also lower-cased unless LAUNCHER_LOWERCASE_PATHS=false.

    Returns:
        The relative path ("" when both are the same), or an error message.
    """
    if normalize:
        convert = normalize_path if get_settings().lowercase_paths else as_windows_path
        try:
            path, base = convert(path), convert(base)
        except PathConversionError as e:
            return f"Error: {e}"

    try:
        result = relative_to(path, base)
    except InputMismatchError as e:
        print_error("%s", e)
        return f"Error: {e}"

    logger.debug("Relative path from %s to %s: %r", base, path, result)
    return result


async def binary_path(binary: str, with_extension: bool = True) -> str:
    """Add or strip the .exe extension of a binary path.

    Args:
        binary: Binary path with or without ".exe".
        with_extension: True to ensure ".exe", False to strip it.

    Returns:
        The adjusted binary path.
    """
    if with_extension:
        return get_binary_path_with_extension(binary)
    return get_binary_path_without_extension(binary)
