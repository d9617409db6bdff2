"""Windows path helpers: normalization and relative paths."""

import ntpath
import os
import re
from typing import Final

from launcher_mcp.utils.diagnostics import InputMismatchError, PathConversionError

SEP: Final[str] = "\\"
PARENT: Final[str] = ".."
EXE_EXTENSION: Final[str] = ".exe"

# /c/foo style paths produced by MSYS shells
MSYS_DRIVE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\\([A-Za-z])(?=\\|$)")


def is_absolute(path: str) -> bool:
    """Check whether a path starts with a drive identifier such as ``C:``."""
    return len(path) >= 2 and path[0].isalpha() and path[1] == ":"


def relative_to(path: str, base: str) -> str:
    """Compute the shortest relative path from ``base`` to ``path``.

    Both paths must already be normalized: ``\\`` separators only, no
    trailing separator, same casing. Characters are compared as-is.

    Args:
        path: Target path
        base: Directory the result is relative to

    Returns:
        Relative path, ``""`` when both paths are the same

    Raises:
        InputMismatchError: If one path is absolute and the other is not,
            or the two absolute paths live on different drives
    """
    path_is_abs = is_absolute(path)
    base_is_abs = is_absolute(base)
    if path_is_abs != base_is_abs:
        raise InputMismatchError(
            "Cannot calculate relative path from an absolute and a non-absolute path.",
            path,
            base,
        )
    if path_is_abs and path[0] != base[0]:
        raise InputMismatchError(
            "Cannot calculate relative path from absolute path under different drives.",
            path,
            base,
        )

    # Separator position after the last fully matched fragment
    pos = 0
    last_sep = -1
    limit = min(len(path), len(base))
    while pos < limit and path[pos] == base[pos]:
        if path[pos] == SEP:
            last_sep = pos
        pos += 1

    path_done = pos == len(path)
    base_done = pos == len(base)
    if path_done and base_done:
        return ""

    # One path is a parent of the other: c:\foo vs c:\foo\bar
    if (base_done and path[pos] == SEP) or (path_done and base[pos] == SEP):
        last_sep = pos

    parts: list[str] = []
    if last_sep + 1 < len(base):
        parts.append(PARENT)
        parts.extend(PARENT for c in base[last_sep + 1 :] if c == SEP)

    remainder = path[last_sep + 1 :]
    if remainder:
        parts.append(remainder)

    return SEP.join(parts)


def as_windows_path(path: str) -> str:
    """Convert a path to normalized Windows form.

    Forward slashes become backslashes, ``/c/foo`` becomes ``c:\\foo`` and
    ``.``/``..`` segments are collapsed lexically.

    Raises:
        PathConversionError: If the path contains a null byte
    """
    if "\x00" in path:
        raise PathConversionError(f"Path contains null byte: {path!r}")
    if not path:
        return ""

    converted = path.replace("/", SEP)
    converted = MSYS_DRIVE_PATTERN.sub(lambda m: f"{m.group(1)}:", converted, count=1)
    if re.fullmatch(r"[A-Za-z]:", converted):
        converted += SEP
    return ntpath.normpath(converted)


def as_absolute_windows_path(path: str, cwd: str | None = None) -> str:
    """Convert a path to an absolute, normalized Windows path.

    Args:
        path: Absolute or relative path
        cwd: Directory relative paths are resolved against.
            Defaults to the process working directory.

    Raises:
        PathConversionError: If the path is empty or no absolute form exists
    """
    if not path:
        raise PathConversionError("Path cannot be empty")

    converted = as_windows_path(path)
    if is_absolute(converted):
        return converted

    base = as_windows_path(cwd if cwd is not None else os.getcwd())
    if not is_absolute(base):
        raise PathConversionError(
            f"Cannot resolve {path} against non-Windows directory {base}"
        )
    return ntpath.normpath(ntpath.join(base, converted))


def normalize_path(path: str) -> str:
    """Normalize a path for comparison: Windows form, lower-cased."""
    return as_windows_path(path).lower()


def get_base_name_from_path(path: str) -> str:
    """Return the part after the last separator."""
    return path[max(path.rfind(SEP), path.rfind("/")) + 1 :]


def get_parent_dir_from_path(path: str) -> str:
    """Return the part before the last separator.

    A path without any separator is returned unchanged.
    """
    index = max(path.rfind(SEP), path.rfind("/"))
    if index < 0:
        return path
    return path[:index]


def get_binary_path_without_extension(binary: str) -> str:
    """Strip a trailing ``.exe``."""
    if binary.endswith(EXE_EXTENSION):
        return binary[: -len(EXE_EXTENSION)]
    return binary


def get_binary_path_with_extension(binary: str) -> str:
    """Ensure the binary path ends with exactly one ``.exe``."""
    return get_binary_path_without_extension(binary) + EXE_EXTENSION
