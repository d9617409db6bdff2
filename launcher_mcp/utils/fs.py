"""File and directory checks used by the launcher."""

import logging
import os

from launcher_mcp.utils.diagnostics import record_os_error

logger = logging.getLogger(__name__)


def does_file_path_exist(path: str) -> bool:
    """Check that a path exists and is not a directory."""
    return os.path.exists(path) and not os.path.isdir(path)


def does_directory_path_exist(path: str) -> bool:
    """Check that a path exists and is a directory."""
    return os.path.isdir(path)


def delete_file_by_path(path: str) -> bool:
    """Delete a file.

    Returns:
        True if the file was deleted, False otherwise
    """
    try:
        os.remove(path)
    except OSError as e:
        record_os_error(e)
        logger.debug("Failed to delete file %s: %s", path, e)
        return False
    return True


def delete_directory_by_path(path: str) -> bool:
    """Delete an empty directory.

    Returns:
        True if the directory was deleted, False otherwise
    """
    try:
        os.rmdir(path)
    except OSError as e:
        record_os_error(e)
        logger.debug("Failed to delete directory %s: %s", path, e)
        return False
    return True
