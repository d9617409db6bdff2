"""Tests for file and directory helpers."""

from pathlib import Path

from launcher_mcp.utils.diagnostics import clear_last_error, get_last_error_string
from launcher_mcp.utils.fs import (
    delete_directory_by_path,
    delete_file_by_path,
    does_directory_path_exist,
    does_file_path_exist,
)


def test_file_exists(tmp_path: Path) -> None:
    """A regular file exists as a file, not as a directory."""
    target = tmp_path / "tool.exe"
    target.write_text("binary")

    assert does_file_path_exist(str(target)) is True
    assert does_directory_path_exist(str(target)) is False


def test_directory_exists(tmp_path: Path) -> None:
    """A directory exists as a directory, not as a file."""
    assert does_directory_path_exist(str(tmp_path)) is True
    assert does_file_path_exist(str(tmp_path)) is False


def test_missing_path(tmp_path: Path) -> None:
    """Missing paths are neither files nor directories."""
    missing = str(tmp_path / "missing")
    assert does_file_path_exist(missing) is False
    assert does_directory_path_exist(missing) is False


def test_delete_file(tmp_path: Path) -> None:
    """Deleting a file removes it."""
    target = tmp_path / "runfiles_manifest"
    target.write_text("data")

    assert delete_file_by_path(str(target)) is True
    assert not target.exists()


def test_delete_missing_file_records_error(tmp_path: Path) -> None:
    """A failed delete returns False and records the OS error."""
    clear_last_error()

    assert delete_file_by_path(str(tmp_path / "missing")) is False
    assert get_last_error_string().startswith("(error: ")

    clear_last_error()


def test_delete_directory(tmp_path: Path) -> None:
    """Deleting an empty directory removes it."""
    target = tmp_path / "runfiles"
    target.mkdir()

    assert delete_directory_by_path(str(target)) is True
    assert not target.exists()


def test_delete_non_empty_directory(tmp_path: Path) -> None:
    """Non-empty directories are not deleted."""
    target = tmp_path / "runfiles"
    target.mkdir()
    (target / "file").write_text("data")

    assert delete_directory_by_path(str(target)) is False
    assert target.exists()
    clear_last_error()
