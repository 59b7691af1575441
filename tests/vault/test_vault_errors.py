"""Tests for vault error types."""

from pathlib import Path

from vault_mcp.tools.errors import ToolError
from vault_mcp.vault.errors import (
    FileAlreadyExistsError,
    InvalidFilenameError,
    PathOutsideVaultError,
    TargetDirectoryMissingError,
    VaultError,
    VaultWriteError,
)


class TestVaultErrors:
    def test_all_are_tool_errors(self) -> None:
        for cls in (
            InvalidFilenameError,
            TargetDirectoryMissingError,
            PathOutsideVaultError,
            FileAlreadyExistsError,
            VaultWriteError,
        ):
            assert issubclass(cls, VaultError)
            assert issubclass(cls, ToolError)

    def test_invalid_filename_message(self) -> None:
        err = InvalidFilenameError("a|b", "contains invalid character '|'")
        assert str(err) == "Invalid filename 'a|b': contains invalid character '|'"
        assert err.reason == "contains invalid character '|'"

    def test_path_errors_keep_path(self) -> None:
        path = Path("/vault/Tips/note.md")
        assert FileAlreadyExistsError(path).path == path
        assert str(FileAlreadyExistsError(path)) == f"File already exists: {path}"
        assert str(PathOutsideVaultError(path)) == f"File path is outside vault: {path}"
        assert str(TargetDirectoryMissingError(path.parent)).startswith("Target directory does not exist")

    def test_write_error_detail(self) -> None:
        path = Path("/vault/Tips/note.md")
        assert str(VaultWriteError(path)) == f"Failed to write file: {path}"
        assert str(VaultWriteError(path, "Disk full")) == f"Failed to write file: {path} (Disk full)"
