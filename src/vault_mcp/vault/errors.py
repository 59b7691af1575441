"""Error types for vault writes.

Every vault error is a :class:`~vault_mcp.tools.errors.ToolError`, so a
failed save surfaces to the client as tool output, never as a protocol error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vault_mcp.tools.errors import ToolError

if TYPE_CHECKING:
    from pathlib import Path


class VaultError(ToolError):
    """Base error for all vault write failures."""


class InvalidFilenameError(VaultError):
    """The requested filename failed validation."""

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Invalid filename {filename!r}: {reason}")


class TargetDirectoryMissingError(VaultError):
    """The target directory under the vault root does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Target directory does not exist: {path}")


class PathOutsideVaultError(VaultError):
    """The resolved file path escapes the vault root."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File path is outside vault: {path}")


class FileAlreadyExistsError(VaultError):
    """The destination file exists; vault writes never overwrite."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File already exists: {path}")


class VaultWriteError(VaultError):
    """The filesystem rejected the write."""

    def __init__(self, path: Path, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to write file: {path}" + (f" ({detail})" if detail else ""))
