"""Vault layer — validated, contained, no-clobber markdown writes."""

from vault_mcp.vault.errors import (
    FileAlreadyExistsError,
    InvalidFilenameError,
    PathOutsideVaultError,
    TargetDirectoryMissingError,
    VaultError,
    VaultWriteError,
)
from vault_mcp.vault.writer import VaultWriter, validate_filename

__all__ = [
    "FileAlreadyExistsError",
    "InvalidFilenameError",
    "PathOutsideVaultError",
    "TargetDirectoryMissingError",
    "VaultError",
    "VaultWriteError",
    "VaultWriter",
    "validate_filename",
]
