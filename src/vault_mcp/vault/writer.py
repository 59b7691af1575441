"""VaultWriter — persists markdown notes beneath a fixed vault directory.

Writes are restricted to a single target directory under the vault root and
go through four gates, in order:

1. **Filename validation** — pure string checks, no I/O.
2. **Directory precondition** — the target directory must already exist.
3. **Containment** — the canonical destination must live under the
   canonical vault root captured at construction.
4. **No-clobber** — an existing file is never replaced.

Usage::

    writer = VaultWriter(Path("~/Documents/vault").expanduser(), "Tips")
    path = writer.save("meeting-notes", "# Notes\\n")
"""

from __future__ import annotations

import logging
from pathlib import Path

from vault_mcp.utils.telemetry import ATTR_VAULT_FILENAME, get_tracer
from vault_mcp.vault.errors import (
    FileAlreadyExistsError,
    InvalidFilenameError,
    PathOutsideVaultError,
    TargetDirectoryMissingError,
    VaultWriteError,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

MARKDOWN_SUFFIX = ".md"

INVALID_CHARACTERS = ("/", "\\", ":", "*", "?", '"', "<", ">", "|")

RESERVED_NAMES = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)


def validate_filename(filename: str) -> None:
    """Reject filenames that are empty, unsafe, or reserved.

    Raises:
        InvalidFilenameError: With a reason describing the first rule broken.
    """
    if not filename:
        raise InvalidFilenameError(filename, "filename cannot be empty")

    for ch in INVALID_CHARACTERS:
        if ch in filename:
            raise InvalidFilenameError(filename, f"contains invalid character {ch!r}")

    if any(ord(ch) < 0x20 or ch == "\x7f" for ch in filename):
        raise InvalidFilenameError(filename, "contains a control character")

    if ".." in filename:
        raise InvalidFilenameError(filename, "cannot contain '..'")

    upper = filename.upper()
    for reserved in RESERVED_NAMES:
        if upper == reserved or upper.startswith(reserved + "."):
            raise InvalidFilenameError(filename, f"{reserved} is a reserved name")


def with_markdown_suffix(filename: str) -> str:
    """Append ``.md`` unless the name already ends with it."""
    if filename.endswith(MARKDOWN_SUFFIX):
        return filename
    return filename + MARKDOWN_SUFFIX


class VaultWriter:
    """Create new markdown files inside ``vault_root / target_directory``.

    The vault root is canonicalised once here; later symlink changes to the
    root itself do not move the containment boundary.
    """

    def __init__(self, vault_root: Path, target_directory: str) -> None:
        self._vault_root = vault_root
        self._target_directory = target_directory
        self._canonical_root = vault_root.expanduser().resolve()

    @property
    def vault_root(self) -> Path:
        return self._vault_root

    @property
    def target_directory(self) -> str:
        return self._target_directory

    @property
    def target_path(self) -> Path:
        """Full path of the directory new files are written to."""
        return self._vault_root / self._target_directory

    def target_directory_exists(self) -> bool:
        return self.target_path.is_dir()

    def is_within_vault(self, file_path: Path) -> bool:
        """Return ``True`` if *file_path* canonicalises to a vault descendant.

        A path that does not exist yet is judged by its canonical parent with
        the final segment re-appended.

        Raises:
            OSError: The filesystem rejected the path itself (for example a
                name longer than the platform limit).
        """
        if file_path.exists():
            candidate = file_path.resolve()
        else:
            try:
                candidate = file_path.parent.resolve(strict=True) / file_path.name
            except OSError:
                return False
        return candidate == self._canonical_root or self._canonical_root in candidate.parents

    def save(self, filename: str, content: str) -> Path:
        """Write *content* to a new file and return its path.

        Raises:
            InvalidFilenameError: The name failed :func:`validate_filename`.
            TargetDirectoryMissingError: The target directory is absent.
            PathOutsideVaultError: The destination escapes the vault root.
            FileAlreadyExistsError: The destination already exists.
            VaultWriteError: The filesystem refused the lookup or the write.
        """
        with _tracer.start_as_current_span("vault.save") as span:
            span.set_attribute(ATTR_VAULT_FILENAME, filename)

            validate_filename(filename)

            if not self.target_directory_exists():
                raise TargetDirectoryMissingError(self.target_path)

            file_path = self.target_path / with_markdown_suffix(filename)

            try:
                if not self.is_within_vault(file_path):
                    raise PathOutsideVaultError(file_path)
                if file_path.exists() or file_path.is_symlink():
                    raise FileAlreadyExistsError(file_path)
            except OSError as exc:
                # e.g. ENAMETOOLONG from stat() on an over-long name
                raise VaultWriteError(file_path, exc.strerror or str(exc)) from exc

            data = content.encode("utf-8")
            try:
                # "x" fails if another writer created the file after the check above.
                with file_path.open("xb") as fh:
                    fh.write(data)
            except FileExistsError as exc:
                raise FileAlreadyExistsError(file_path) from exc
            except OSError as exc:
                raise VaultWriteError(file_path, exc.strerror or str(exc)) from exc

            logger.info("Saved %d bytes to %s", len(data), file_path)
            return file_path
