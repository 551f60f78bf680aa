"""Exception types raised by the codec, the note model and the storage service."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class PKMVaultError(Exception):
    """Base class for every error raised by this package."""


class VaultNotFound(PKMVaultError, FileNotFoundError):
    """The configured vault root does not exist or is not a directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"PKM vault directory not found at {path}")


class FileNotFound(PKMVaultError, FileNotFoundError):
    """No daily note exists at the derived path."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File not found: {path}")


class FrontmatterError(PKMVaultError, ValueError):
    """Base class for frontmatter format errors."""


class InvalidFrontmatter(FrontmatterError):
    """The metadata block is opened but never closed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid frontmatter: {message}")


class MalformedMetadata(FrontmatterError):
    """The metadata block is not a YAML mapping of supported values."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Malformed metadata: {message}")


class SectionNotFound(PKMVaultError, LookupError):
    """The requested section heading is not present in the note body."""

    def __init__(self, section: str, path: Optional[Path] = None) -> None:
        self.section = section
        self.path = path
        location = f" in {path.name}" if path is not None else ""
        super().__init__(f"Section '{section}' not found in daily note{location}")


class ReadFailure(PKMVaultError, OSError):
    """Reading or decoding a note failed; the original error is chained."""

    def __init__(self, path: Path, error: BaseException) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Failed to read {path.name}: {error}")


class WriteFailure(PKMVaultError, OSError):
    """Serializing or writing a note failed; the target file is unchanged."""

    def __init__(self, path: Path, error: BaseException) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Failed to write {path.name}: {error}")
