"""Vault path resolution and low-level file writing."""

from __future__ import annotations

import logging
import os
import re
import stat
import tempfile
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from pkm_vault.constants import DAILY_NOTES_DIR, DATE_FORMAT, NOTE_SUFFIX
from pkm_vault.errors import VaultNotFound

logger = logging.getLogger(__name__)

NOTE_FILENAME_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}" + re.escape(NOTE_SUFFIX) + r"$")


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


NEW_FILE_MODE = _default_file_mode()


def ensure_vault_ready(vault_path: Path) -> None:
    """Ensure the vault directory is accessible before performing operations.

    Args:
        vault_path: Root directory of the vault.

    Raises:
        VaultNotFound: If the vault path does not exist or is not a directory.
    """
    if not vault_path.is_dir():
        raise VaultNotFound(vault_path)


def as_day(value: date) -> date:
    """Drop the time part of a ``datetime``; plain dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def daily_notes_dir(vault_path: Path) -> Path:
    return vault_path / DAILY_NOTES_DIR


def daily_note_path(vault_path: Path, day: date) -> Path:
    """Get the file path for a daily note.

    Examples:
        >>> daily_note_path(Path("/vault"), date(2026, 1, 4))
        PosixPath('/vault/Daily Notes/2026-01-04.md')
    """
    filename = as_day(day).strftime(DATE_FORMAT) + NOTE_SUFFIX
    return daily_notes_dir(vault_path) / filename


def parse_note_filename(filename: str) -> Optional[date]:
    """Return the date encoded in a daily note filename, or None.

    Only names of the exact form ``YYYY-MM-DD.md`` naming a real calendar day
    are accepted.

    Examples:
        >>> parse_note_filename("2026-01-04.md")
        datetime.date(2026, 1, 4)
        >>> parse_note_filename("2026-02-30.md") is None
        True
    """
    if not NOTE_FILENAME_PATTERN.match(filename):
        return None
    try:
        return datetime.strptime(filename[: -len(NOTE_SUFFIX)], DATE_FORMAT).date()
    except ValueError:
        return None


def atomic_write_text(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` so readers never observe a partial file.

    The content goes to a temporary file in the same directory, is flushed to
    disk, then renamed over the target with :func:`os.replace`. An existing
    target keeps its permission bits and a new file gets the umask default.
    On failure the temporary file is removed and the target is left as it was.

    Raises:
        OSError: If any step fails.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        newline="",
        dir=path.parent,
        prefix=f".{path.stem}.",
        suffix=".tmp",
        delete=False,
    ) as handle:
        temp_path = Path(handle.name)
        try:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
            os.chmod(temp_path, _target_mode(path))
        except BaseException:
            handle.close()
            _discard(temp_path)
            raise

    try:
        os.replace(temp_path, path)
    except BaseException:
        _discard(temp_path)
        raise


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return NEW_FILE_MODE


def _discard(temp_path: Path) -> None:
    try:
        temp_path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Could not remove temporary file '%s': %s", temp_path, exc)
