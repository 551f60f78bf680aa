"""Storage service for daily notes.

:class:`DailyNoteService` is the only component that touches the vault on
disk. Every public coroutine holds the service lock from its first read to its
last write, so read-modify-write operations such as
:meth:`DailyNoteService.append_to_section` never lose each other's updates.
Writes made by other processes are not covered by the lock.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from pathlib import Path
from typing import Any, Callable, Mapping, TypeVar

from pkm_vault.constants import DATE_FORMAT
from pkm_vault.core.frontmatter_operations import (
    merge_metadata,
    parse_frontmatter,
    serialize_frontmatter,
)
from pkm_vault.core.section_operations import (
    append_to_section as append_text_to_section,
    section_content as extract_section_content,
)
from pkm_vault.core.vault_operations import (
    as_day,
    atomic_write_text,
    daily_note_path,
    daily_notes_dir,
    ensure_vault_ready,
    parse_note_filename,
)
from pkm_vault.data_models import DailyNote, Metadata, Section
from pkm_vault.errors import FileNotFound, FrontmatterError, ReadFailure, WriteFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

TEMPLATE_BODY = """# {date} - {weekday}

## Morning Intentions
- [ ]

## Focus Blocks
### Block 1 (Morning)

### Block 2 (Afternoon)

## Capture

## End of Day
### Wins

### What didn't work

### Tomorrow's priority
"""


async def _drain(worker: asyncio.Future) -> None:
    """Wait for ``worker`` to finish, ignoring further cancellation."""
    while not worker.done():
        try:
            await asyncio.wait({worker})
        except asyncio.CancelledError:
            continue
    if not worker.cancelled() and worker.exception() is not None:
        logger.warning("Cancelled vault operation failed: %s", worker.exception())


def build_template(day: date, path: Path) -> DailyNote:
    """Build the starter note written by :meth:`DailyNoteService.create`."""
    date_string = day.strftime(DATE_FORMAT)
    metadata: Metadata = {"date": date_string, "type": "daily"}
    body = TEMPLATE_BODY.format(date=date_string, weekday=WEEKDAY_NAMES[day.weekday()])
    return DailyNote(date=day, path=path, metadata=metadata, body=body)


class DailyNoteService:
    """Reads, creates and append-mutates the daily notes of one vault.

    Args:
        vault_path: Root directory of the vault.

    Raises:
        VaultNotFound: If ``vault_path`` is missing or not a directory.
    """

    def __init__(self, vault_path: Path) -> None:
        vault_path = Path(vault_path).expanduser()
        ensure_vault_ready(vault_path)
        self._vault_path = vault_path
        self._lock = asyncio.Lock()

    @property
    def vault_path(self) -> Path:
        return self._vault_path

    def note_path(self, day: date) -> Path:
        """Path of the note for ``day``, whether or not it exists."""
        return daily_note_path(self._vault_path, day)

    # ==========================================================================
    # PUBLIC OPERATIONS
    # ==========================================================================

    async def read(self, day: date) -> DailyNote:
        """Read the note for ``day`` from disk.

        Raises:
            FileNotFound: If no note exists for ``day``.
            ReadFailure: If the file cannot be read or its frontmatter is invalid.
        """
        return await self._run_locked(self._read, as_day(day))

    async def write(self, note: DailyNote) -> None:
        """Atomically write ``note`` to its path, creating folders as needed.

        Raises:
            WriteFailure: If serialization or any filesystem step fails. The
                file on disk is unchanged in that case.
        """
        await self._run_locked(self._write, note)

    async def create(self, day: date) -> DailyNote:
        """Return the note for ``day``, creating it from the template if missing.

        An existing note is returned as-is and never overwritten.
        """
        note, _ = await self._run_locked(self._create, as_day(day))
        return note

    async def create_with_status(self, day: date) -> tuple[DailyNote, bool]:
        """Like :meth:`create`, also reporting whether this call wrote the file."""
        return await self._run_locked(self._create, as_day(day))

    async def append_to_section(self, text: str, section: Section, day: date) -> DailyNote:
        """Append ``text`` to ``section`` of the note for ``day``.

        The section is created at the end of the note when missing. Returns the
        note as written.

        Raises:
            FileNotFound: If no note exists for ``day``.
            ReadFailure: If the current note cannot be read.
            WriteFailure: If the updated note cannot be written.
        """
        return await self._run_locked(self._append_to_section, text, section, as_day(day))

    async def exists(self, day: date) -> bool:
        return await self._run_locked(self.note_path(day).is_file)

    async def list(self) -> list[date]:
        """Return the dates of all daily notes in ascending order.

        Files whose name is not exactly ``YYYY-MM-DD.md`` are skipped. A missing
        notes folder yields an empty list.

        Raises:
            ReadFailure: If the notes folder exists but cannot be listed.
        """
        return await self._run_locked(self._list)

    async def section_content(self, day: date, section: Section) -> str:
        """Return the text under ``section`` in the note for ``day``.

        Raises:
            FileNotFound: If no note exists for ``day``.
            SectionNotFound: If the note has no such section.
        """
        note = await self._run_locked(self._read, as_day(day))
        return extract_section_content(note, section)

    async def update_metadata(self, day: date, updates: Mapping[str, Any]) -> DailyNote:
        """Set individual frontmatter keys on the note for ``day``.

        Keys not named in ``updates`` are kept. An empty ``updates`` mapping
        leaves the file untouched.
        """
        return await self._run_locked(self._update_metadata, as_day(day), updates)

    async def _run_locked(self, func: Callable[..., T], *args: Any) -> T:
        """Run ``func`` in a worker thread while holding the service lock.

        A cancelled caller still waits for the worker to finish before the
        lock is released, so the next operation never overlaps a write that
        is already in progress.
        """
        async with self._lock:
            worker = asyncio.ensure_future(asyncio.to_thread(func, *args))
            try:
                return await asyncio.shield(worker)
            except asyncio.CancelledError:
                await _drain(worker)
                raise

    # ==========================================================================
    # LOCKED HELPERS
    # ==========================================================================
    # Called only while the lock is held; they never take it themselves.

    def _read(self, day: date) -> DailyNote:
        path = self.note_path(day)
        if not path.is_file():
            raise FileNotFound(path)

        try:
            with path.open("r", encoding="utf-8", newline="") as handle:
                content = handle.read()
            metadata, body = parse_frontmatter(content)
        except FileNotFoundError as exc:
            raise FileNotFound(path) from exc
        except (OSError, UnicodeDecodeError, FrontmatterError) as exc:
            raise ReadFailure(path, exc) from exc

        logger.debug("Read daily note '%s' (%d metadata keys)", path.name, len(metadata))
        return DailyNote(date=day, path=path, metadata=metadata, body=body)

    def _write(self, note: DailyNote) -> None:
        try:
            content = serialize_frontmatter(note.metadata, note.body)
            atomic_write_text(note.path, content)
        except (OSError, UnicodeError, FrontmatterError) as exc:
            raise WriteFailure(note.path, exc) from exc
        logger.info("Wrote daily note '%s' in vault '%s'", note.path.name, self._vault_path)

    def _create(self, day: date) -> tuple[DailyNote, bool]:
        path = self.note_path(day)
        if path.exists():
            logger.debug("Daily note '%s' already exists; returning it", path.name)
            return self._read(day), False

        note = build_template(day, path)
        self._write(note)
        logger.info("Created daily note '%s' from template", path.name)
        return note, True

    def _append_to_section(self, text: str, section: Section, day: date) -> DailyNote:
        note = self._read(day)
        updated = append_text_to_section(note, text, section)
        self._write(updated)
        logger.info("Appended %d characters to section '%s' of '%s'", len(text), section.label, note.path.name)
        return updated

    def _update_metadata(self, day: date, updates: Mapping[str, Any]) -> DailyNote:
        note = self._read(day)
        if not updates:
            logger.info("Metadata update skipped for '%s' (no fields given)", note.path.name)
            return note

        try:
            metadata = merge_metadata(note.metadata, updates)
        except FrontmatterError as exc:
            raise WriteFailure(note.path, exc) from exc

        updated = DailyNote(date=note.date, path=note.path, metadata=metadata, body=note.body)
        self._write(updated)
        logger.info(
            "Frontmatter updated for '%s' (fields=%s)",
            note.path.name,
            ", ".join(sorted(updates)),
        )
        return updated

    def _list(self) -> list[date]:
        folder = daily_notes_dir(self._vault_path)
        if not folder.is_dir():
            return []

        try:
            entries = list(folder.iterdir())
        except OSError as exc:
            raise ReadFailure(folder, exc) from exc

        dates: list[date] = []
        for entry in entries:
            day = parse_note_filename(entry.name)
            if day is None or not entry.is_file():
                logger.debug("Skipping '%s' while listing daily notes", entry.name)
                continue
            dates.append(day)
        return sorted(dates)
