"""Input models for daily note read, create and list tools."""

from __future__ import annotations

from pydantic import Field

from pkm_vault.models.base import BaseDailyNoteInput, BaseVaultInput


class ReadDailyNoteInput(BaseDailyNoteInput):
    """Input model for read_daily_note."""


class CreateDailyNoteInput(BaseDailyNoteInput):
    """Input model for create_daily_note (idempotent)."""


class DailyNoteExistsInput(BaseDailyNoteInput):
    """Input model for daily_note_exists."""


class ListDailyNotesInput(BaseVaultInput):
    """Input model for list_daily_notes."""

    limit: int | None = Field(
        None,
        ge=1,
        description="Return only the most recent N dates (omit for all).",
    )
