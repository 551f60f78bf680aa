"""Input models for daily note frontmatter tools."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from pkm_vault.models.base import BaseDailyNoteInput


class UpdateMetadataInput(BaseDailyNoteInput):
    """Input model for update_daily_note_metadata.

    Each key overwrites or adds one frontmatter field; other fields are kept.
    """

    metadata: dict[str, Any] = Field(
        description="Frontmatter fields to set. Example: {'mood': 'focused', 'tags': ['work']}",
        examples=[{"mood": "focused"}],
    )

    @field_validator("metadata")
    @classmethod
    def validate_metadata(cls, v: dict[str, Any]) -> dict[str, Any]:
        """Require at least one field and non-blank keys.

        Raises:
            ValueError: If the mapping is empty or has a blank key
        """
        if not v:
            raise ValueError("Provide at least one frontmatter field to update.")
        for key in v:
            if not key.strip():
                raise ValueError("Frontmatter keys must be non-empty strings.")
        return v
