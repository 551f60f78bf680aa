"""Input models for daily note section tools."""

from __future__ import annotations

from pydantic import Field, field_validator

from pkm_vault.models.base import BaseSectionInput


class ReadSectionInput(BaseSectionInput):
    """Input model for read_daily_note_section."""


class AppendToSectionInput(BaseSectionInput):
    """Input model for append_to_daily_note_section.

    The section is created at the end of the note when it does not exist yet.
    """

    content: str = Field(
        min_length=1,
        description="Markdown to append at the end of the section.",
        examples=["- 10:30 Call with Sam about the launch"],
    )

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Content to append cannot be blank.")
        return v
