"""Base Pydantic models for MCP tool input validation.

Base Models:
- BaseVaultInput: Optional vault name shared by every tool
- BaseDailyNoteInput: Adds the date identifying a daily note
- BaseSectionInput: Adds the section of a daily note to operate on
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from pkm_vault.data_models import Section


class BaseVaultInput(BaseModel):
    """Base model carrying the optional vault name."""

    vault: Optional[str] = Field(
        None,
        description=(
            "Vault name from vaults.yaml (omit to use the default vault)."
        ),
    )

    @field_validator("vault")
    @classmethod
    def validate_vault(cls, v: Optional[str]) -> Optional[str]:
        """Reject blank vault names; strip surrounding whitespace.

        Raises:
            ValueError: If vault name is an empty string
        """
        if v is not None and not v.strip():
            raise ValueError(
                "Vault name cannot be empty. "
                "Either omit the vault parameter to use the default vault, "
                "or provide a vault name from vaults.yaml."
            )

        return v.strip() if v else None


class BaseDailyNoteInput(BaseVaultInput):
    """Base model for operations on a single daily note.

    The note is identified by its calendar date. ISO strings
    (``"2026-01-04"``) and the keyword ``"today"`` are accepted.
    """

    date: dt.date = Field(
        description=(
            "Date of the daily note as YYYY-MM-DD, or 'today'. "
            "Examples: '2026-01-04', 'today'."
        ),
        examples=["2026-01-04", "today"],
    )

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> Any:
        """Resolve ``today`` and strip whitespace before date parsing.

        Datetimes are truncated to their day; anything else is left for
        Pydantic's own date validation.
        """
        if isinstance(v, dt.datetime):
            return v.date()
        if isinstance(v, str):
            cleaned = v.strip()
            if cleaned.lower() == "today":
                return dt.date.today()
            if cleaned.endswith(".md"):
                cleaned = cleaned[:-3]
            return cleaned
        return v


class BaseSectionInput(BaseDailyNoteInput):
    """Base model for section operations on a daily note."""

    section: Section = Field(
        description=(
            "Section title (case-insensitive, '##' optional). One of: "
            "Daily Briefing, Morning Intentions, Focus Blocks, Capture, End of Day."
        ),
        examples=["Capture", "## Daily Briefing"],
    )

    @field_validator("section", mode="before")
    @classmethod
    def validate_section(cls, v: Any) -> Any:
        """Map a title or heading line to its :class:`Section` member.

        Raises:
            ValueError: If the text does not name a recognized section
        """
        if isinstance(v, Section):
            return v
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Section cannot be empty. Provide a section title such as 'Capture'.")
        return Section.from_label(v)
