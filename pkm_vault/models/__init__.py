"""Pydantic input models for MCP tool validation.

Architecture:
- base: Base models (BaseVaultInput, BaseDailyNoteInput, BaseSectionInput)
- note_models: Input models for reading, creating and listing daily notes
- section_models: Input models for section lookup and append
- frontmatter_models: Input models for frontmatter updates

Usage:
    from pkm_vault.models import ReadDailyNoteInput, AppendToSectionInput
"""

from .base import BaseVaultInput, BaseDailyNoteInput, BaseSectionInput
from .note_models import (
    ReadDailyNoteInput,
    CreateDailyNoteInput,
    DailyNoteExistsInput,
    ListDailyNotesInput,
)
from .section_models import (
    ReadSectionInput,
    AppendToSectionInput,
)
from .frontmatter_models import UpdateMetadataInput

__all__ = [
    # Base models
    "BaseVaultInput",
    "BaseDailyNoteInput",
    "BaseSectionInput",
    # Note models
    "ReadDailyNoteInput",
    "CreateDailyNoteInput",
    "DailyNoteExistsInput",
    "ListDailyNotesInput",
    # Section models
    "ReadSectionInput",
    "AppendToSectionInput",
    # Frontmatter models
    "UpdateMetadataInput",
]
