"""Section MCP tools for daily notes.

This module provides MCP tool wrappers for the recognized daily note sections:
- Read the content under a section heading
- Append content to the end of a section (creating the section if missing)

All tools delegate to the shared DailyNoteService for the vault.
"""
from typing import Any

from pkm_vault.server import mcp
from pkm_vault.session import get_service, resolve_vault
from pkm_vault.models import ReadSectionInput, AppendToSectionInput


# Returns the text under the heading with surrounding blank lines trimmed.
@mcp.tool()
async def read_daily_note_section(input: ReadSectionInput) -> dict[str, Any]:
    """Read one section of a daily note.

    Args:
        input (ReadSectionInput): Validated input containing:
            - date (date): Note date as YYYY-MM-DD or 'today'
            - section (Section): Section title, e.g. "Daily Briefing", "Capture"
            - vault (str, optional): Vault name (omit to use default vault)

    Returns:
        {"vault": str, "date": str, "section": str, "content": str}

    Error Handling:
        - Note not found → FileNotFound
        - Section missing → SectionNotFound (append_to_daily_note_section creates it)
    """
    service = get_service(input.vault)
    content = await service.section_content(input.date, input.section)
    return {
        "vault": resolve_vault(input.vault).name,
        "date": input.date.isoformat(),
        "section": input.section.label,
        "content": content,
    }


# Appends right before the next "#"/"##" heading that follows the section, so
# "###" subsections inside the section stay above the new text.
@mcp.tool()
async def append_to_daily_note_section(input: AppendToSectionInput) -> dict[str, Any]:
    """Append content to the end of a daily note section (append-only).

    Never overwrites existing text. If the section does not exist yet it is
    added at the end of the note.

    Args:
        input (AppendToSectionInput): Validated input containing:
            - date (date): Note date as YYYY-MM-DD or 'today'
            - section (Section): Section title, e.g. "Capture"
            - content (str): Markdown to append
            - vault (str, optional): Vault name (omit to use default vault)

    Returns:
        {"vault": str, "date": str, "path": str, "section": str, "status": "section_appended"}

    Examples:
        - Use when: Quick capture of a thought into today's note
        - Use when: Logging a win under End of Day
        - Don't use: Note does not exist yet → Call create_daily_note() first

    Error Handling:
        - Note not found → FileNotFound
        - Disk error → WriteFailure (note on disk unchanged)
    """
    service = get_service(input.vault)
    note = await service.append_to_section(input.content, input.section, input.date)
    return {
        "vault": resolve_vault(input.vault).name,
        "date": note.date.isoformat(),
        "path": str(note.path),
        "section": input.section.label,
        "status": "section_appended",
    }
