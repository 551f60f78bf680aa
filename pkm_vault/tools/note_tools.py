"""Daily note MCP tools.

This module provides MCP tool wrappers for daily note storage operations:
- Read a daily note
- Create a daily note from the starter template (idempotent)
- Check whether a daily note exists
- List the dates that have daily notes

All tools delegate to the shared DailyNoteService for the vault.
"""
from typing import Any

from pkm_vault.core.section_operations import has_section
from pkm_vault.data_models import Section
from pkm_vault.server import mcp
from pkm_vault.session import get_service, resolve_vault
from pkm_vault.models import (
    ReadDailyNoteInput,
    CreateDailyNoteInput,
    DailyNoteExistsInput,
    ListDailyNotesInput,
)


# ==============================================================================
# READ OPERATIONS
# ==============================================================================

# Returns frontmatter and body separately. Errors if the note is missing.
@mcp.tool()
async def read_daily_note(input: ReadDailyNoteInput) -> dict[str, Any]:
    """Read a daily note (frontmatter + markdown body).

    Args:
        input (ReadDailyNoteInput): Validated input containing:
            - date (date): Note date as YYYY-MM-DD or 'today'
            - vault (str, optional): Vault name (omit to use default vault)

    Returns:
        {
            "vault": str,
            "date": str,
            "path": str,
            "frontmatter": dict,
            "body": str,
            "sections": [str]   # recognized sections present in the body
        }

    Examples:
        - Use when: Showing today's note
        - Use when: Checking what the briefing wrote this morning
        - Don't use: Only one section needed → Use read_daily_note_section()

    Error Handling:
        - Note not found → FileNotFound, use create_daily_note()
        - Broken frontmatter → ReadFailure describing the YAML problem
    """
    service = get_service(input.vault)
    note = await service.read(input.date)
    payload = note.as_payload()
    payload["vault"] = resolve_vault(input.vault).name
    payload["sections"] = [section.label for section in Section if has_section(note, section)]
    return payload


@mcp.tool()
async def daily_note_exists(input: DailyNoteExistsInput) -> dict[str, Any]:
    """Check whether a daily note exists for a date.

    Returns:
        {"vault": str, "date": str, "path": str, "exists": bool}
    """
    service = get_service(input.vault)
    return {
        "vault": resolve_vault(input.vault).name,
        "date": input.date.isoformat(),
        "path": str(service.note_path(input.date)),
        "exists": await service.exists(input.date),
    }


@mcp.tool()
async def list_daily_notes(input: ListDailyNotesInput) -> dict[str, Any]:
    """List dates that have a daily note, oldest first.

    Files in the Daily Notes folder that are not named YYYY-MM-DD.md are ignored.

    Args:
        input (ListDailyNotesInput): Validated input containing:
            - limit (int, optional): Keep only the most recent N dates
            - vault (str, optional): Vault name (omit to use default vault)

    Returns:
        {"vault": str, "dates": [str], "count": int}
    """
    service = get_service(input.vault)
    dates = await service.list()
    if input.limit is not None:
        dates = dates[-input.limit :]
    return {
        "vault": resolve_vault(input.vault).name,
        "dates": [day.isoformat() for day in dates],
        "count": len(dates),
    }


# ==============================================================================
# CREATE OPERATIONS
# ==============================================================================

# Idempotent: an existing note is returned untouched with status "exists".
@mcp.tool()
async def create_daily_note(input: CreateDailyNoteInput) -> dict[str, Any]:
    """Create a daily note from the starter template (no-op if it exists).

    The template has a dated title plus Morning Intentions, Focus Blocks,
    Capture and End of Day sections. Folders are created automatically.

    Returns:
        {"vault": str, "date": str, "path": str, "status": "created" | "exists"}

    Examples:
        - Use when: Starting the day
        - Use when: append_to_daily_note_section() failed with FileNotFound
    """
    service = get_service(input.vault)
    note, created = await service.create_with_status(input.date)
    return {
        "vault": resolve_vault(input.vault).name,
        "date": note.date.isoformat(),
        "path": str(note.path),
        "status": "created" if created else "exists",
    }

