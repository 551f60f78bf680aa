"""Frontmatter MCP tools for daily notes.

Provides a merge-only update: named fields are set, all other fields kept.
Replacing or deleting the whole block is intentionally not offered.
"""
import logging
from typing import Any

from pkm_vault.server import mcp
from pkm_vault.session import get_service, resolve_vault
from pkm_vault.models import UpdateMetadataInput

logger = logging.getLogger(__name__)


@mcp.tool()
async def update_daily_note_metadata(input: UpdateMetadataInput) -> dict[str, Any]:
    """Set frontmatter fields on a daily note, keeping all other fields.

    Args:
        input (UpdateMetadataInput): Validated input containing:
            - date (date): Note date as YYYY-MM-DD or 'today'
            - metadata (dict): Fields to set, e.g. {"mood": "focused"}
            - vault (str, optional): Vault name (omit to use default vault)

    Returns:
        {"vault": str, "date": str, "path": str, "frontmatter": dict,
         "fields_updated": [str], "status": "updated"}

    Error Handling:
        - Note not found → FileNotFound
        - Unsupported value (e.g. a set) → WriteFailure, note unchanged
    """
    service = get_service(input.vault)
    note = await service.update_metadata(input.date, input.metadata)
    fields = sorted(input.metadata)
    logger.debug("update_daily_note_metadata set %s on %s", fields, note.path.name)
    return {
        "vault": resolve_vault(input.vault).name,
        "date": note.date.isoformat(),
        "path": str(note.path),
        "frontmatter": note.metadata,
        "fields_updated": fields,
        "status": "updated",
    }
