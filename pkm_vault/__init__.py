"""PKM Vault MCP Server

Daily note storage for a Markdown knowledge vault: frontmatter codec,
section-addressable notes and a concurrency-safe storage service, exposed
over the Model Context Protocol.
"""

from pkm_vault.data_models import DailyNote, Section, VaultMetadata, VaultConfiguration
from pkm_vault.errors import (
    PKMVaultError,
    VaultNotFound,
    FileNotFound,
    FrontmatterError,
    InvalidFrontmatter,
    MalformedMetadata,
    SectionNotFound,
    ReadFailure,
    WriteFailure,
)
from pkm_vault.core.frontmatter_operations import (
    parse_frontmatter,
    serialize_frontmatter,
    update_frontmatter,
)
from pkm_vault.core.section_operations import (
    has_section,
    section_content,
    append_to_section,
)
from pkm_vault.core.note_service import DailyNoteService
from pkm_vault.session import get_service, resolve_vault
from pkm_vault.server import mcp, run_server

# Import tools to register them with the MCP server
from pkm_vault import tools  # noqa: F401

__version__ = "0.3.0"
__all__ = [
    "DailyNote",
    "Section",
    "VaultMetadata",
    "VaultConfiguration",
    "PKMVaultError",
    "VaultNotFound",
    "FileNotFound",
    "FrontmatterError",
    "InvalidFrontmatter",
    "MalformedMetadata",
    "SectionNotFound",
    "ReadFailure",
    "WriteFailure",
    "parse_frontmatter",
    "serialize_frontmatter",
    "update_frontmatter",
    "has_section",
    "section_content",
    "append_to_section",
    "DailyNoteService",
    "get_service",
    "resolve_vault",
    "mcp",
    "run_server",
]
