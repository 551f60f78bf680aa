"""MCP tool definitions for daily note operations.

This module imports all tool submodules to register them with the MCP server.
Each tool module uses the @mcp.tool() decorator to auto-register its tools.
"""

# Import all tool modules to register their @mcp.tool() decorated functions
from pkm_vault.tools import note_tools
from pkm_vault.tools import section_tools
from pkm_vault.tools import frontmatter_tools

__all__ = [
    "note_tools",
    "section_tools",
    "frontmatter_tools",
]
