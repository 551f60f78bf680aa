"""FastMCP server initialization and tool registration."""

import logging
from mcp.server.fastmcp import FastMCP

from pkm_vault.config import get_vault_configuration
from pkm_vault.constants import LOG_LEVEL

# Initialize logger
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("pkm_vault")

# Tool modules are imported in __init__.py to register all @mcp.tool() decorators


def run_server():
    """Start the MCP server with stdio transport."""
    configuration = get_vault_configuration()
    logging.getLogger().setLevel(configuration.log_level)
    logger.info(
        "Starting PKM vault MCP server (default vault '%s', %d configured)",
        configuration.default_vault,
        len(configuration.vaults),
    )
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
