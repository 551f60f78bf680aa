"""Module-level constants for the PKM vault server."""

import os
from pathlib import Path

# Configuration
CONFIG_PATH = Path(os.environ.get("PKM_VAULT_CONFIG", Path(__file__).parent.parent / "vaults.yaml"))

# Vault layout
DAILY_NOTES_DIR = "Daily Notes"
DATE_FORMAT = "%Y-%m-%d"
NOTE_SUFFIX = ".md"

# Note format
FRONTMATTER_DELIMITER = "---"
SECTION_HEADING_LEVEL = 2

# Logging
LOG_LEVEL = "INFO"
