"""Configuration loading and vault registry."""

import logging
from functools import lru_cache
from pathlib import Path

import yaml

from pkm_vault.constants import CONFIG_PATH, LOG_LEVEL
from pkm_vault.data_models import VaultConfiguration, VaultMetadata

logger = logging.getLogger(__name__)


def load_vault_configuration(config_path: Path = CONFIG_PATH) -> VaultConfiguration:
    """Load and validate the vault configuration file.

    Args:
        config_path: Path to the YAML configuration file. Defaults to
            ``vaults.yaml`` at the repository root, or the file named by the
            ``PKM_VAULT_CONFIG`` environment variable.

    Returns:
        A fully populated :class:`VaultConfiguration` containing normalized vault
        metadata, the configured default vault name and the log level.

    Raises:
        FileNotFoundError: If the configuration file is missing.
        ValueError: If the file exists but does not provide the expected structure
            (missing default, empty mapping, invalid entries, etc.).
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Vault configuration file not found at {config_path}")

    raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw_config, dict):
        raise ValueError("Vault configuration must be a YAML mapping")

    vaults_section = raw_config.get("vaults")
    if not isinstance(vaults_section, dict) or not vaults_section:
        raise ValueError("Vault configuration must include a non-empty 'vaults' mapping")

    processed: dict[str, VaultMetadata] = {}
    for name, entry in vaults_section.items():
        if not isinstance(entry, dict):
            raise ValueError(f"Vault '{name}' must map to a dictionary of settings")

        raw_path = entry.get("path")
        if not isinstance(raw_path, str) or not raw_path.strip():
            raise ValueError(f"Vault '{name}' is missing a valid 'path' string")

        resolved_path = Path(raw_path).expanduser().resolve(strict=False)
        description = str(entry.get("description") or "").strip()

        processed[name] = VaultMetadata(
            name=name,
            path=resolved_path,
            description=description,
            exists=resolved_path.is_dir(),
        )

    default_vault = raw_config.get("default")
    if not isinstance(default_vault, str) or default_vault not in processed:
        raise ValueError("Vault configuration must specify a 'default' vault present in the mapping")

    log_level = raw_config.get("log_level", LOG_LEVEL)
    if not isinstance(log_level, str) or not log_level.strip():
        raise ValueError("'log_level' must be a logging level name such as 'INFO'")

    missing = [metadata.name for metadata in processed.values() if not metadata.exists]
    if missing:
        logger.warning("Configured vaults not found on disk: %s", ", ".join(missing))

    return VaultConfiguration(
        default_vault=default_vault,
        vaults=processed,
        log_level=log_level.strip().upper(),
    )


@lru_cache(maxsize=1)
def get_vault_configuration() -> VaultConfiguration:
    """Load the configuration once and reuse it for the life of the process."""
    return load_vault_configuration()
