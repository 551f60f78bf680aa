"""Per-vault storage service registry shared by all tool calls."""

from typing import Dict, Optional

from pkm_vault.config import get_vault_configuration
from pkm_vault.core.note_service import DailyNoteService
from pkm_vault.data_models import VaultMetadata

# One service (and therefore one lock) per vault name.
_SERVICES: Dict[str, DailyNoteService] = {}


def resolve_vault(vault: Optional[str]) -> VaultMetadata:
    """Resolve which vault metadata should be used for an operation.

    Args:
        vault: Optional friendly vault name provided by the caller. ``None``
            selects the configured default.

    Raises:
        ValueError: If the supplied ``vault`` name is not recognized.
    """
    return get_vault_configuration().get(vault)


def get_service(vault: Optional[str] = None) -> DailyNoteService:
    """Return the shared :class:`DailyNoteService` for a vault, creating it once.

    Raises:
        ValueError: If the vault name is not recognized.
        VaultNotFound: If the vault directory does not exist.
    """
    metadata = resolve_vault(vault)
    service = _SERVICES.get(metadata.name)
    if service is None:
        service = DailyNoteService(metadata.path)
        _SERVICES[metadata.name] = service
    return service


def reset_services() -> None:
    """Forget all cached services (used when the configuration is reloaded)."""
    _SERVICES.clear()
    get_vault_configuration.cache_clear()
