"""Data models for vault configuration and daily notes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

# Closed set of shapes a frontmatter value can take once decoded.
MetadataValue = Union[
    str,
    int,
    float,
    bool,
    None,
    list["MetadataValue"],
    dict[str, "MetadataValue"],
]
Metadata = dict[str, MetadataValue]


class Section(str, Enum):
    """Sections recognized in a daily note, valued by their heading line."""

    DAILY_BRIEFING = "## Daily Briefing"
    MORNING_INTENTIONS = "## Morning Intentions"
    FOCUS_BLOCKS = "## Focus Blocks"
    CAPTURE = "## Capture"
    END_OF_DAY = "## End of Day"

    @property
    def marker(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Section title without the heading token."""
        return self.value.split(" ", 1)[1]

    @classmethod
    def from_label(cls, value: str) -> "Section":
        """Resolve a section from its title or full heading line.

        Matching ignores case, surrounding whitespace and leading ``#`` markers,
        so ``"capture"``, ``"Capture"`` and ``"## Capture"`` all resolve to
        :attr:`Section.CAPTURE`.

        Raises:
            ValueError: If the text does not name a recognized section.
        """
        cleaned = value.strip().lstrip("#").strip()
        normalized = " ".join(cleaned.split()).lower()
        for section in cls:
            if section.label.lower() == normalized:
                return section
        known = ", ".join(section.label for section in cls)
        raise ValueError(f"Unknown section '{value}'. Expected one of: {known}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DailyNote:
    """A single dated note: metadata plus the markdown body that follows it.

    Instances are values. Section mutations in
    :mod:`pkm_vault.core.section_operations` return new notes rather than
    modifying this one, and the storage service does not keep references to
    the notes it hands out.
    """

    date: date
    path: Path
    metadata: Metadata
    body: str

    @property
    def frontmatter_date(self) -> Optional[date]:
        """Date recorded in the ``date`` metadata key, if it is a valid day."""
        value = self.metadata.get("date")
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            return None
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            return None

    @property
    def note_type(self) -> Optional[str]:
        value = self.metadata.get("type")
        return value if isinstance(value, str) else None

    @property
    def is_daily(self) -> bool:
        return self.note_type == "daily"

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "date": self.date.isoformat(),
            "path": str(self.path),
            "frontmatter": self.metadata,
            "body": self.body,
        }


@dataclass(frozen=True)
class VaultMetadata:
    """Normalized metadata describing a configured vault."""

    name: str
    path: Path
    description: str
    exists: bool


class VaultConfiguration:
    """Holds vault metadata and default resolution helpers.

    Loaded from ``vaults.yaml`` the first time a tool needs it.
    """

    def __init__(self, default_vault: str, vaults: dict[str, VaultMetadata], log_level: str = "INFO") -> None:
        self.default_vault = default_vault
        self.vaults = vaults
        self.log_level = log_level

    def get(self, name: Optional[str] = None) -> VaultMetadata:
        """Get vault metadata by name, falling back to the default vault.

        Args:
            name: The name of the vault to retrieve. ``None`` selects the default.

        Returns:
            VaultMetadata for the requested vault.

        Raises:
            ValueError: If the vault name is not found in configuration.
        """
        key = name or self.default_vault
        try:
            return self.vaults[key]
        except KeyError as exc:
            raise ValueError(f"Unknown vault '{key}'") from exc
