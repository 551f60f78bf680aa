"""Tests for the MCP tool functions, called directly."""

import asyncio
from datetime import date

import pytest

from pkm_vault import session
from pkm_vault.data_models import VaultConfiguration, VaultMetadata
from pkm_vault.errors import FileNotFound, SectionNotFound
from pkm_vault.models import (
    AppendToSectionInput,
    CreateDailyNoteInput,
    DailyNoteExistsInput,
    ListDailyNotesInput,
    ReadDailyNoteInput,
    ReadSectionInput,
    UpdateMetadataInput,
)
from pkm_vault.tools.frontmatter_tools import update_daily_note_metadata
from pkm_vault.tools.note_tools import (
    create_daily_note,
    daily_note_exists,
    list_daily_notes,
    read_daily_note,
)
from pkm_vault.tools.section_tools import append_to_daily_note_section, read_daily_note_section


@pytest.fixture
def vault(tmp_path, monkeypatch):
    """Point the session registry at a temporary vault."""
    vault_path = tmp_path / "vault"
    vault_path.mkdir()
    configuration = VaultConfiguration(
        default_vault="test",
        vaults={
            "test": VaultMetadata(name="test", path=vault_path, description="test vault", exists=True),
        },
    )
    monkeypatch.setattr(session, "get_vault_configuration", lambda: configuration)
    session._SERVICES.clear()
    yield vault_path
    session._SERVICES.clear()


def test_service_is_shared_per_vault(vault):
    assert session.get_service() is session.get_service("test")
    with pytest.raises(ValueError):
        session.get_service("other")


@pytest.mark.asyncio
async def test_create_then_read(vault):
    created = await create_daily_note(CreateDailyNoteInput(date="2026-01-04"))
    assert created["status"] == "created"
    assert created["path"] == str(vault / "Daily Notes" / "2026-01-04.md")

    again = await create_daily_note(CreateDailyNoteInput(date="2026-01-04"))
    assert again["status"] == "exists"

    result = await read_daily_note(ReadDailyNoteInput(date="2026-01-04"))
    assert result["vault"] == "test"
    assert result["date"] == "2026-01-04"
    assert result["frontmatter"] == {"date": "2026-01-04", "type": "daily"}
    assert result["sections"] == ["Morning Intentions", "Focus Blocks", "Capture", "End of Day"]


@pytest.mark.asyncio
async def test_read_missing_note(vault):
    with pytest.raises(FileNotFound):
        await read_daily_note(ReadDailyNoteInput(date="2026-01-04"))


@pytest.mark.asyncio
async def test_append_and_read_section(vault):
    await create_daily_note(CreateDailyNoteInput(date="2026-01-04"))

    result = await append_to_daily_note_section(
        AppendToSectionInput(date="2026-01-04", section="capture", content="- buy milk")
    )
    assert result["status"] == "section_appended"
    assert result["section"] == "Capture"

    section = await read_daily_note_section(ReadSectionInput(date="2026-01-04", section="Capture"))
    assert section["content"] == "- buy milk"

    with pytest.raises(SectionNotFound):
        await read_daily_note_section(ReadSectionInput(date="2026-01-04", section="Daily Briefing"))


@pytest.mark.asyncio
async def test_update_metadata(vault):
    await create_daily_note(CreateDailyNoteInput(date="2026-01-04"))

    result = await update_daily_note_metadata(
        UpdateMetadataInput(date="2026-01-04", metadata={"mood": "calm"})
    )

    assert result["fields_updated"] == ["mood"]
    assert result["frontmatter"] == {"date": "2026-01-04", "type": "daily", "mood": "calm"}


@pytest.mark.asyncio
async def test_exists_and_list(vault):
    missing = await daily_note_exists(DailyNoteExistsInput(date="2026-01-03"))
    assert not missing["exists"]

    for day in ("2026-01-03", "2026-01-01", "2026-01-02"):
        await create_daily_note(CreateDailyNoteInput(date=day))

    present = await daily_note_exists(DailyNoteExistsInput(date="2026-01-03"))
    assert present["exists"]

    listed = await list_daily_notes(ListDailyNotesInput())
    assert listed["dates"] == ["2026-01-01", "2026-01-02", "2026-01-03"]
    assert listed["count"] == 3

    recent = await list_daily_notes(ListDailyNotesInput(limit=2))
    assert recent["dates"] == ["2026-01-02", "2026-01-03"]
    assert date.fromisoformat(recent["dates"][-1]) == date(2026, 1, 3)


@pytest.mark.asyncio
async def test_concurrent_creates_report_a_single_creation(vault):
    results = await asyncio.gather(
        *(create_daily_note(CreateDailyNoteInput(date="2026-01-04")) for _ in range(4))
    )
    assert sorted(result["status"] for result in results) == ["created", "exists", "exists", "exists"]
