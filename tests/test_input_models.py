"""Tests for Pydantic input models.

This test suite validates the input validation logic for MCP tools,
ensuring that:
- Valid inputs are accepted and normalized correctly
- Invalid inputs raise ValidationError with descriptive messages
- Schema generation produces JSON schemas for MCP
"""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from pkm_vault.data_models import Section
from pkm_vault.models import (
    AppendToSectionInput,
    ListDailyNotesInput,
    ReadDailyNoteInput,
    ReadSectionInput,
    UpdateMetadataInput,
)


class TestBaseDailyNoteInput:
    """Test suite for date and vault validation."""

    def test_iso_date_string(self):
        model = ReadDailyNoteInput(date="2026-01-04")
        assert model.date == date(2026, 1, 4)
        assert model.vault is None

    def test_date_with_whitespace_and_md_suffix(self):
        model = ReadDailyNoteInput(date="  2026-01-04.md ")
        assert model.date == date(2026, 1, 4)

    def test_today_keyword(self):
        model = ReadDailyNoteInput(date="Today")
        assert model.date == date.today()

    def test_datetime_is_truncated(self):
        model = ReadDailyNoteInput(date=datetime(2026, 1, 4, 18, 30))
        assert model.date == date(2026, 1, 4)

    def test_invalid_date_rejected(self):
        with pytest.raises(ValidationError):
            ReadDailyNoteInput(date="2026-02-30")

    def test_missing_date_rejected(self):
        with pytest.raises(ValidationError):
            ReadDailyNoteInput()

    def test_vault_name_is_stripped(self):
        model = ReadDailyNoteInput(date="2026-01-04", vault="  work ")
        assert model.vault == "work"

    def test_blank_vault_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ReadDailyNoteInput(date="2026-01-04", vault="   ")
        assert "Vault name cannot be empty" in str(exc_info.value)


class TestSectionInputs:
    """Test suite for section resolution."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Capture", Section.CAPTURE),
            ("daily briefing", Section.DAILY_BRIEFING),
            ("## End of Day", Section.END_OF_DAY),
            (Section.FOCUS_BLOCKS, Section.FOCUS_BLOCKS),
        ],
    )
    def test_section_resolution(self, value, expected):
        model = ReadSectionInput(date="2026-01-04", section=value)
        assert model.section is expected

    def test_unknown_section_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ReadSectionInput(date="2026-01-04", section="Journal")
        assert "Unknown section" in str(exc_info.value)

    def test_empty_section_rejected(self):
        with pytest.raises(ValidationError):
            ReadSectionInput(date="2026-01-04", section="  ")

    def test_append_requires_content(self):
        with pytest.raises(ValidationError):
            AppendToSectionInput(date="2026-01-04", section="Capture", content="")
        with pytest.raises(ValidationError):
            AppendToSectionInput(date="2026-01-04", section="Capture", content=" \n ")

    def test_append_keeps_content_verbatim(self):
        model = AppendToSectionInput(date="2026-01-04", section="Capture", content="\n- idea\n")
        assert model.content == "\n- idea\n"


class TestOtherInputs:
    def test_update_metadata_requires_fields(self):
        with pytest.raises(ValidationError):
            UpdateMetadataInput(date="2026-01-04", metadata={})

    def test_update_metadata_rejects_blank_keys(self):
        with pytest.raises(ValidationError):
            UpdateMetadataInput(date="2026-01-04", metadata={" ": 1})

    def test_update_metadata_accepts_nested_values(self):
        model = UpdateMetadataInput(date="2026-01-04", metadata={"tags": ["a"], "meta": {"x": 1}})
        assert model.metadata == {"tags": ["a"], "meta": {"x": 1}}

    def test_list_limit_must_be_positive(self):
        assert ListDailyNotesInput().limit is None
        assert ListDailyNotesInput(limit=3).limit == 3
        with pytest.raises(ValidationError):
            ListDailyNotesInput(limit=0)

    def test_schema_generation(self):
        schema = AppendToSectionInput.model_json_schema()
        assert {"date", "section", "content", "vault"} <= set(schema["properties"])
        assert set(schema["required"]) == {"date", "section", "content"}
