# tests/core/test_dtos.py
import pytest
from pydantic import ValidationError as PydanticValidationError

from patron_api.core.dtos import ListPatronsQuery, PatronDTO, UpdatePatronCommand
from patron_api.core.ports.patron_repository import PatronCriteria


class TestCommands:

    def test_update_changes_only_supplied_fields(self):
        command = UpdatePatronCommand(id="64b7f0c2a1b2c3d4e5f60718", charge="Vocal", role=None)
        assert command.changes() == {"charge": "Vocal"}

    def test_list_query_defaults_and_criteria(self):
        query = ListPatronsQuery(search="doe", is_active=True)

        assert query.page == 1
        assert query.limit == 10
        assert query.criteria() == PatronCriteria(role=None, search="doe", is_active=True)

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"limit": 101}])
    def test_list_query_bounds(self, params):
        with pytest.raises(PydanticValidationError):
            ListPatronsQuery(**params)


class TestPatronDTO:

    def test_from_entity(self, sample_patron):
        dto = PatronDTO.from_entity(sample_patron)

        assert dto.id == sample_patron.id
        assert dto.email == "john.doe@example.com"
        assert dto.is_active is True
        assert dto.created_at == sample_patron.created_at

    def test_json_dump_uses_iso_dates(self, expired_patron):
        data = PatronDTO.from_entity(expired_patron).model_dump(mode="json")

        assert data["is_active"] is False
        assert isinstance(data["ending_date"], str)
        assert "T" in data["ending_date"]
