"""Tests for the projection ledger, client notes and their repository."""
import json

import pytest

from utils.client_portfolio.constants import PROJECTIONS_KEY, NOTES_KEY
from utils.client_portfolio.ledger import ClientDataRepository, ClientNotes, ProjectionLedger


class TestProjectionLedger:
    def test_missing_entries_read_as_zero(self, empty_projections):
        assert empty_projections.get("1", 2026) == 0
        assert empty_projections.entry("1") == {}

    def test_set_and_get(self, empty_projections):
        empty_projections.set("7", 2029, 150000)
        assert empty_projections.get("7", 2029) == 150000
        assert empty_projections.entry("7") == {2029: 150000}

    @pytest.mark.parametrize("year", [2025, 2031, "2026"])
    def test_only_projection_years_are_editable(self, empty_projections, year):
        with pytest.raises(ValueError):
            empty_projections.set("7", year, 1)

    def test_entry_is_a_copy(self, empty_projections):
        empty_projections.set("1", 2026, 10)
        empty_projections.entry("1")[2026] = 999
        assert empty_projections.get("1", 2026) == 10

    def test_from_dict_converts_year_keys_and_skips_bad_ones(self):
        ledger = ProjectionLedger.from_dict({
            "1": {"2026": 100, "2021": 5, "soon": 7},
            "2": "garbage",
        })
        assert ledger.entry("1") == {2026: 100}
        assert ledger.entry("2") == {}


class TestClientNotes:
    def test_notes(self):
        notes = ClientNotes()
        assert notes.get("3") == ""
        notes.set("3", "Visitar em março")
        assert notes.get("3") == "Visitar em março"
        notes.set("3", None)
        assert notes.get("3") == ""


class TestClientDataRepository:
    def test_round_trip(self, memory_store):
        repository = ClientDataRepository(memory_store)
        projections = ProjectionLedger()
        projections.set("1", 2026, 1234.5)
        projections.set("1", 2030, 10)
        projections.set("12", 2027, 99)
        notes = ClientNotes({"1": "Renovação de contrato"})

        repository.save_projections(projections)
        repository.save_notes(notes)

        assert repository.load_projections() == projections
        assert repository.load_notes().to_dict() == notes.to_dict()

    def test_projection_and_notes_use_separate_keys(self, memory_store):
        repository = ClientDataRepository(memory_store)
        projections = ProjectionLedger()
        projections.set("1", 2026, 5)
        repository.save_projections(projections)

        assert json.loads(memory_store.get(PROJECTIONS_KEY)) == {"1": {"2026": 5.0}}
        assert memory_store.get(NOTES_KEY) is None

    def test_invalid_blobs_load_empty(self, memory_store):
        memory_store.set(PROJECTIONS_KEY, "[[[")
        memory_store.set(NOTES_KEY, "nope")
        repository = ClientDataRepository(memory_store)

        assert repository.load_projections() == ProjectionLedger()
        assert repository.load_notes().to_dict() == {}
