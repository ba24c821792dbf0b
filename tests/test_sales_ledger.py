"""Tests for the sales ledger and its persistence."""
import json

import pytest

from utils.seller_performance.constants import MONTHS, SELLERS, SALES_LEDGER_KEY
from utils.seller_performance.ledger import SalesLedger, SalesLedgerRepository
from utils.seller_performance.models import SellerRevenue


class TestSalesLedger:
    def test_fresh_ledger_is_all_zero(self, empty_ledger):
        assert empty_ledger.months() == MONTHS
        for month in MONTHS:
            assert empty_ledger.entry(month) == SellerRevenue()

    def test_record_only_touches_one_field(self, empty_ledger):
        entry = empty_ledger.record("Abr", "vendedora2", 3500.5)

        assert entry.vendedora2 == 3500.5
        assert entry.syllas == 0
        assert empty_ledger.entry("Abr") == entry
        assert empty_ledger.entry("Mai") == SellerRevenue()

    def test_record_rejects_unknown_seller_and_month(self, empty_ledger):
        with pytest.raises(ValueError):
            empty_ledger.record("Jan", "vendedora9", 1)
        with pytest.raises(ValueError):
            empty_ledger.record("Foo", "syllas", 1)

    def test_from_dict_fills_gaps_and_drops_unknown_months(self):
        ledger = SalesLedger.from_dict({
            "Jan": {"syllas": 10, "vendedora1": "x"},
            "Xyz": {"syllas": 99},
        })

        assert ledger.entry("Jan") == SellerRevenue(syllas=10)
        assert ledger.entry("Dez") == SellerRevenue()
        assert "Xyz" not in ledger.to_dict()

    def test_copy_is_independent(self, january_ledger):
        clone = january_ledger.copy()
        clone.record("Jan", "syllas", 1)
        assert january_ledger.entry("Jan").syllas == 100000


class TestSalesLedgerRepository:
    def test_missing_blob_loads_zero_ledger(self, memory_store):
        assert SalesLedgerRepository(memory_store).load() == SalesLedger()

    def test_invalid_blob_loads_zero_ledger(self, memory_store):
        memory_store.set(SALES_LEDGER_KEY, "{not json")
        assert SalesLedgerRepository(memory_store).load() == SalesLedger()

    def test_save_and_reload_keeps_every_field(self, memory_store):
        ledger = SalesLedger()
        for i, month in enumerate(MONTHS):
            for j, seller in enumerate(SELLERS):
                ledger.record(month, seller, (i + 1) * 1000.37 + j * 0.01)

        repository = SalesLedgerRepository(memory_store)
        repository.save(ledger)
        reloaded = repository.load()

        assert reloaded == ledger
        for month in MONTHS:
            for seller in SELLERS:
                assert reloaded.entry(month).get(seller) == ledger.entry(month).get(seller)

    def test_blob_layout(self, memory_store, january_ledger):
        SalesLedgerRepository(memory_store).save(january_ledger)
        data = json.loads(memory_store.get(SALES_LEDGER_KEY))

        assert list(data) == MONTHS
        assert data["Jan"] == {"syllas": 100000.0, "vendedora1": 20000.0, "vendedora2": 0.0, "vendedora3": 0.0}
