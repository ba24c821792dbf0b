# utils/seller_performance/ledger.py
"""
Sales Ledger - monthly actuals per seller, persisted as one JSON blob.

Blob layout (exactly the 12 month keys):
    {"Jan": {"syllas": 0, "vendedora1": 0, "vendedora2": 0, "vendedora3": 0}, ...}
"""

import json
import logging
from typing import Dict, Mapping, Optional

from ..storage import KeyValueStore
from .constants import MONTHS, SALES_LEDGER_KEY
from .models import SellerRevenue, check_month

logger = logging.getLogger(__name__)


class SalesLedger:
    """
    Mutable store of actual revenue: month -> SellerRevenue.

    All 12 months are always present; a fresh ledger is all zeros.
    """

    def __init__(self, entries: Optional[Mapping[str, SellerRevenue]] = None):
        entries = entries or {}
        self._entries: Dict[str, SellerRevenue] = {
            month: entries.get(month, SellerRevenue()) for month in MONTHS
        }

    def entry(self, month: str) -> SellerRevenue:
        return self._entries[check_month(month)]

    def record(self, month: str, seller: str, amount: float) -> SellerRevenue:
        """Set one seller's actual for a month and return the new month entry."""
        updated = self.entry(month).with_amount(seller, amount)
        self._entries[month] = updated
        return updated

    def months(self):
        return list(MONTHS)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {month: self._entries[month].to_dict() for month in MONTHS}

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> "SalesLedger":
        """
        Build a ledger from a decoded blob.

        Missing months or sellers read as 0; unknown month keys are dropped.
        """
        data = data if isinstance(data, Mapping) else {}
        unknown = [key for key in data if key not in MONTHS]
        if unknown:
            logger.warning(f"Ignoring unknown months in sales ledger: {unknown}")
        return cls({month: SellerRevenue.from_dict(data.get(month)) for month in MONTHS})

    def copy(self) -> "SalesLedger":
        return SalesLedger(dict(self._entries))

    def __eq__(self, other) -> bool:
        if not isinstance(other, SalesLedger):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        total = sum(entry.total() for entry in self._entries.values())
        return f"SalesLedger(total={total:,.2f})"


class SalesLedgerRepository:
    """Load/save the sales ledger through a key-value store."""

    def __init__(self, store: KeyValueStore, key: str = SALES_LEDGER_KEY):
        self.store = store
        self.key = key

    def load(self) -> SalesLedger:
        raw = self.store.get(self.key)
        if raw is None:
            logger.info("No saved sales ledger, starting from zero")
            return SalesLedger()
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Saved sales ledger is not valid JSON, starting from zero: {e}")
            return SalesLedger()
        return SalesLedger.from_dict(data)

    def save(self, ledger: SalesLedger) -> None:
        self.store.set(self.key, json.dumps(ledger.to_dict()))
