# utils/session.py
"""
Dashboard State

One DashboardState per browser session, kept in st.session_state. It owns
the loaded ledgers and writes every edit straight through to the store, so
the persisted blobs always match what the dashboard shows.

Usage:
    state = get_dashboard_state()
    state.record_sale("Jan", "syllas", "100.000")
    overview = state.seller_metrics().calculate_overview_metrics("Jan")
"""

import logging
from typing import Any, Optional

import streamlit as st

from .client_portfolio.ledger import ClientDataRepository
from .client_portfolio.metrics import ClientPortfolio
from .common import parse_currency_input
from .config import config
from .seller_performance.ledger import SalesLedgerRepository
from .seller_performance.metrics import SellerMetrics
from .seller_performance.models import SellerRevenue
from .storage import KeyValueStore, StorageError, get_store

logger = logging.getLogger(__name__)

SESSION_KEY = "dashboard_state"


class DashboardState:
    """Loaded ledgers plus their repositories."""

    def __init__(self, store: KeyValueStore, annual_goal: Optional[float] = None):
        self.store = store
        self.annual_goal = annual_goal if annual_goal is not None else config.get_app_setting("ANNUAL_GOAL")

        self.sales_repository = SalesLedgerRepository(store)
        self.client_repository = ClientDataRepository(store)

        self.sales_ledger = self.sales_repository.load()
        self.projection_ledger = self.client_repository.load_projections()
        self.notes = self.client_repository.load_notes()

    # ==================== EDITS (write-through) ====================

    def record_sale(self, month: str, seller: str, raw: Any) -> SellerRevenue:
        """Parse a typed amount, update the ledger and persist it."""
        amount = parse_currency_input(raw)
        entry = self.sales_ledger.record(month, seller, amount)
        self.sales_repository.save(self.sales_ledger)
        logger.info(f"Recorded {seller} {month}: {amount:,.2f}")
        return entry

    def set_projection(self, client_id: str, year: int, amount: Any) -> None:
        self.projection_ledger.set(client_id, year, parse_currency_input(amount))
        self.client_repository.save_projections(self.projection_ledger)

    def save_note(self, client_id: str, note: str) -> None:
        self.notes.set(client_id, note)
        self.client_repository.save_notes(self.notes)

    # ==================== VIEWS ====================

    def seller_metrics(self) -> SellerMetrics:
        return SellerMetrics(self.sales_ledger, annual_goal=self.annual_goal)

    def portfolio(self) -> ClientPortfolio:
        return ClientPortfolio(self.projection_ledger)


def get_dashboard_state() -> DashboardState:
    """Get (or load) the session's DashboardState; stops the page if storage is down."""
    if SESSION_KEY not in st.session_state:
        try:
            st.session_state[SESSION_KEY] = DashboardState(get_store())
        except StorageError as e:
            logger.error(f"Failed to load dashboard data: {e}")
            st.error(f"❌ Could not load saved data: {e}")
            st.info("Check the storage settings (STORAGE_BACKEND / AWS credentials)")
            st.stop()
    return st.session_state[SESSION_KEY]
