"""Shared fixtures for all tests."""
import pytest

from utils.client_portfolio.ledger import ProjectionLedger
from utils.seller_performance.ledger import SalesLedger
from utils.storage import MemoryStore


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def empty_ledger():
    return SalesLedger()


@pytest.fixture
def january_ledger():
    """Jan: Syllas 100k, Vendedora 01 20k; every other month empty."""
    ledger = SalesLedger()
    ledger.record("Jan", "syllas", 100000)
    ledger.record("Jan", "vendedora1", 20000)
    return ledger


@pytest.fixture
def empty_projections():
    return ProjectionLedger()
