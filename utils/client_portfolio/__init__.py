# utils/client_portfolio/__init__.py
"""
Client Portfolio Module

Lifecycle view of the 20 key accounts: five recorded years (2021-2025)
plus five user-planned years (2026-2030).

Components:
- models: Client registry, derived metrics and health status
- ledger: Projection ledger, client notes and their storage repository
- metrics: LTV, peak, health, growth factor and portfolio operations
- filters: Client/sector search box
- charts: Altair yearly behaviour, Plotly LTV x growth matrix
- fragments: Revenue matrix editor and client notes

Usage:
    from utils.client_portfolio import ClientPortfolio, ProjectionLedger

    portfolio = ClientPortfolio(ProjectionLedger())
    ranked = portfolio.ranked()
"""

from .models import ClientProfile, ClientMetrics, HealthStatus, CLIENT_REGISTRY
from .ledger import ProjectionLedger, ClientNotes, ClientDataRepository
from .metrics import ClientPortfolio, derive_client_metrics
from .charts import PortfolioCharts

# Constants
from .constants import (
    HISTORY_YEARS,
    PROJECTION_YEARS,
    ALL_YEARS,
    CURRENT_YEAR,
)

__all__ = [
    # Classes
    'ClientProfile',
    'ClientMetrics',
    'HealthStatus',
    'ProjectionLedger',
    'ClientNotes',
    'ClientDataRepository',
    'ClientPortfolio',
    'PortfolioCharts',
    'derive_client_metrics',
    'CLIENT_REGISTRY',

    # Constants
    'HISTORY_YEARS',
    'PROJECTION_YEARS',
    'ALL_YEARS',
    'CURRENT_YEAR',
]

__version__ = '1.0.0'
