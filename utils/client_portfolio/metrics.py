# utils/client_portfolio/metrics.py
"""
Client Lifecycle Calculations

Per-client derivations (pure functions of one client's history and its
projection entry):
- total history / total projected / estimated LTV
- peak single-year revenue and current-year revenue
- health classification (Churned > At Risk > Healthy)
- growth factor

Portfolio operations (ClientPortfolio):
- ranking by estimated LTV (stable on ties)
- case-insensitive search over name and sector
- yearly portfolio totals across the ten-year window
- DataFrames for charts, the revenue matrix and export
"""

import logging
import math
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from ..common import value_or_zero
from .constants import (
    HISTORY_YEARS, PROJECTION_YEARS, ALL_YEARS, CURRENT_YEAR, CHURN_LOOKBACK_YEARS,
    AT_RISK_PEAK_RATIO, GROWTH_FACTOR_DEFAULT, CELL_BANDS, CELL_BAND_HIGH, CELL_BAND_ZERO,
)
from .ledger import ProjectionLedger
from .models import ClientMetrics, ClientProfile, HealthStatus, CLIENT_REGISTRY

logger = logging.getLogger(__name__)

Projections = Optional[Mapping[int, float]]


# =============================================================================
# PER-CLIENT DERIVATIONS
# =============================================================================

def total_history(client: ClientProfile) -> float:
    return math.fsum(value_or_zero(client.history, year) for year in HISTORY_YEARS)


def total_projected(projections: Projections) -> float:
    return math.fsum(value_or_zero(projections, year) for year in PROJECTION_YEARS)


def estimated_ltv(client: ClientProfile, projections: Projections) -> float:
    return total_history(client) + total_projected(projections)


def peak_revenue(client: ClientProfile, projections: Projections) -> float:
    """Highest single-year value across history and projections."""
    values = [value_or_zero(client.history, year) for year in HISTORY_YEARS]
    values += [value_or_zero(projections, year) for year in PROJECTION_YEARS]
    return max(values)


def current_revenue(client: ClientProfile) -> float:
    return value_or_zero(client.history, CURRENT_YEAR)


def health_status(client: ClientProfile, projections: Projections) -> HealthStatus:
    """
    Classify a client, first match wins:

    1. Churned: nothing in the current year but revenue in either lookback year
    2. At Risk: active, but below 40% of its peak year
    3. Healthy: everything else (including clients with no revenue at all)
    """
    current = current_revenue(client)

    if current == 0 and any(value_or_zero(client.history, year) > 0 for year in CHURN_LOOKBACK_YEARS):
        return HealthStatus.CHURNED

    if current > 0 and current < peak_revenue(client, projections) * AT_RISK_PEAK_RATIO:
        return HealthStatus.AT_RISK

    return HealthStatus.HEALTHY


def growth_factor(client: ClientProfile, projections: Projections) -> float:
    """Projected / historical total as a percentage; GROWTH_FACTOR_DEFAULT without a baseline."""
    history = total_history(client)
    if history > 0:
        return total_projected(projections) / history * 100
    return GROWTH_FACTOR_DEFAULT


def derive_client_metrics(client: ClientProfile, projections: Projections = None) -> ClientMetrics:
    projections = dict(projections or {})
    history = total_history(client)
    projected = total_projected(projections)

    return ClientMetrics(
        client=client,
        projections=projections,
        total_history=history,
        total_projected=projected,
        estimated_ltv=history + projected,
        peak_revenue=peak_revenue(client, projections),
        current_revenue=current_revenue(client),
        health=health_status(client, projections),
        growth_factor=growth_factor(client, projections),
    )


def year_value(metrics: ClientMetrics, year: int) -> float:
    """History for years up to CURRENT_YEAR, projection after it."""
    if year <= CURRENT_YEAR:
        return value_or_zero(metrics.client.history, year)
    return value_or_zero(metrics.projections, year)


def cell_colors(value: float) -> Tuple[str, str]:
    """(background, text) color for a revenue matrix cell."""
    if value == 0:
        return CELL_BAND_ZERO
    for upper, background, text in CELL_BANDS:
        if value < upper:
            return background, text
    return CELL_BAND_HIGH


# =============================================================================
# PORTFOLIO
# =============================================================================

class ClientPortfolio:
    """
    Portfolio view over the client registry and the projection ledger.

    Never mutates either input; every call derives fresh metrics.

    Usage:
        portfolio = ClientPortfolio(projection_ledger)

        ranked = portfolio.ranked()
        hits = portfolio.filter("alimentício")
        total_2026 = portfolio.yearly_total(2026)
    """

    def __init__(
        self,
        projection_ledger: ProjectionLedger,
        registry: Sequence[ClientProfile] = None
    ):
        self.projection_ledger = projection_ledger
        self.registry = list(registry) if registry is not None else CLIENT_REGISTRY

    def metrics_for(self, client: ClientProfile) -> ClientMetrics:
        return derive_client_metrics(client, self.projection_ledger.entry(client.id))

    def all_metrics(self) -> List[ClientMetrics]:
        """Metrics in registry order."""
        return [self.metrics_for(client) for client in self.registry]

    def ranked(self) -> List[ClientMetrics]:
        """All clients, descending by estimated LTV; ties keep registry order."""
        return sorted(self.all_metrics(), key=lambda m: m.estimated_ltv, reverse=True)

    @staticmethod
    def matches(metrics: ClientMetrics, query: str) -> bool:
        needle = (query or "").strip().lower()
        if not needle:
            return True
        return needle in metrics.name.lower() or needle in metrics.sector.lower()

    def filter(self, query: str, clients: Sequence[ClientMetrics] = None) -> List[ClientMetrics]:
        """
        Clients whose name or sector contains query (case-insensitive).

        Filters the ranked portfolio unless a sequence is given; relative
        order is preserved and a blank query returns the input unchanged.
        """
        clients = self.ranked() if clients is None else clients
        return [metrics for metrics in clients if self.matches(metrics, query)]

    def yearly_total(self, year: int) -> float:
        return math.fsum(year_value(metrics, year) for metrics in self.all_metrics())

    def inactive_clients(self, limit: int = 3) -> List[str]:
        """Names of registry clients with no current-year revenue, in registry order."""
        names = [client.name for client in self.registry if current_revenue(client) == 0]
        return names[:limit]

    def health_counts(self) -> Dict[HealthStatus, int]:
        counts = {status: 0 for status in HealthStatus}
        for metrics in self.all_metrics():
            counts[metrics.health] += 1
        return counts

    # =========================================================================
    # DATAFRAMES
    # =========================================================================

    @staticmethod
    def to_dataframe(clients: Sequence[ClientMetrics]) -> pd.DataFrame:
        """
        One row per client with the ten year columns ('2021'..'2030').

        Column names are strings so the frame can feed st.data_editor.
        """
        rows = []
        for metrics in clients:
            row = {
                'id': metrics.id,
                'name': metrics.name,
                'sector': metrics.sector,
                'health': metrics.health.value,
                'health_label': metrics.health.label,
            }
            for year in ALL_YEARS:
                row[str(year)] = year_value(metrics, year)
            row.update({
                'total_history': metrics.total_history,
                'total_projected': metrics.total_projected,
                'estimated_ltv': metrics.estimated_ltv,
                'peak_revenue': metrics.peak_revenue,
                'current_revenue': metrics.current_revenue,
                'growth_factor': metrics.growth_factor,
            })
            rows.append(row)

        columns = ['id', 'name', 'sector', 'health', 'health_label'] + [str(y) for y in ALL_YEARS] + [
            'total_history', 'total_projected', 'estimated_ltv',
            'peak_revenue', 'current_revenue', 'growth_factor',
        ]
        return pd.DataFrame(rows, columns=columns)

    def prepare_yearly_behaviour(self) -> pd.DataFrame:
        """Portfolio revenue per year, tagged Historical / Planned."""
        return pd.DataFrame([
            {
                'year': str(year),
                'revenue': self.yearly_total(year),
                'kind': 'Historical' if year <= CURRENT_YEAR else 'Planned',
            }
            for year in ALL_YEARS
        ])

    @staticmethod
    def prepare_matrix_data(clients: Sequence[ClientMetrics]) -> pd.DataFrame:
        """LTV (x) vs growth factor (y) scatter points, sized by peak revenue."""
        return pd.DataFrame([
            {
                'name': metrics.name,
                'sector': metrics.sector,
                'estimated_ltv': metrics.estimated_ltv,
                'growth_factor': metrics.growth_factor,
                'peak_revenue': metrics.peak_revenue,
                'health_label': metrics.health.label,
            }
            for metrics in clients
        ], columns=['name', 'sector', 'estimated_ltv', 'growth_factor', 'peak_revenue', 'health_label'])
