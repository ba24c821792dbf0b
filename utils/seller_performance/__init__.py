# utils/seller_performance/__init__.py
"""
Seller Performance Module

Monthly targets vs actuals for the four-seller sales team.
All components are self-contained within this module.

Components:
- models: SellerRevenue, target table and rollup records
- ledger: Sales ledger and its storage repository
- metrics: Attainment, quarter rollups, annual goal, best performer
- charts: Altair visualizations and KPI cards
- export: Formatted Excel report generation
- fragments: Sidebar inputs, monthly table and export sections

Usage:
    from utils.seller_performance import (
        SalesLedger,
        SellerMetrics,
        SellerCharts,
        PerformanceExport,
        MONTHS
    )
"""

from .models import SellerRevenue, MonthlyTarget, QuarterRollup, MonthStats, TopPerformer, TARGET_TABLE
from .ledger import SalesLedger, SalesLedgerRepository
from .metrics import SellerMetrics, calc_attainment
from .charts import SellerCharts
from .export import PerformanceExport

# Constants
from .constants import (
    MONTHS,
    QUARTERS,
    SELLERS,
    SELLER_LABELS,
    MONTHLY_TARGETS,
    ANNUAL_GOAL,
    COLORS,
    CHART_HEIGHT,
)

__all__ = [
    # Classes
    'SellerRevenue',
    'MonthlyTarget',
    'QuarterRollup',
    'MonthStats',
    'TopPerformer',
    'SalesLedger',
    'SalesLedgerRepository',
    'SellerMetrics',
    'SellerCharts',
    'PerformanceExport',
    'calc_attainment',
    'TARGET_TABLE',

    # Constants
    'MONTHS',
    'QUARTERS',
    'SELLERS',
    'SELLER_LABELS',
    'MONTHLY_TARGETS',
    'ANNUAL_GOAL',
    'COLORS',
    'CHART_HEIGHT',
]

__version__ = '1.0.0'
