# utils/seller_performance/metrics.py
"""
KPI Calculations for Seller Performance

Handles all metric calculations over the sales ledger and target table:
- Monthly actual / target / attainment
- Quarter rollups
- Annual total and goal percentage
- Best performer of the month
- Per-seller goal attainment
- DataFrames for charts, tables and export

Every calculation is pure and total: a zero target never raises, it follows
the attainment policy in calc_attainment().
"""

import logging
import math
from typing import Dict, List, Mapping

import numpy as np
import pandas as pd

from .constants import (
    MONTHS, QUARTERS, SELLERS, SELLER_LABELS, ANNUAL_GOAL,
    GOAL_ACHIEVED_PERCENT, GOAL_WARNING_PERCENT,
)
from .ledger import SalesLedger
from .models import (
    MonthlyTarget, MonthStats, QuarterRollup, TopPerformer, TARGET_TABLE,
    NO_PERFORMER, performer_for, check_month, check_seller,
)

logger = logging.getLogger(__name__)


def calc_attainment(actual: float, target: float) -> float:
    """
    Attainment percentage with the zero-target policy.

    target > 0  -> actual / target * 100
    target == 0 -> 100 if actual > 0 else 0
    """
    if target > 0:
        return actual / target * 100
    return 100.0 if actual > 0 else 0.0


def goal_band(percent: float) -> str:
    """'achieved' (>=100), 'on_track' (80-100) or 'behind' (<80)."""
    if percent >= GOAL_ACHIEVED_PERCENT:
        return "achieved"
    if percent < GOAL_WARNING_PERCENT:
        return "behind"
    return "on_track"


class SellerMetrics:
    """
    KPI calculations for the seller performance dashboard.

    The ledger is passed in explicitly; nothing is cached, so every call
    reflects the ledger's current contents.

    Usage:
        metrics = SellerMetrics(ledger)

        metrics.monthly_attainment('Jan')
        overview = metrics.calculate_overview_metrics('Jan')
        monthly = metrics.prepare_monthly_summary()
    """

    def __init__(
        self,
        ledger: SalesLedger,
        targets: Mapping[str, MonthlyTarget] = None,
        annual_goal: float = ANNUAL_GOAL
    ):
        self.ledger = ledger
        self.targets = targets if targets is not None else TARGET_TABLE
        self.annual_goal = annual_goal

    # =========================================================================
    # MONTHLY
    # =========================================================================

    def monthly_actual(self, month: str) -> float:
        return self.ledger.entry(month).total()

    def monthly_target(self, month: str) -> float:
        return self.targets[check_month(month)].goal.total()

    def monthly_attainment(self, month: str) -> float:
        return calc_attainment(self.monthly_actual(month), self.monthly_target(month))

    def month_stats(self, month: str) -> MonthStats:
        actual = self.monthly_actual(month)
        target = self.monthly_target(month)
        return MonthStats(
            month=month,
            actual=actual,
            target=target,
            attainment=calc_attainment(actual, target),
        )

    # =========================================================================
    # ANNUAL
    # =========================================================================

    def annual_total(self) -> float:
        """Sum of monthly actuals (exactly rounded, so order never matters)."""
        return math.fsum(self.monthly_actual(month) for month in MONTHS)

    def annual_goal_percent(self) -> float:
        return calc_attainment(self.annual_total(), self.annual_goal)

    # =========================================================================
    # QUARTERS
    # =========================================================================

    @staticmethod
    def quarter_of(month: str) -> str:
        check_month(month)
        for name, months in QUARTERS.items():
            if month in months:
                return name
        raise ValueError(f"Month {month!r} is not in any quarter")

    def quarter_rollup(self, quarter: str) -> QuarterRollup:
        if quarter not in QUARTERS:
            raise ValueError(f"Unknown quarter: {quarter!r}")

        months = tuple(QUARTERS[quarter])
        target = math.fsum(self.monthly_target(month) for month in months)
        actual = math.fsum(self.monthly_actual(month) for month in months)

        return QuarterRollup(
            name=quarter,
            months=months,
            target=target,
            actual=actual,
            attainment=calc_attainment(actual, target),
        )

    def quarter_rollups(self) -> List[QuarterRollup]:
        return [self.quarter_rollup(quarter) for quarter in QUARTERS]

    # =========================================================================
    # SELLERS
    # =========================================================================

    def best_performer(self, month: str) -> TopPerformer:
        """
        Seller with the highest actual in the month.

        Ties go to the first seller in canonical order. When no seller has a
        positive amount the NO_PERFORMER sentinel is returned.
        """
        entry = self.ledger.entry(month)

        best_seller, best_value = None, None
        for seller in SELLERS:
            value = entry.get(seller)
            if best_value is None or value > best_value:
                best_seller, best_value = seller, value

        if best_value is None or best_value <= 0:
            return NO_PERFORMER
        return performer_for(best_seller, best_value)

    def seller_attainment(self, month: str, seller: str) -> float:
        check_seller(seller)
        actual = self.ledger.entry(month).get(seller)
        target = self.targets[check_month(month)].goal.get(seller)
        return calc_attainment(actual, target)

    # =========================================================================
    # OVERVIEW (KPI tiles)
    # =========================================================================

    def calculate_overview_metrics(self, month: str) -> Dict:
        """
        Calculate overview KPIs for the four metric cards.

        Args:
            month: Selected month

        Returns:
            Dict with annual, quarter and top performer metrics
        """
        quarter = self.quarter_rollup(self.quarter_of(month))
        stats = self.month_stats(month)

        return {
            'annual_total': self.annual_total(),
            'annual_goal': self.annual_goal,
            'annual_goal_percent': self.annual_goal_percent(),
            'current_quarter': quarter.name,
            'quarter_attainment': quarter.attainment,
            'month_actual': stats.actual,
            'month_target': stats.target,
            'month_attainment': stats.attainment,
            'top_performer': self.best_performer(month),
        }

    # =========================================================================
    # DATAFRAMES
    # =========================================================================

    def prepare_monthly_summary(self) -> pd.DataFrame:
        """
        Monthly target vs actual for charts and the monthly table.

        Returns:
            DataFrame with one row per month in calendar order.
        """
        rows = []
        for month in MONTHS:
            stats = self.month_stats(month)
            rows.append({
                'month': month,
                'quarter': self.quarter_of(month),
                'target': stats.target,
                'actual': stats.actual,
                'attainment': stats.attainment,
                'gap': stats.actual - stats.target,
            })

        monthly = pd.DataFrame(rows)
        monthly['cumulative_actual'] = monthly['actual'].cumsum()
        monthly['cumulative_target'] = monthly['target'].cumsum()
        # Same policy as calc_attainment, vectorized
        monthly['cumulative_attainment'] = np.where(
            monthly['cumulative_target'] > 0,
            monthly['cumulative_actual'] / monthly['cumulative_target'].where(monthly['cumulative_target'] > 0, 1) * 100,
            np.where(monthly['cumulative_actual'] > 0, 100.0, 0.0)
        )
        return monthly

    def prepare_quarterly_summary(self) -> pd.DataFrame:
        return pd.DataFrame([
            {
                'quarter': rollup.name,
                'target': rollup.target,
                'actual': rollup.actual,
                'attainment': rollup.attainment,
            }
            for rollup in self.quarter_rollups()
        ])

    def prepare_seller_summary(self, month: str) -> pd.DataFrame:
        """Per-seller actual, goal, attainment and goal band for one month."""
        entry = self.ledger.entry(month)
        goal = self.targets[check_month(month)].goal

        rows = []
        for seller in SELLERS:
            percent = self.seller_attainment(month, seller)
            rows.append({
                'seller': seller,
                'label': SELLER_LABELS[seller],
                'actual': entry.get(seller),
                'target': goal.get(seller),
                'attainment': percent,
                'band': goal_band(percent),
            })
        return pd.DataFrame(rows)
