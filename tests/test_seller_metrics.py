"""Tests for attainment, rollups, annual goal and best performer."""
import random

import pytest

from utils.seller_performance.constants import MONTHS, QUARTERS, ANNUAL_GOAL
from utils.seller_performance.ledger import SalesLedger
from utils.seller_performance.metrics import SellerMetrics, calc_attainment, goal_band
from utils.seller_performance.models import MonthlyTarget, SellerRevenue, TARGET_TABLE, NO_PERFORMER


def _zero_target_table():
    return {month: MonthlyTarget(month=month, goal=SellerRevenue()) for month in MONTHS}


class TestCalcAttainment:
    def test_ratio_when_target_positive(self):
        assert calc_attainment(50, 200) == 25.0

    def test_zero_target_with_sales_is_full(self):
        assert calc_attainment(10, 0) == 100.0

    def test_zero_target_without_sales_is_zero(self):
        assert calc_attainment(0, 0) == 0.0

    @pytest.mark.parametrize("percent, band", [
        (120, "achieved"), (100, "achieved"), (99.9, "on_track"), (80, "on_track"), (79.9, "behind"), (0, "behind"),
    ])
    def test_goal_band(self, percent, band):
        assert goal_band(percent) == band


class TestMonthly:
    def test_january_end_to_end(self, january_ledger):
        metrics = SellerMetrics(january_ledger)

        assert metrics.monthly_target("Jan") == 142500
        assert metrics.monthly_actual("Jan") == 120000
        assert metrics.monthly_attainment("Jan") == pytest.approx(84.21, abs=0.01)

        best = metrics.best_performer("Jan")
        assert best.seller == "syllas"
        assert best.value == 100000
        assert not best.is_pending

    def test_zero_target_months_follow_policy(self):
        ledger = SalesLedger()
        ledger.record("Fev", "vendedora3", 10)
        metrics = SellerMetrics(ledger, targets=_zero_target_table())

        assert metrics.monthly_attainment("Fev") == 100.0
        assert metrics.monthly_attainment("Jan") == 0.0

    def test_unknown_month_is_rejected(self, empty_ledger):
        with pytest.raises(ValueError):
            SellerMetrics(empty_ledger).monthly_actual("January")


class TestAnnual:
    def test_annual_total_sums_all_months(self):
        ledger = SalesLedger()
        for index, month in enumerate(MONTHS):
            ledger.record(month, "syllas", 1000.1 * (index + 1))
            ledger.record(month, "vendedora2", 0.3)
        metrics = SellerMetrics(ledger)

        expected = sum(metrics.monthly_actual(month) for month in MONTHS)
        assert metrics.annual_total() == pytest.approx(expected)

    def test_annual_total_does_not_depend_on_entry_order(self):
        amounts = {month: 12345.67 * (i + 1) / 7 for i, month in enumerate(MONTHS)}
        shuffled = list(MONTHS)
        random.Random(7).shuffle(shuffled)

        forward, backward = SalesLedger(), SalesLedger()
        for month in MONTHS:
            forward.record(month, "vendedora1", amounts[month])
        for month in shuffled:
            backward.record(month, "vendedora1", amounts[month])

        assert SellerMetrics(forward).annual_total() == SellerMetrics(backward).annual_total()

    def test_annual_goal_percent_uses_configured_goal(self, january_ledger):
        assert SellerMetrics(january_ledger).annual_goal_percent() == pytest.approx(120000 / ANNUAL_GOAL * 100)
        assert SellerMetrics(january_ledger, annual_goal=240000).annual_goal_percent() == pytest.approx(50.0)

    def test_annual_goal_is_not_the_target_sum(self):
        target_sum = sum(target.goal.total() for target in TARGET_TABLE.values())
        assert target_sum == 2219500
        assert ANNUAL_GOAL == 2180000


class TestQuarters:
    def test_quarters_partition_the_year(self):
        months = [month for quarter in QUARTERS.values() for month in quarter]
        assert sorted(months, key=MONTHS.index) == MONTHS
        assert len(months) == len(set(months)) == 12

    def test_rollup_target_is_sum_of_month_targets(self, empty_ledger):
        metrics = SellerMetrics(empty_ledger)
        for quarter, months in QUARTERS.items():
            rollup = metrics.quarter_rollup(quarter)
            assert rollup.months == tuple(months)
            assert rollup.target == pytest.approx(sum(metrics.monthly_target(m) for m in months))

    def test_q1_rollup(self, january_ledger):
        rollup = SellerMetrics(january_ledger).quarter_rollup("Q1")
        assert rollup.target == 502500
        assert rollup.actual == 120000
        assert rollup.attainment == pytest.approx(120000 / 502500 * 100)

    def test_quarter_of(self):
        assert SellerMetrics.quarter_of("Mar") == "Q1"
        assert SellerMetrics.quarter_of("Abr") == "Q2"
        assert SellerMetrics.quarter_of("Dez") == "Q4"

    def test_unknown_quarter_is_rejected(self, empty_ledger):
        with pytest.raises(ValueError):
            SellerMetrics(empty_ledger).quarter_rollup("Q5")


class TestBestPerformer:
    def test_empty_month_is_pending(self, empty_ledger):
        assert SellerMetrics(empty_ledger).best_performer("Jan") is NO_PERFORMER
        assert NO_PERFORMER.is_pending

    def test_tie_goes_to_first_seller(self):
        ledger = SalesLedger()
        ledger.record("Mai", "vendedora2", 500)
        ledger.record("Mai", "vendedora1", 500)
        assert SellerMetrics(ledger).best_performer("Mai").seller == "vendedora1"

    def test_later_seller_wins_with_higher_value(self):
        ledger = SalesLedger()
        ledger.record("Jun", "syllas", 10)
        ledger.record("Jun", "vendedora3", 11)
        best = SellerMetrics(ledger).best_performer("Jun")
        assert best.seller == "vendedora3"
        assert best.label == "Vend 03"


class TestOverviewAndFrames:
    def test_overview_metrics(self, january_ledger):
        overview = SellerMetrics(january_ledger).calculate_overview_metrics("Fev")

        assert overview["annual_total"] == 120000
        assert overview["current_quarter"] == "Q1"
        assert overview["month_actual"] == 0
        assert overview["month_attainment"] == 0
        assert overview["top_performer"] is NO_PERFORMER

    def test_monthly_summary(self, january_ledger):
        monthly = SellerMetrics(january_ledger).prepare_monthly_summary()

        assert list(monthly["month"]) == MONTHS
        assert monthly.loc[0, "gap"] == -22500
        assert monthly["cumulative_actual"].iloc[-1] == 120000
        assert monthly["cumulative_target"].iloc[-1] == 2219500
        assert monthly.loc[0, "cumulative_attainment"] == pytest.approx(84.2105, abs=1e-3)

    def test_quarterly_summary(self, empty_ledger):
        quarterly = SellerMetrics(empty_ledger).prepare_quarterly_summary()
        assert list(quarterly["quarter"]) == ["Q1", "Q2", "Q3", "Q4"]
        assert quarterly["target"].sum() == 2219500

    def test_seller_summary(self, january_ledger):
        sellers = SellerMetrics(january_ledger).prepare_seller_summary("Jan").set_index("seller")

        assert sellers.loc["syllas", "attainment"] == pytest.approx(100000 / 118500 * 100)
        assert sellers.loc["syllas", "band"] == "on_track"
        assert sellers.loc["vendedora1", "band"] == "on_track"
        # zero goal, zero sales
        assert sellers.loc["vendedora2", "attainment"] == 0


class TestRepeatedAggregation:
    def test_repeated_calls_give_identical_results(self, january_ledger):
        metrics = SellerMetrics(january_ledger)

        assert metrics.quarter_rollups() == metrics.quarter_rollups()
        assert metrics.annual_total() == metrics.annual_total()
        for month in ("Jan", "Fev", "Dez"):
            assert metrics.calculate_overview_metrics(month) == metrics.calculate_overview_metrics(month)
            assert metrics.best_performer(month) == metrics.best_performer(month)

    def test_aggregation_does_not_change_ledger(self, january_ledger):
        before = january_ledger.to_dict()
        metrics = SellerMetrics(january_ledger)
        metrics.quarter_rollups()
        metrics.prepare_monthly_summary()
        assert january_ledger.to_dict() == before
