"""Tests for client lifecycle metrics and portfolio operations."""
import pytest

from utils.client_portfolio.constants import (
    ALL_YEARS, CELL_BANDS, CELL_BAND_HIGH, CELL_BAND_ZERO, GROWTH_FACTOR_DEFAULT,
)
from utils.client_portfolio.filters import TextSearchResult, apply_text_search_filter
from utils.client_portfolio.ledger import ProjectionLedger
from utils.client_portfolio.metrics import (
    ClientPortfolio,
    cell_colors,
    derive_client_metrics,
    growth_factor,
    health_status,
    peak_revenue,
    year_value,
)
from utils.client_portfolio.models import ClientProfile, HealthStatus, CLIENT_REGISTRY


def _client(client_id="x", history=None, name="ACME LTDA", sector="Metalurgia"):
    return ClientProfile(id=client_id, name=name, sector=sector, history=history or {})


class TestHealthStatus:
    def test_churned_when_current_year_empty_after_recent_sales(self):
        client = _client(history={2023: 100, 2024: 0, 2025: 0})
        assert health_status(client, {}) == HealthStatus.CHURNED

    def test_at_risk_below_forty_percent_of_peak(self):
        client = _client(history={2021: 100, 2025: 30})
        assert peak_revenue(client, {}) == 100
        assert health_status(client, {}) == HealthStatus.AT_RISK

    def test_exactly_forty_percent_is_healthy(self):
        client = _client(history={2021: 100, 2025: 40})
        assert health_status(client, {}) == HealthStatus.HEALTHY

    def test_projection_can_set_the_peak(self):
        client = _client(history={2025: 100})
        assert health_status(client, {}) == HealthStatus.HEALTHY
        assert health_status(client, {2028: 300}) == HealthStatus.AT_RISK

    def test_inactive_for_years_is_healthy(self):
        client = _client(history={2021: 500})
        assert health_status(client, {}) == HealthStatus.HEALTHY

    def test_registry_examples(self):
        by_id = {client.id: client for client in CLIENT_REGISTRY}
        assert health_status(by_id["14"], {}) == HealthStatus.CHURNED
        assert health_status(by_id["3"], {}) == HealthStatus.AT_RISK
        assert health_status(by_id["16"], {}) == HealthStatus.HEALTHY


class TestLifetimeValue:
    def test_zero_client_uses_default_growth(self):
        metrics = derive_client_metrics(_client())
        assert metrics.estimated_ltv == 0
        assert metrics.growth_factor == GROWTH_FACTOR_DEFAULT == 50

    def test_ltv_is_history_plus_projection(self):
        client = _client(history={2021: 1000, 2024: 500})
        metrics = derive_client_metrics(client, {2026: 250, 2030: 750})

        assert metrics.total_history == 1500
        assert metrics.total_projected == 1000
        assert metrics.estimated_ltv == 2500
        assert metrics.peak_revenue == 1000

    def test_growth_factor(self):
        client = _client(history={2025: 16600})
        assert growth_factor(client, {2026: 33200}) == pytest.approx(200.0)
        assert growth_factor(client, {}) == 0

    def test_year_value_switches_to_projection_after_current_year(self):
        metrics = derive_client_metrics(_client(history={2025: 10}), {2026: 20})
        assert year_value(metrics, 2025) == 10
        assert year_value(metrics, 2026) == 20
        assert year_value(metrics, 2027) == 0


class TestCellColors:
    def test_bands(self):
        low, mid = CELL_BANDS
        assert cell_colors(0) == CELL_BAND_ZERO
        assert cell_colors(49_999) == (low[1], low[2])
        assert cell_colors(50_000) == (mid[1], mid[2])
        assert cell_colors(150_000) == CELL_BAND_HIGH


class TestClientPortfolio:
    def test_ranked_is_non_increasing(self, empty_projections):
        ranked = ClientPortfolio(empty_projections).ranked()
        values = [metrics.estimated_ltv for metrics in ranked]

        assert len(ranked) == 20
        assert values == sorted(values, reverse=True)
        assert ranked[0].name == "FERTIPAR BANDEIRANTES LTDA"

    def test_ties_keep_registry_order(self, empty_projections):
        registry = [
            _client("a", {2025: 10}, name="FIRST"),
            _client("b", {2025: 99}, name="BIG"),
            _client("c", {2024: 10}, name="SECOND"),
        ]
        ranked = ClientPortfolio(empty_projections, registry=registry).ranked()
        assert [metrics.name for metrics in ranked] == ["BIG", "FIRST", "SECOND"]

    def test_projection_changes_ranking(self):
        projections = ProjectionLedger()
        projections.set("20", 2026, 10_000_000)
        assert ClientPortfolio(projections).ranked()[0].id == "20"

    def test_empty_filter_is_identity(self, empty_projections):
        portfolio = ClientPortfolio(empty_projections)
        ranked = portfolio.ranked()
        assert portfolio.filter("") == ranked
        assert portfolio.filter("   ") == ranked

    def test_filter_matches_name_or_sector_case_insensitive(self, empty_projections):
        portfolio = ClientPortfolio(empty_projections)

        by_sector = {metrics.name for metrics in portfolio.filter("ALIMENTÍCIO")}
        assert by_sector == {"AJINOMOTO DO BRASIL LTDA", "CJ DO BRASIL LTDA"}

        assert [metrics.id for metrics in portfolio.filter(" sika ")] == ["16"]

    def test_filter_is_idempotent_and_keeps_order(self, empty_projections):
        portfolio = ClientPortfolio(empty_projections)
        once = portfolio.filter("ltda")
        assert portfolio.filter("ltda", once) == once

        ranked_ids = [metrics.id for metrics in portfolio.ranked()]
        positions = [ranked_ids.index(metrics.id) for metrics in once]
        assert positions == sorted(positions)

    def test_search_box_filters_through_portfolio(self, empty_projections):
        portfolio = ClientPortfolio(empty_projections)
        ranked = portfolio.ranked()

        inactive = TextSearchResult(query="", is_active=False)
        assert apply_text_search_filter(portfolio, inactive, ranked) == ranked

        search = TextSearchResult(query="sika", is_active=True)
        assert apply_text_search_filter(portfolio, search, ranked) == portfolio.filter("sika")
        assert [metrics.id for metrics in apply_text_search_filter(portfolio, search)] == ["16"]

    def test_yearly_total(self):
        projections = ProjectionLedger()
        projections.set("1", 2026, 1000)
        projections.set("2", 2026, 2500)
        portfolio = ClientPortfolio(projections)

        expected_2021 = sum(client.history.get(2021, 0) for client in CLIENT_REGISTRY)
        assert portfolio.yearly_total(2021) == pytest.approx(expected_2021)
        assert portfolio.yearly_total(2026) == 3500
        assert portfolio.yearly_total(2030) == 0

    def test_inactive_clients(self, empty_projections):
        assert ClientPortfolio(empty_projections).inactive_clients() == [
            "PAIS E FILHOS USINAGEM LTDA",
            "ITURRI COIMPAR INDUSTRIA",
            "PLIMAX IND DE EMBALAGENS",
        ]

    def test_health_counts_cover_every_client(self, empty_projections):
        counts = ClientPortfolio(empty_projections).health_counts()
        assert set(counts) == set(HealthStatus)
        assert sum(counts.values()) == 20

    def test_projection_edit_only_reclassifies_that_client(self):
        projections = ProjectionLedger()
        before = {metrics.id: metrics.health for metrics in ClientPortfolio(projections).all_metrics()}

        projections.set("2", 2027, 99_000_000)
        after = {metrics.id: metrics.health for metrics in ClientPortfolio(projections).all_metrics()}

        assert set(after) == set(before)
        assert {client_id for client_id in before if before[client_id] != after[client_id]} <= {"2"}

    def test_portfolio_does_not_mutate_projections(self):
        projections = ProjectionLedger()
        projections.set("5", 2027, 100)
        before = projections.to_dict()

        portfolio = ClientPortfolio(projections)
        portfolio.ranked()
        portfolio.prepare_yearly_behaviour()
        assert projections.to_dict() == before


class TestPortfolioFrames:
    def test_to_dataframe_has_ten_year_columns(self, empty_projections):
        portfolio = ClientPortfolio(empty_projections)
        df = ClientPortfolio.to_dataframe(portfolio.ranked())

        assert len(df) == 20
        for year in ALL_YEARS:
            assert str(year) in df.columns
        assert df.iloc[0]["estimated_ltv"] >= df.iloc[-1]["estimated_ltv"]

    def test_empty_selection_keeps_columns(self):
        assert ClientPortfolio.to_dataframe([]).empty
        assert list(ClientPortfolio.prepare_matrix_data([]).columns)[:2] == ["name", "sector"]

    def test_yearly_behaviour_kinds(self, empty_projections):
        yearly = ClientPortfolio(empty_projections).prepare_yearly_behaviour()
        assert list(yearly["year"]) == [str(year) for year in ALL_YEARS]
        assert set(yearly.loc[yearly["year"] <= "2025", "kind"]) == {"Historical"}
        assert set(yearly.loc[yearly["year"] > "2025", "kind"]) == {"Planned"}
