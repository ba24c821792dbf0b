"""Smoke tests for chart builders and the projection editor diff."""
import altair as alt
import pandas as pd
import plotly.graph_objects as go

from utils.client_portfolio.charts import PortfolioCharts
from utils.client_portfolio.fragments import projection_changes
from utils.client_portfolio.metrics import ClientPortfolio
from utils.seller_performance.charts import SellerCharts
from utils.seller_performance.metrics import SellerMetrics


class TestSellerCharts:
    def test_monthly_and_quarterly_charts(self, january_ledger):
        metrics = SellerMetrics(january_ledger)

        monthly = SellerCharts.build_monthly_comparison_chart(metrics.prepare_monthly_summary(), title="Monthly")
        quarterly = SellerCharts.build_quarterly_chart(metrics.prepare_quarterly_summary())

        assert isinstance(monthly, alt.LayerChart)
        assert isinstance(quarterly, alt.LayerChart)
        assert monthly.to_dict()["title"] == "Monthly"

    def test_empty_frame_gives_placeholder(self):
        chart = SellerCharts.build_monthly_comparison_chart(pd.DataFrame())
        assert isinstance(chart, alt.Chart)


class TestPortfolioCharts:
    def test_yearly_behaviour_chart(self, empty_projections):
        yearly = ClientPortfolio(empty_projections).prepare_yearly_behaviour()
        assert isinstance(PortfolioCharts.build_yearly_behaviour_chart(yearly), alt.LayerChart)

    def test_value_matrix(self, empty_projections):
        portfolio = ClientPortfolio(empty_projections)
        fig = PortfolioCharts.build_value_matrix(portfolio.prepare_matrix_data(portfolio.ranked()))
        assert isinstance(fig, go.Figure)
        assert len(fig.data) >= 1

    def test_value_matrix_without_clients(self):
        assert PortfolioCharts.build_value_matrix(ClientPortfolio.prepare_matrix_data([])) is None


class TestProjectionChanges:
    def test_detects_edited_projection_cells_only(self, empty_projections):
        original = ClientPortfolio.to_dataframe(ClientPortfolio(empty_projections).ranked())
        edited = original.copy()
        edited.loc[edited["id"] == "5", "2027"] = 45000
        edited.loc[edited["id"] == "5", "2021"] = 1
        # rows re-ordered by the editor must still match by id
        edited = edited.iloc[::-1].reset_index(drop=True)

        assert projection_changes(original, edited) == [("5", 2027, 45000.0)]

    def test_cleared_cell_counts_as_zero(self):
        projections_df = pd.DataFrame([{"id": "1", **{str(y): 0.0 for y in range(2021, 2031)}}])
        projections_df.loc[0, "2026"] = 500.0
        edited = projections_df.copy()
        edited.loc[0, "2026"] = None

        assert projection_changes(projections_df, edited) == [("1", 2026, 0.0)]
