# utils/seller_performance/charts.py
"""
Altair Chart Builders for Seller Performance

All visualization components:
- KPI summary cards (using st.metric)
- Monthly target vs actual (grouped bars)
- Quarterly actual (bars) vs target (line)
- Seller goal indicators (progress bars)
"""

import logging
from typing import Dict

import altair as alt
import pandas as pd
import streamlit as st

from ..common import format_brl, format_percent
from .constants import COLORS, MONTHS, CHART_HEIGHT, QUARTER_CHART_HEIGHT, GOAL_BANDS, TARGET_YEAR

logger = logging.getLogger(__name__)


class SellerCharts:
    """
    Chart builders for the seller performance dashboard.

    All methods are static - can be called without instantiation.

    Usage:
        SellerCharts.render_kpi_cards(overview)
        chart = SellerCharts.build_monthly_comparison_chart(monthly_df)
        st.altair_chart(chart, use_container_width=True)
    """

    # =========================================================================
    # KPI CARDS (Using st.metric)
    # =========================================================================

    @staticmethod
    def render_kpi_cards(overview: Dict):
        """
        Render the four headline KPI cards.

        Layout: Accumulated Revenue | Goal Reached | Quarter Status | Top Seller
        """
        col1, col2, col3, col4 = st.columns(4)

        with col1:
            st.metric(
                label="Accumulated Revenue",
                value=format_brl(overview['annual_total']),
                delta="YTD actual",
                delta_color="off",
                help="Sum of all sellers' actuals across the 12 months"
            )

        with col2:
            st.metric(
                label="Goal Reached",
                value=format_percent(overview['annual_goal_percent']),
                delta=f"Target {TARGET_YEAR}: {format_brl(overview['annual_goal'])}",
                delta_color="off",
                help="Accumulated revenue / annual goal × 100%"
            )

        with col3:
            st.metric(
                label="Quarter Status",
                value=overview['current_quarter'],
                delta=f"{format_percent(overview['quarter_attainment'])} QTD",
                delta_color="normal" if overview['quarter_attainment'] >= 100 else "inverse",
                help="Attainment of the quarter containing the selected month"
            )

        with col4:
            performer = overview['top_performer']
            st.metric(
                label="Top Seller (Month)",
                value=performer.label,
                delta=format_brl(performer.value),
                delta_color="off",
                help="Seller with the highest actual in the selected month"
            )

    # =========================================================================
    # MONTHLY COMPARISON
    # =========================================================================

    @staticmethod
    def build_monthly_comparison_chart(
        monthly_df: pd.DataFrame,
        title: str = ""
    ) -> alt.Chart:
        """
        Grouped bars of monthly target vs actual.

        Args:
            monthly_df: Output of SellerMetrics.prepare_monthly_summary()
            title: Chart title

        Returns:
            Altair chart
        """
        if monthly_df.empty:
            return SellerCharts._empty_chart("No data available")

        bar_data = monthly_df.melt(
            id_vars=['month'],
            value_vars=['target', 'actual'],
            var_name='Metric',
            value_name='Amount'
        )
        bar_data['Metric'] = bar_data['Metric'].map({
            'target': 'Monthly Target',
            'actual': 'Actual Revenue',
        })

        color_scale = alt.Scale(
            domain=['Monthly Target', 'Actual Revenue'],
            range=[COLORS['target'], COLORS['actual']]
        )

        bars = alt.Chart(bar_data).mark_bar(cornerRadiusTopLeft=4, cornerRadiusTopRight=4).encode(
            x=alt.X('month:N', sort=MONTHS, title='Month'),
            y=alt.Y('Amount:Q', title='BRL', axis=alt.Axis(format='~s')),
            color=alt.Color('Metric:N', scale=color_scale, legend=alt.Legend(orient='top')),
            xOffset='Metric:N',
            tooltip=[
                alt.Tooltip('month:N', title='Month'),
                alt.Tooltip('Metric:N', title='Metric'),
                alt.Tooltip('Amount:Q', title='Amount', format=',.0f')
            ]
        )

        bar_text = alt.Chart(bar_data).mark_text(
            align='center', baseline='bottom', dy=-5, fontSize=10
        ).encode(
            x=alt.X('month:N', sort=MONTHS),
            y=alt.Y('Amount:Q'),
            text=alt.Text('Amount:Q', format='~s'),
            xOffset='Metric:N',
            color=alt.value(COLORS['text_light'])
        )

        return alt.layer(bars, bar_text).properties(
            height=CHART_HEIGHT,
            title=title
        )

    # =========================================================================
    # QUARTERLY ANALYSIS
    # =========================================================================

    @staticmethod
    def build_quarterly_chart(
        quarterly_df: pd.DataFrame,
        title: str = ""
    ) -> alt.Chart:
        """
        Quarterly actual as bars with the quarter target as a reference line.

        Args:
            quarterly_df: Output of SellerMetrics.prepare_quarterly_summary()
            title: Chart title

        Returns:
            Altair chart
        """
        if quarterly_df.empty:
            return SellerCharts._empty_chart("No data available")

        base = alt.Chart(quarterly_df).encode(
            x=alt.X('quarter:N', title='Quarter', sort=['Q1', 'Q2', 'Q3', 'Q4'])
        )

        bars = base.mark_bar(color=COLORS['quarter_actual'], size=60).encode(
            y=alt.Y('actual:Q', title='BRL', axis=alt.Axis(format='~s')),
            tooltip=[
                alt.Tooltip('quarter:N', title='Quarter'),
                alt.Tooltip('actual:Q', title='Actual', format=',.0f'),
                alt.Tooltip('target:Q', title='Target', format=',.0f'),
                alt.Tooltip('attainment:Q', title='Attainment %', format='.2f')
            ]
        )

        bar_text = base.mark_text(
            align='center', baseline='bottom', dy=-6, fontSize=12,
            color=COLORS['quarter_actual']
        ).encode(
            y=alt.Y('actual:Q'),
            text=alt.Text('actual:Q', format='~s')
        )

        line = base.mark_line(
            color=COLORS['quarter_target'],
            strokeWidth=4,
            point=alt.OverlayMarkDef(color=COLORS['quarter_target'], size=90)
        ).encode(
            y=alt.Y('target:Q'),
            tooltip=[
                alt.Tooltip('quarter:N', title='Quarter'),
                alt.Tooltip('target:Q', title='Target', format=',.0f')
            ]
        )

        return alt.layer(bars, bar_text, line).properties(
            height=QUARTER_CHART_HEIGHT,
            title=title
        )

    # =========================================================================
    # GOAL INDICATORS
    # =========================================================================

    @staticmethod
    def render_goal_indicators(seller_df: pd.DataFrame):
        """One card per seller: attainment %, progress bar, actual vs goal."""
        columns = st.columns(max(len(seller_df), 1))

        for col, row in zip(columns, seller_df.itertuples(index=False)):
            band = GOAL_BANDS[row.band]
            with col:
                with st.container(border=True):
                    st.markdown(
                        f"**{row.label}** "
                        f"<span style='float:right;color:{band['color']};font-weight:800'>"
                        f"{row.attainment:.1f}%</span>",
                        unsafe_allow_html=True
                    )
                    st.progress(min(max(row.attainment, 0.0), 100.0) / 100)
                    st.caption(f"Actual {format_brl(row.actual)} · Goal {format_brl(row.target)}")

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _empty_chart(message: str = "No data") -> alt.Chart:
        return alt.Chart(pd.DataFrame({'text': [message]})).mark_text(
            size=14, color=COLORS['text_light']
        ).encode(
            text='text:N'
        ).properties(height=200)
