# utils/client_portfolio/charts.py
"""
Chart Builders for the Client Portfolio

- Yearly portfolio behaviour (Altair bars, historical vs planned)
- LTV x growth matrix (Plotly scatter, bubble = peak year)
- Health summary cards (st.metric)
"""

import logging
from typing import Dict, Optional

import altair as alt
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from .constants import COLORS, CHART_HEIGHT, HEALTH_COLORS, HEALTH_LABELS, GROWTH_FACTOR_DEFAULT
from .models import HealthStatus

logger = logging.getLogger(__name__)


def _plotly_layout_defaults(fig, height: int = CHART_HEIGHT) -> go.Figure:
    fig.update_layout(
        height=height,
        margin=dict(l=20, r=20, t=40, b=20),
        font=dict(size=11),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(showgrid=False),
        yaxis=dict(showgrid=True, gridcolor="rgba(0,0,0,0.06)"),
        hoverlabel=dict(bgcolor="white"),
    )
    return fig


class PortfolioCharts:
    """
    Chart builders for the client portfolio page.

    Usage:
        chart = PortfolioCharts.build_yearly_behaviour_chart(yearly_df)
        st.altair_chart(chart, use_container_width=True)

        fig = PortfolioCharts.build_value_matrix(matrix_df)
        if fig is not None:
            st.plotly_chart(fig, use_container_width=True)
    """

    @staticmethod
    def render_health_cards(counts: Dict[HealthStatus, int], total_ltv: float):
        col1, col2, col3, col4 = st.columns(4)

        with col1:
            st.metric("Portfolio LTV", f"R$ {total_ltv / 1_000_000:,.2f}M",
                      help="Sum of estimated lifetime value (history 2021-2025 + projections 2026-2030)")
        with col2:
            st.metric(HEALTH_LABELS['healthy'], counts.get(HealthStatus.HEALTHY, 0))
        with col3:
            st.metric(HEALTH_LABELS['at_risk'], counts.get(HealthStatus.AT_RISK, 0),
                      help="Active in 2025 but below 40% of the peak year")
        with col4:
            st.metric(HEALTH_LABELS['churned'], counts.get(HealthStatus.CHURNED, 0),
                      help="No 2025 revenue after buying in 2023 or 2024")

    @staticmethod
    def build_yearly_behaviour_chart(
        yearly_df: pd.DataFrame,
        title: str = ""
    ) -> alt.Chart:
        """
        Portfolio revenue per year, colored by Historical / Planned.

        Args:
            yearly_df: Output of ClientPortfolio.prepare_yearly_behaviour()
            title: Chart title
        """
        color_scale = alt.Scale(
            domain=['Historical', 'Planned'],
            range=[COLORS['historical'], COLORS['planned']]
        )

        bars = alt.Chart(yearly_df).mark_bar(cornerRadiusTopLeft=6, cornerRadiusTopRight=6).encode(
            x=alt.X('year:N', title='Year'),
            y=alt.Y('revenue:Q', title='BRL', axis=alt.Axis(format='~s')),
            color=alt.Color('kind:N', scale=color_scale, legend=alt.Legend(orient='top', title=None)),
            tooltip=[
                alt.Tooltip('year:N', title='Year'),
                alt.Tooltip('kind:N', title='Type'),
                alt.Tooltip('revenue:Q', title='Revenue', format=',.0f')
            ]
        )

        text = bars.mark_text(
            align='center', baseline='bottom', dy=-5, fontSize=10,
            color=COLORS['text_light']
        ).encode(
            text=alt.Text('revenue:Q', format='~s')
        )

        return alt.layer(bars, text).properties(height=CHART_HEIGHT, title=title)

    @staticmethod
    def build_value_matrix(matrix_df: pd.DataFrame) -> Optional[go.Figure]:
        """Scatter of estimated LTV vs growth factor; None when there is nothing to plot."""
        if matrix_df.empty:
            return None

        color_map = {HEALTH_LABELS[key]: color for key, color in HEALTH_COLORS.items()}
        data = matrix_df.copy()
        # Bubbles need a positive size
        data['bubble'] = data['peak_revenue'].clip(lower=1)

        fig = px.scatter(
            data,
            x='estimated_ltv',
            y='growth_factor',
            size='bubble',
            color='health_label',
            color_discrete_map=color_map,
            hover_name='name',
            hover_data={
                'sector': True,
                'estimated_ltv': ':,.0f',
                'growth_factor': ':.1f',
                'peak_revenue': ':,.0f',
                'bubble': False,
                'health_label': False,
            },
            labels={
                'estimated_ltv': 'Estimated LTV (BRL)',
                'growth_factor': 'Growth Factor (%)',
                'health_label': 'Health',
                'peak_revenue': 'Peak Year',
                'sector': 'Sector',
            },
            size_max=40,
        )
        fig.add_hline(
            y=GROWTH_FACTOR_DEFAULT,
            line_dash="dot",
            line_color="rgba(100,116,139,0.6)",
            annotation_text="No baseline",
            annotation_position="bottom right",
        )

        fig = _plotly_layout_defaults(fig)
        fig.update_xaxes(title_text="Estimated LTV (BRL)", tickformat="~s")
        fig.update_yaxes(title_text="Growth Factor (%)")
        return fig
