# utils/seller_performance/fragments.py
"""
Streamlit Fragments for Seller Performance

- Sidebar month selector (shared across pages)
- Sidebar revenue inputs for the selected month (write-through to storage)
- Monthly table and Excel export

Revenue inputs are plain widgets, not fragments: an edit must rerun the
whole page so KPI cards and charts pick up the new value.
"""

import logging
from datetime import datetime
from typing import Optional

import pandas as pd
import streamlit as st

from ..common import format_brl, format_currency_input
from ..session import DashboardState
from ..storage import StorageError
from .constants import MONTHS, SELLERS, SELLER_INPUT_LABELS, DEFAULT_MONTH
from .export import PerformanceExport
from .metrics import SellerMetrics

logger = logging.getLogger(__name__)

MONTH_KEY = "selected_month"
SAVE_ERROR_KEY = "sales_save_error"


# =============================================================================
# MONTH SELECTOR
# =============================================================================

def render_month_selector(container=None) -> str:
    """
    Sidebar month selector.

    The choice lives under its own session key so it survives page switches
    (Streamlit drops widget keys of widgets not rendered on the current page).
    """
    ctx = container if container else st.sidebar
    current = st.session_state.get(MONTH_KEY, DEFAULT_MONTH)

    month = ctx.selectbox(
        "📅 Reference month",
        options=MONTHS,
        index=MONTHS.index(current) if current in MONTHS else 0,
        key=f"{MONTH_KEY}_widget",
    )
    st.session_state[MONTH_KEY] = month
    return month


# =============================================================================
# REVENUE INPUTS
# =============================================================================

def _input_key(month: str, seller: str) -> str:
    return f"sale_{month}_{seller}"


def _on_sale_change(state: DashboardState, month: str, seller: str):
    widget_key = _input_key(month, seller)
    try:
        entry = state.record_sale(month, seller, st.session_state.get(widget_key, ""))
    except StorageError as e:
        logger.error(f"Failed to save {seller} {month}: {e}")
        st.session_state[SAVE_ERROR_KEY] = str(e)
        return

    st.session_state.pop(SAVE_ERROR_KEY, None)
    # Show the canonical pt-BR form of what was stored
    st.session_state[widget_key] = format_currency_input(entry.get(seller))


def render_revenue_inputs(state: DashboardState, month: str, container=None):
    """Four seller inputs plus the month total, for the selected month."""
    ctx = container if container else st.sidebar
    entry = state.sales_ledger.entry(month)

    ctx.markdown(f"**💰 Actual revenue - {month}**")

    for seller in SELLERS:
        widget_key = _input_key(month, seller)
        if widget_key not in st.session_state:
            st.session_state[widget_key] = format_currency_input(entry.get(seller))

        ctx.text_input(
            SELLER_INPUT_LABELS[seller],
            key=widget_key,
            placeholder="0,00",
            on_change=_on_sale_change,
            args=(state, month, seller),
            help="Brazilian format: 47.895,31",
        )

    if SAVE_ERROR_KEY in st.session_state:
        ctx.error(f"❌ Could not save: {st.session_state[SAVE_ERROR_KEY]}")

    ctx.success(f"🧮 Month total ({month}): **{format_brl(state.sales_ledger.entry(month).total(), 2)}**")


# =============================================================================
# FRAGMENT: MONTHLY TABLE
# =============================================================================

@st.fragment
def monthly_table_fragment(metrics: SellerMetrics, fragment_key: str = "monthly"):
    """Monthly target vs actual table with optional cumulative columns."""
    col_header, col_toggle = st.columns([4, 1])
    with col_header:
        st.subheader("📋 Monthly Detail")
    with col_toggle:
        show_cumulative = st.toggle("Cumulative", key=f"{fragment_key}_cumulative")

    monthly_df = metrics.prepare_monthly_summary()

    columns = ['month', 'quarter', 'target', 'actual', 'attainment', 'gap']
    if show_cumulative:
        columns += ['cumulative_target', 'cumulative_actual', 'cumulative_attainment']

    st.dataframe(
        monthly_df[columns],
        hide_index=True,
        use_container_width=True,
        column_config={
            'month': st.column_config.TextColumn("Month"),
            'quarter': st.column_config.TextColumn("Quarter"),
            'target': st.column_config.NumberColumn("Target", format="R$ %.0f"),
            'actual': st.column_config.NumberColumn("Actual", format="R$ %.2f"),
            'attainment': st.column_config.ProgressColumn(
                "Attainment",
                help="Actual / Target × 100%",
                format="%.1f%%",
                min_value=0,
                max_value=150,
            ),
            'gap': st.column_config.NumberColumn(
                "Gap", help="Actual - Target (negative = below target)", format="R$ %.0f"
            ),
            'cumulative_target': st.column_config.NumberColumn("Cum. Target", format="R$ %.0f"),
            'cumulative_actual': st.column_config.NumberColumn("Cum. Actual", format="R$ %.2f"),
            'cumulative_attainment': st.column_config.NumberColumn("Cum. Attainment", format="%.1f%%"),
        },
    )


# =============================================================================
# FRAGMENT: EXCEL EXPORT
# =============================================================================

@st.fragment
def export_report_fragment(
    metrics: SellerMetrics,
    month: str,
    portfolio_df: Optional[pd.DataFrame] = None,
    company_name: str = "",
    fragment_key: str = "export"
):
    """Build the Excel report on demand and offer it for download."""
    if st.button("📥 Export to Excel", key=f"{fragment_key}_build"):
        with st.spinner("Building report..."):
            report = PerformanceExport().create_report(
                overview=metrics.calculate_overview_metrics(month),
                monthly_df=metrics.prepare_monthly_summary(),
                quarterly_df=metrics.prepare_quarterly_summary(),
                month=month,
                portfolio_df=portfolio_df,
                company_name=company_name,
            )
        st.download_button(
            label="⬇️ Download",
            data=report.getvalue(),
            file_name=f"sales_performance_{month}_{datetime.now().strftime('%Y%m%d_%H%M')}.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            key=f"{fragment_key}_download",
        )


# =============================================================================
# SHARED SIDEBAR
# =============================================================================

def render_sidebar(state: DashboardState, company_name: str = "") -> str:
    """Company header, month selector and revenue inputs; returns the selected month."""
    with st.sidebar:
        if company_name:
            st.markdown(f"### 🏭 {company_name}")
            st.caption("Sales BI Dashboard")
            st.markdown("---")

        month = render_month_selector()

        with st.expander("✏️ Enter actuals", expanded=False):
            render_revenue_inputs(state, month, container=st)

    return month
