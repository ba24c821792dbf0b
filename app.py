# app.py
"""
Sales BI Dashboard - Main Entry Point (Team Performance)

Sections:
1. KPI cards - accumulated revenue, annual goal %, quarter status, top seller
2. Monthly target vs actual chart + quarterly rollup chart
3. Per-seller goal indicators for the selected month
4. Monthly detail table + Excel export

Version: 1.0.0
"""

import logging

import streamlit as st

from utils.config import config
from utils.session import get_dashboard_state
from utils.client_portfolio import ClientPortfolio
from utils.common import format_brl
from utils.seller_performance import SellerCharts
from utils.seller_performance.constants import TARGET_YEAR
from utils.seller_performance.fragments import (
    render_sidebar,
    monthly_table_fragment,
    export_report_fragment,
)

# Configure logging
logging.basicConfig(
    level=config.get_app_setting("LOG_LEVEL", "INFO"),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# ==================== PAGE CONFIGURATION ====================

APP_NAME = "Sales BI"
APP_ICON = "📊"
APP_VERSION = "1.0.0"

COMPANY_NAME = config.get_app_setting("COMPANY_NAME", "")

st.set_page_config(
    page_title=f"{APP_NAME} - {COMPANY_NAME}",
    page_icon=APP_ICON,
    layout="wide",
    initial_sidebar_state="expanded"
)

# ==================== CUSTOM CSS ====================

st.markdown("""
<style>
    .main-header {
        font-size: 2.2rem;
        font-weight: 800;
        margin-bottom: 0.25rem;
    }

    .sub-header {
        font-size: 1rem;
        color: #666;
        margin-bottom: 1.5rem;
    }

    .footer {
        text-align: center;
        color: #888;
        padding: 1rem;
        margin-top: 3rem;
        border-top: 1px solid #eee;
        font-size: 0.9rem;
    }
</style>
""", unsafe_allow_html=True)


# ==================== MAIN ====================

def main():
    """Team performance dashboard"""
    state = get_dashboard_state()
    month = render_sidebar(state, COMPANY_NAME)

    metrics = state.seller_metrics()
    overview = metrics.calculate_overview_metrics(month)

    st.markdown(f'<p class="main-header">{APP_ICON} Team Performance {TARGET_YEAR}</p>', unsafe_allow_html=True)
    st.markdown(
        f'<p class="sub-header">Targets vs actuals · reference month: <b>{month}</b></p>',
        unsafe_allow_html=True
    )

    # KPI cards
    SellerCharts.render_kpi_cards(overview)

    st.markdown("---")

    # Charts
    col_monthly, col_quarterly = st.columns([3, 2])
    with col_monthly:
        st.altair_chart(
            SellerCharts.build_monthly_comparison_chart(metrics.prepare_monthly_summary(), title="Target vs Actual by Month"),
            use_container_width=True
        )
    with col_quarterly:
        st.altair_chart(
            SellerCharts.build_quarterly_chart(metrics.prepare_quarterly_summary(), title="Quarterly Rollup"),
            use_container_width=True
        )

    # Seller goal indicators
    st.subheader(f"🎯 Seller Goals - {month}")
    st.caption(f"Team target for the month: {format_brl(metrics.monthly_target(month))}")
    SellerCharts.render_goal_indicators(metrics.prepare_seller_summary(month))

    st.markdown("---")

    monthly_table_fragment(metrics)

    if config.is_feature_enabled("EXPORT"):
        portfolio_df = ClientPortfolio.to_dataframe(state.portfolio().ranked())
        export_report_fragment(metrics, month, portfolio_df=portfolio_df, company_name=COMPANY_NAME)

    # Footer
    st.markdown(f"""
    <div class="footer">
        <strong>{APP_NAME}</strong> v{APP_VERSION} | {COMPANY_NAME}
    </div>
    """, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
