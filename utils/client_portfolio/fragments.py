# utils/client_portfolio/fragments.py
"""
Streamlit Sections for the Client Portfolio

- Revenue matrix: color-banded view, or an editor for the projection years
- Client notes (fragment: saving a note does not change any metric)
"""

import logging
from typing import List, Sequence, Tuple

import pandas as pd
import streamlit as st

from ..common import to_amount
from ..session import DashboardState
from ..storage import StorageError
from .constants import ALL_YEARS, HISTORY_YEARS, PROJECTION_YEARS
from .metrics import ClientPortfolio, cell_colors
from .models import ClientMetrics

logger = logging.getLogger(__name__)

EDITOR_VERSION_KEY = "projection_editor_version"

YEAR_COLUMNS = [str(year) for year in ALL_YEARS]
MATRIX_COLUMNS = ['id', 'name', 'sector', 'health_label'] + YEAR_COLUMNS + ['estimated_ltv', 'growth_factor']


def projection_changes(original: pd.DataFrame, edited: pd.DataFrame) -> List[Tuple[str, int, float]]:
    """
    (client id, year, new amount) for every projection cell that differs.

    Rows are matched on the 'id' column, so row order does not matter.
    Cleared cells count as 0.
    """
    before = original.set_index('id')
    after = edited.set_index('id')
    changes = []

    for client_id in after.index:
        if client_id not in before.index:
            continue
        for year in PROJECTION_YEARS:
            column = str(year)
            old_value = to_amount(before.at[client_id, column])
            new_value = to_amount(after.at[client_id, column])
            if new_value != old_value:
                changes.append((str(client_id), year, new_value))

    return changes


def _style_revenue_cells(value):
    background, text = cell_colors(to_amount(value))
    return f"background-color: {background}; color: {text}"


def _matrix_column_config(editable: bool) -> dict:
    column_config = {
        'id': None,
        'name': st.column_config.TextColumn("Client", width="large", disabled=True),
        'sector': st.column_config.TextColumn("Sector", disabled=True),
        'health_label': st.column_config.TextColumn("Health", disabled=True),
        'estimated_ltv': st.column_config.NumberColumn(
            "Estimated LTV", help="History 2021-2025 + projections 2026-2030",
            format="R$ %.0f", disabled=True
        ),
        'growth_factor': st.column_config.NumberColumn(
            "Growth", help="Projected total / historical total × 100%",
            format="%.1f%%", disabled=True
        ),
    }
    for year in HISTORY_YEARS:
        column_config[str(year)] = st.column_config.NumberColumn(str(year), format="R$ %.0f", disabled=True)
    for year in PROJECTION_YEARS:
        column_config[str(year)] = st.column_config.NumberColumn(
            f"{year} ✏️" if editable else str(year),
            help="Planned revenue (editable)" if editable else None,
            format="R$ %.0f",
            min_value=0,
            disabled=not editable,
        )
    return column_config


def render_revenue_matrix(state: DashboardState, clients: Sequence[ClientMetrics]):
    """Revenue per client and year; projection years are editable in edit mode."""
    col_header, col_toggle = st.columns([4, 1])
    with col_header:
        st.subheader("📅 Revenue Matrix 2021-2030")
    with col_toggle:
        edit_mode = st.toggle("Edit projections", key="projection_edit_mode")

    matrix_df = ClientPortfolio.to_dataframe(clients)[MATRIX_COLUMNS]

    if matrix_df.empty:
        st.info("No clients match the current search")
        return

    if not edit_mode:
        styled = matrix_df.style.map(_style_revenue_cells, subset=YEAR_COLUMNS)
        st.dataframe(
            styled,
            hide_index=True,
            use_container_width=True,
            column_config=_matrix_column_config(editable=False),
        )
        return

    # A fresh key after each save: edited_rows are positional and rows re-rank
    version = st.session_state.get(EDITOR_VERSION_KEY, 0)
    edited_df = st.data_editor(
        matrix_df,
        hide_index=True,
        use_container_width=True,
        num_rows="fixed",
        column_config=_matrix_column_config(editable=True),
        key=f"projection_editor_{version}",
    )

    changes = projection_changes(matrix_df, edited_df)
    if not changes:
        return

    try:
        for client_id, year, amount in changes:
            state.set_projection(client_id, year, amount)
    except StorageError as e:
        logger.error(f"Failed to save projections: {e}")
        st.error(f"❌ Could not save projections: {e}")
        return

    logger.info(f"✅ Saved {len(changes)} projection change(s)")
    st.session_state[EDITOR_VERSION_KEY] = version + 1
    st.rerun()


# =============================================================================
# FRAGMENT: CLIENT NOTES
# =============================================================================

@st.fragment
def client_notes_fragment(state: DashboardState, clients: Sequence[ClientMetrics], fragment_key: str = "notes"):
    """Free-text strategic note per client."""
    st.subheader("📝 Client Notes")

    if not clients:
        st.caption("No clients to annotate")
        return

    names = {metrics.id: metrics.name for metrics in clients}
    client_id = st.selectbox(
        "Client",
        options=list(names),
        format_func=lambda cid: names[cid],
        key=f"{fragment_key}_client",
    )

    note = st.text_area(
        "Note",
        value=state.notes.get(client_id),
        key=f"{fragment_key}_text_{client_id}",
        placeholder="Next steps, contacts, opportunities...",
        height=120,
    )

    if st.button("💾 Save note", key=f"{fragment_key}_save"):
        try:
            state.save_note(client_id, note)
        except StorageError as e:
            logger.error(f"Failed to save note for client {client_id}: {e}")
            st.error(f"❌ Could not save note: {e}")
            return
        st.toast(f"✅ Note saved for {names[client_id]}")
