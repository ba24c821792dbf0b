# utils/growth_strategy/fragments.py
"""
Streamlit Fragment for the Growth Strategy advisory panel.

The generated text is cached in session state under the snapshot's
refresh key (month, status): it is requested again only when that key
changes or the user asks for a new version.
"""

import logging

import streamlit as st

from .advisory import AdvisoryService, AdvisorySnapshot, request_advisory
from .constants import STATUS_THEMES

logger = logging.getLogger(__name__)

ADVISORY_CACHE_KEY = "advisory_result"


def render_status_banner(snapshot: AdvisorySnapshot):
    theme = STATUS_THEMES[snapshot.status]
    st.markdown(
        f"""
        <div style="border-left: 6px solid {theme['color']}; padding: 12px 16px;
                    background: rgba(15,23,42,0.04); border-radius: 8px; margin-bottom: 12px;">
            <div style="font-size: 12px; font-weight: 700; color: {theme['color']}; letter-spacing: 0.08em;">
                {theme['icon']} {snapshot.status}
            </div>
            <div style="font-size: 20px; font-weight: 800;">{theme['headline']}</div>
            <div style="font-size: 13px; opacity: 0.8;">{theme['description']}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


@st.fragment
def advisory_fragment(service: AdvisoryService, snapshot: AdvisorySnapshot, fragment_key: str = "advisory"):
    """Advisory text for the snapshot, regenerated on refresh-key change or on demand."""
    col_header, col_button = st.columns([4, 1])
    with col_header:
        st.subheader("🧠 Growth Advisory")
    with col_button:
        regenerate = st.button("🔄 Regenerate", key=f"{fragment_key}_regenerate", use_container_width=True)

    cached = st.session_state.get(ADVISORY_CACHE_KEY)
    if regenerate or cached is None or cached[0] != snapshot.refresh_key:
        with st.spinner("Generating strategy..."):
            result = request_advisory(service, snapshot)
        st.session_state[ADVISORY_CACHE_KEY] = (snapshot.refresh_key, result)
    else:
        result = cached[1]

    if result.ok:
        with st.container(border=True):
            st.markdown(result.text)
        st.download_button(
            "⬇️ Download as Markdown",
            data=result.text,
            file_name=f"growth_advisory_{snapshot.month}.md",
            mime="text/markdown",
            key=f"{fragment_key}_download",
        )
    else:
        st.warning(result.text)
