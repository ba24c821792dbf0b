# utils/client_portfolio/filters.py
"""
Search Filter for the Client Portfolio

Renders the client/sector search box and applies it to the ranked list.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import streamlit as st

from .metrics import ClientPortfolio
from .models import ClientMetrics

logger = logging.getLogger(__name__)


@dataclass
class TextSearchResult:
    """Result from the text search filter."""
    query: str
    is_active: bool


def render_text_search_filter(
    label: str,
    key: str,
    placeholder: str = "Search...",
    help_text: str = None,
    container=None
) -> TextSearchResult:
    """
    Render a text search box.

    Args:
        label: Filter label
        key: Unique widget key
        placeholder: Placeholder text
        help_text: Optional help tooltip
        container: Optional Streamlit container

    Returns:
        TextSearchResult with query and is_active flag
    """
    ctx = container if container else st

    query = ctx.text_input(
        label=label,
        placeholder=placeholder,
        key=key,
        help=help_text,
        label_visibility="collapsed"
    )

    return TextSearchResult(
        query=query.strip(),
        is_active=bool(query.strip())
    )


def apply_text_search_filter(
    portfolio: ClientPortfolio,
    search_result: TextSearchResult,
    clients: Optional[Sequence[ClientMetrics]] = None
) -> List[ClientMetrics]:
    """Apply the search box to the portfolio (or to a given subset of it)."""
    visible = portfolio.filter(search_result.query, clients)
    if search_result.is_active:
        logger.debug(f"Client search '{search_result.query}' matched {len(visible)} clients")
    return visible
