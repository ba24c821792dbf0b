# utils/__init__.py
"""
Shared Utilities Package for the Sales BI Dashboard

This package contains common utilities shared across all pages:
- config: Configuration management (local + Streamlit Cloud)
- storage: Key-value blob storage (local files, S3 or memory)
- common: pt-BR amount parsing and BRL formatting
- session: Per-session dashboard state with write-through persistence

Page-specific modules:
- seller_performance: Monthly targets vs actuals for the sales team
- client_portfolio: Key client lifecycle (history + projections)
- growth_strategy: LLM-generated growth advisory

Usage:
    from utils.config import config
    from utils.storage import get_store
    from utils.session import get_dashboard_state

    # Or import commonly used items directly
    from utils import config, get_store, parse_currency_input
"""

# Configuration
from .config import (
    config,
    Config,
    IS_RUNNING_ON_CLOUD,
    APP_CONFIG,
)

# Storage
from .storage import (
    KeyValueStore,
    MemoryStore,
    LocalFileStore,
    S3BlobStore,
    StorageError,
    create_store,
    get_store,
    reset_store,
)

# Formatting
from .common import (
    to_amount,
    parse_currency_input,
    format_currency_input,
    format_brl,
    format_brl_abbr,
    format_percent,
)

__all__ = [
    # Config
    'config',
    'Config',
    'IS_RUNNING_ON_CLOUD',
    'APP_CONFIG',

    # Storage
    'KeyValueStore',
    'MemoryStore',
    'LocalFileStore',
    'S3BlobStore',
    'StorageError',
    'create_store',
    'get_store',
    'reset_store',

    # Formatting
    'to_amount',
    'parse_currency_input',
    'format_currency_input',
    'format_brl',
    'format_brl_abbr',
    'format_percent',
]

__version__ = '1.0.0'
