# utils/growth_strategy/__init__.py
"""
Growth Strategy Module

Narrative advisory generated by an external LLM from the dashboard's
current month, quarter trend and inactive clients.

Usage:
    from utils.growth_strategy import build_snapshot, get_advisory_service, request_advisory
"""

from .advisory import (
    AdvisoryError,
    AdvisoryConfigurationError,
    AdvisorySnapshot,
    AdvisoryResult,
    AdvisoryService,
    OpenAIAdvisoryService,
    performance_status,
    build_snapshot,
    build_prompt,
    get_advisory_service,
    request_advisory,
)

__all__ = [
    'AdvisoryError',
    'AdvisoryConfigurationError',
    'AdvisorySnapshot',
    'AdvisoryResult',
    'AdvisoryService',
    'OpenAIAdvisoryService',
    'performance_status',
    'build_snapshot',
    'build_prompt',
    'get_advisory_service',
    'request_advisory',
]

__version__ = '1.0.0'
