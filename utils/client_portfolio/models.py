# utils/client_portfolio/models.py
"""
Record types for the client portfolio module.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping

from .constants import CLIENT_REGISTRY_DATA, HEALTH_LABELS


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    AT_RISK = "at_risk"
    CHURNED = "churned"

    @property
    def label(self) -> str:
        return HEALTH_LABELS[self.value]


@dataclass(frozen=True)
class ClientProfile:
    """Key account with its sparse year -> revenue history (missing year = 0)."""
    id: str
    name: str
    sector: str
    history: Mapping[int, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'history', MappingProxyType(dict(self.history)))


@dataclass(frozen=True)
class ClientMetrics:
    """Derived (never stored) metrics for one client."""
    client: ClientProfile
    projections: Mapping[int, float]
    total_history: float
    total_projected: float
    estimated_ltv: float
    peak_revenue: float
    current_revenue: float
    health: HealthStatus
    growth_factor: float

    @property
    def id(self) -> str:
        return self.client.id

    @property
    def name(self) -> str:
        return self.client.name

    @property
    def sector(self) -> str:
        return self.client.sector


def build_registry(data: List[Dict] = None) -> List[ClientProfile]:
    data = CLIENT_REGISTRY_DATA if data is None else data
    return [
        ClientProfile(id=item['id'], name=item['name'], sector=item['sector'], history=item['history'])
        for item in data
    ]


CLIENT_REGISTRY: List[ClientProfile] = build_registry()
