# utils/seller_performance/models.py
"""
Record types for the seller performance module.

SellerRevenue is a fixed record of the four sellers' amounts; it is used both
for ledger actuals and for target-table goals.
"""

from dataclasses import dataclass, fields, replace
from typing import Dict, Mapping, Optional

from ..common import to_amount
from .constants import SELLERS, MONTHLY_TARGETS, MONTHS, SELLER_LABELS, NO_PERFORMER_LABEL


def check_seller(seller: str) -> str:
    if seller not in SELLERS:
        raise ValueError(f"Unknown seller: {seller!r}")
    return seller


def check_month(month: str) -> str:
    if month not in MONTHS:
        raise ValueError(f"Unknown month: {month!r}")
    return month


@dataclass(frozen=True)
class SellerRevenue:
    """Revenue (actual or goal) for the four sellers in one month."""
    syllas: float = 0.0
    vendedora1: float = 0.0
    vendedora2: float = 0.0
    vendedora3: float = 0.0

    def total(self) -> float:
        return self.syllas + self.vendedora1 + self.vendedora2 + self.vendedora3

    def get(self, seller: str) -> float:
        return getattr(self, check_seller(seller))

    def with_amount(self, seller: str, amount: float) -> "SellerRevenue":
        return replace(self, **{check_seller(seller): to_amount(amount)})

    def to_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> "SellerRevenue":
        """Build from a (possibly partial) mapping; missing or bad fields are 0."""
        data = data if isinstance(data, Mapping) else {}
        return cls(**{seller: to_amount(data.get(seller)) for seller in SELLERS})


@dataclass(frozen=True)
class MonthlyTarget:
    month: str
    goal: SellerRevenue


TARGET_TABLE: Dict[str, MonthlyTarget] = {
    month: MonthlyTarget(month=month, goal=SellerRevenue.from_dict(MONTHLY_TARGETS[month]))
    for month in MONTHS
}


@dataclass(frozen=True)
class QuarterRollup:
    name: str
    months: tuple
    target: float
    actual: float
    attainment: float


@dataclass(frozen=True)
class MonthStats:
    month: str
    actual: float
    target: float
    attainment: float


@dataclass(frozen=True)
class TopPerformer:
    """Best seller of a month; seller is None when nobody has sold yet."""
    seller: Optional[str]
    label: str
    value: float

    @property
    def is_pending(self) -> bool:
        return self.seller is None


NO_PERFORMER = TopPerformer(seller=None, label=NO_PERFORMER_LABEL, value=0.0)


def performer_for(seller: str, value: float) -> TopPerformer:
    return TopPerformer(seller=seller, label=SELLER_LABELS[seller], value=value)
