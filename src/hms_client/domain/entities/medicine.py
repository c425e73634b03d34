from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Medicine:
    id: str
    name: str
    category: str
    stock: int
    price: float
    expiry_date: datetime | None = None
    supplier: str | None = None


@dataclass(frozen=True, slots=True)
class InventoryAlerts:
    low_stock: list[Medicine] = field(default_factory=list)
    expiring_soon: list[Medicine] = field(default_factory=list)
    expired: list[Medicine] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.low_stock) + len(self.expiring_soon) + len(self.expired)
