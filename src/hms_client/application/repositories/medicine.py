from __future__ import annotations

from typing import Protocol

from hms_client.domain.entities.medicine import InventoryAlerts


class MedicineReader(Protocol):
    async def alerts(self) -> InventoryAlerts: ...
