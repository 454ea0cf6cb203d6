"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from ims.application.dto import InventoryLineDTO
from ims.domain.repository.inventory_repository import InventoryRepository


class ShowInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self) -> list[InventoryLineDTO]:
        records = sorted(self._inventory_repo.list_all(), key=lambda r: r.sku_code)
        return [
            InventoryLineDTO(sku_code=record.sku_code, quantity=record.quantity)
            for record in records
        ]
