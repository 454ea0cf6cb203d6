"""Application service: Set Inventory use case."""

from __future__ import annotations

import logging

from ims.domain.model.inventory import InventoryRecord
from ims.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class SetInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, sku_code: str, quantity: int) -> None:
        """Set the on-hand quantity for a SKU, creating the record if needed."""
        record = InventoryRecord(sku_code=sku_code, quantity=quantity)
        existing = self._inventory_repo.get_by_sku_code(sku_code)
        self._inventory_repo.save(record)

        if existing is None:
            logger.info("Created inventory record %s with quantity %d", sku_code, quantity)
        else:
            logger.info(
                "Updated inventory record %s: %d -> %d",
                sku_code, existing.quantity, quantity,
            )
