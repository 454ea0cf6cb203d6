"""Domain service: Stock Availability.

Answers a point-in-time question: is there enough stock of a SKU to
cover a requested quantity?  The answer comes from a single
existence/threshold query against the repository; nothing is filtered
or aggregated in process.
"""

from __future__ import annotations

import logging

from ims.domain.model.value_objects import Quantity, SkuCode
from ims.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class StockAvailabilityChecker:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def is_in_stock(self, sku_code: str, quantity: int) -> bool:
        """Return True if ``sku_code`` has at least ``quantity`` on hand.

        Equality counts as in stock.  A SKU with no record is out of
        stock.  Raises ValidationError for a blank SKU or a negative
        quantity, before the store is touched.  Storage errors propagate
        unchanged.
        """
        sku = SkuCode(sku_code)
        qty = Quantity(quantity)

        in_stock = self._inventory_repo.exists_by_sku_code_and_quantity_at_least(
            sku.value, qty.value
        )
        logger.debug("Stock check sku=%s quantity=%d -> %s", sku, qty.value, in_stock)
        return in_stock
