"""InventoryRecord — stock on hand for a single SKU.

The storage layer owns these records.  The availability check only
ever reads them; ``set`` is the one use case that writes.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.value_objects import Quantity, SkuCode


@dataclass
class InventoryRecord:
    """One row of the inventory table.

    Invariants:
    - ``sku_code`` is a non-blank string and unique across the store
    - ``quantity`` is always >= 0
    """

    sku_code: str
    quantity: int

    def __post_init__(self) -> None:
        SkuCode(self.sku_code)
        Quantity(self.quantity)

    def has_at_least(self, quantity: int) -> bool:
        """True when on-hand stock covers ``quantity`` (inclusive)."""
        return self.quantity >= quantity
