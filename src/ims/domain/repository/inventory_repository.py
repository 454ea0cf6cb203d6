"""Abstract repository for InventoryRecord."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.inventory import InventoryRecord


class InventoryRepository(ABC):
    """Storage contract for inventory records.

    Implementations must raise ``StorageUnavailableError`` when the
    underlying store cannot be read; they must never fall back to a
    default answer.
    """

    @abstractmethod
    def exists_by_sku_code_and_quantity_at_least(
        self, sku_code: str, quantity: int
    ) -> bool:
        """Return True if a record for ``sku_code`` holds >= ``quantity``."""

    @abstractmethod
    def get_by_sku_code(self, sku_code: str) -> InventoryRecord | None:
        """Return the record for a SKU, or None."""

    @abstractmethod
    def list_all(self) -> list[InventoryRecord]:
        """Return every inventory record."""

    @abstractmethod
    def save(self, record: InventoryRecord) -> None:
        """Insert a record, or replace the one with the same SKU."""
