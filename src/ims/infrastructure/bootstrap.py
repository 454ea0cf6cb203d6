"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from ims.domain.service.stock_availability_checker import StockAvailabilityChecker
from ims.infrastructure.config import Settings, load_settings
from ims.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)


def inventory_repository(settings: Settings | None = None) -> JsonInventoryRepository:
    settings = settings or load_settings()
    return JsonInventoryRepository(settings.inventory_path)


def stock_availability_checker(settings: Settings | None = None) -> StockAvailabilityChecker:
    return StockAvailabilityChecker(inventory_repository(settings))
