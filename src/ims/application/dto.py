"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StockCheckDTO:
    """Output: the answer to a single availability question."""

    sku_code: str
    quantity: int
    in_stock: bool


@dataclass(frozen=True)
class InventoryLineDTO:
    """Output: one SKU as displayed to the user."""

    sku_code: str
    quantity: int
