"""Application service: Check Stock use case (query)."""

from __future__ import annotations

from ims.application.dto import StockCheckDTO
from ims.domain.service.stock_availability_checker import StockAvailabilityChecker


class CheckStockHandler:

    def __init__(self, checker: StockAvailabilityChecker) -> None:
        self._checker = checker

    def handle(self, sku_code: str, quantity: int) -> StockCheckDTO:
        in_stock = self._checker.is_in_stock(sku_code, quantity)
        return StockCheckDTO(sku_code=sku_code, quantity=quantity, in_stock=in_stock)
