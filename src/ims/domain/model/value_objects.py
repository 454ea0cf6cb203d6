"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.exceptions import ValidationError


@dataclass(frozen=True)
class SkuCode:
    """Stock-keeping unit identifier.

    The format is owned by whoever assigns SKUs; the only rule enforced
    here is that the code is a non-blank string.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"SKU code must be a string, got {type(self.value).__name__}"
            )
        if not self.value.strip():
            raise ValidationError("SKU code cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Quantity:
    """A non-negative integer count of units."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a quantity
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError(
                f"Quantity cannot be negative, got {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)
