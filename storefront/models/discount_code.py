"""Discount code and discount configuration models."""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from storefront.utils.number_format import to_decimal


@dataclass(frozen=True)
class DiscountConfig:
    """Static nth-order reward configuration."""

    nth_order: int = 3
    discount_percentage: Decimal = Decimal('10')
    code_prefix: str = 'DISC'

    def __post_init__(self):
        if isinstance(self.nth_order, bool) or not isinstance(self.nth_order, int) or self.nth_order <= 0:
            raise ValueError(f"nth_order must be a positive integer, got {self.nth_order!r}")
        percentage = to_decimal(self.discount_percentage)
        if not Decimal('0') <= percentage <= Decimal('100'):
            raise ValueError(f"discount_percentage must be between 0 and 100, got {self.discount_percentage!r}")
        object.__setattr__(self, 'discount_percentage', percentage)


@dataclass
class DiscountCode:
    """
    A reward code.

    Generated unused; ``used``/``used_at`` are set exactly once on redemption.
    ``order_number`` records which order count triggered generation and is
    informational only: codes are bearer tokens.
    """

    code: str
    discount_percentage: Decimal
    generated_at: datetime
    order_number: int
    used: bool = False
    used_at: Optional[datetime] = None

    def mark_used(self, when: datetime) -> None:
        self.used = True
        self.used_at = when

    def to_dict(self):
        return {
            'code': self.code,
            'discountPercentage': float(self.discount_percentage),
            'generatedAt': self.generated_at.isoformat(),
            'used': self.used,
            'usedAt': self.used_at.isoformat() if self.used_at else None,
            'orderNumber': self.order_number,
        }
