"""
Discount service - nth-order reward codes.

Every order whose sequence number is a multiple of ``DiscountConfig.nth_order``
earns a single-use percentage-off code. Codes are bearer tokens: whoever
presents the string may redeem it once.
"""

import logging
import uuid
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import List, Optional

from storefront.database import DataStore
from storefront.models import DiscountCode
from storefront.services.validation import ValidationResult
from storefront.utils.number_format import money_to_float, round_money, to_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscountApplication:
    original_amount: Decimal
    discount: Decimal
    final_amount: Decimal
    discount_percentage: Decimal

    def to_dict(self):
        return {
            'originalAmount': money_to_float(self.original_amount),
            'discount': money_to_float(self.discount),
            'finalAmount': money_to_float(self.final_amount),
            'discountPercentage': float(self.discount_percentage),
        }


def create_unique_code(prefix: str = 'DISC') -> str:
    """Build a code like ``DISC-1A2B3C4D`` from a random uuid."""
    return f"{prefix}-{uuid.uuid4().hex[:8].upper()}"


def generate_code(store: DataStore, order_number: int) -> Optional[DiscountCode]:
    """
    Issue a reward code if ``order_number`` is a multiple of the configured interval.

    Returns None when the order does not qualify.
    """
    config = store.config
    if order_number <= 0 or order_number % config.nth_order != 0:
        return None

    with store.lock:
        discount = store.create_discount_code(DiscountCode(
            code=create_unique_code(config.code_prefix),
            discount_percentage=config.discount_percentage,
            generated_at=store.clock(),
            order_number=order_number,
        ))

    logger.info(f"[discount] issued {discount.code} ({discount.discount_percentage}%) for order #{order_number}")
    return discount


def validate_code(store: DataStore, code: Optional[str]) -> ValidationResult:
    """Check a code without consuming it."""
    if not code:
        return ValidationResult.fail('Discount code is required')

    discount = store.get_discount_code(code)
    if not discount:
        return ValidationResult.fail('Invalid discount code')

    if discount.used:
        return ValidationResult.fail(
            'Discount code has already been used',
            used_at=discount.used_at,
        )

    return ValidationResult.ok(
        discount_percentage=discount.discount_percentage,
        discount=discount,
    )


def apply_discount(amount, percentage) -> DiscountApplication:
    """
    Compute the discount and final amount for ``amount``.

    Both values are derived from the exact product and rounded half-up to
    cents independently.
    """
    amount = to_decimal(amount)
    percentage = to_decimal(percentage)
    discount = amount * percentage / Decimal('100')
    final_amount = amount - discount
    return DiscountApplication(
        original_amount=round_money(amount),
        discount=round_money(discount),
        final_amount=round_money(final_amount),
        discount_percentage=percentage,
    )


def mark_used(store: DataStore, code: str) -> None:
    """Consume a code. Unknown or already used codes are left untouched."""
    with store.lock:
        discount = store.get_discount_code(code)
        if not discount or discount.used:
            return
        discount.mark_used(store.clock())
    logger.info(f"[discount] redeemed {code}")


def list_codes(store: DataStore) -> List[DiscountCode]:
    """Copies of every code, taken under the store lock."""
    with store.lock:
        return [replace(code) for code in store.get_all_discount_codes()]
