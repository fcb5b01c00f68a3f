"""Order model."""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple

from storefront.models.cart import CartItem
from storefront.utils.number_format import money_to_float

ORDER_STATUS_COMPLETED = 'completed'


@dataclass(frozen=True)
class OrderLine:
    """A cart line frozen at commit time."""

    product_id: str
    name: str
    price: Decimal
    quantity: int

    @classmethod
    def from_cart_item(cls, item: CartItem) -> 'OrderLine':
        return cls(
            product_id=item.product_id,
            name=item.name,
            price=item.price,
            quantity=item.quantity,
        )

    def to_dict(self):
        return {
            'productId': self.product_id,
            'name': self.name,
            'price': money_to_float(self.price),
            'quantity': self.quantity,
        }


@dataclass(frozen=True)
class Order:
    """Committed order. Immutable once appended to the ledger."""

    id: str
    user_id: str
    items: Tuple[OrderLine, ...]
    subtotal: Decimal
    discount: Decimal
    final_amount: Decimal
    discount_code: Optional[str]
    discount_percentage: Decimal
    created_at: datetime
    status: str = ORDER_STATUS_COMPLETED

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'items': [item.to_dict() for item in self.items],
            'subtotal': money_to_float(self.subtotal),
            'discount': money_to_float(self.discount),
            'finalAmount': money_to_float(self.final_amount),
            'discountCode': self.discount_code,
            'discountPercentage': float(self.discount_percentage),
            'createdAt': self.created_at.isoformat(),
            'status': self.status,
        }
