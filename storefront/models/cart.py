"""Cart and cart line models."""
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import List, Optional

from storefront.utils.number_format import money_to_float


@dataclass
class CartItem:
    """
    A cart line.

    ``name`` and ``price`` are snapshots taken when the product was first
    added; later catalog changes do not touch existing lines.
    """

    product_id: str
    name: str
    price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity

    def copy(self) -> 'CartItem':
        return replace(self)

    def to_dict(self):
        return {
            'productId': self.product_id,
            'name': self.name,
            'price': money_to_float(self.price),
            'quantity': self.quantity,
        }


@dataclass
class Cart:
    """Per-user cart. Items are unique by product id and keep insertion order."""

    user_id: str
    items: List[CartItem] = field(default_factory=list)

    def find_item(self, product_id: str) -> Optional[CartItem]:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def remove_item(self, product_id: str) -> None:
        self.items = [item for item in self.items if item.product_id != product_id]

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def subtotal(self) -> Decimal:
        return sum((item.line_total for item in self.items), Decimal('0'))
