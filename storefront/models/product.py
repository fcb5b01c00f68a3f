"""Product model."""
from dataclasses import dataclass
from decimal import Decimal

from storefront.utils.number_format import money_to_float


@dataclass
class Product:
    """Catalog product. Price and stock are the live source of truth."""

    id: str
    name: str
    price: Decimal
    stock: int

    def __post_init__(self):
        if self.price < 0:
            raise ValueError(f"Product {self.id} price cannot be negative")
        if self.stock < 0:
            raise ValueError(f"Product {self.id} stock cannot be negative")

    def decrement_stock(self, quantity: int) -> None:
        if quantity > self.stock:
            raise ValueError(
                f"Cannot take {quantity} units of {self.id}, only {self.stock} on hand"
            )
        self.stock -= quantity

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'price': money_to_float(self.price),
            'stock': self.stock,
        }
