"""Cart service - per-user cart operations checked against catalog stock."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List

from storefront.database import DataStore
from storefront.exceptions import InvalidArgumentError, NotFoundError, InsufficientStockError
from storefront.models import CartItem
from storefront.services.validation import ValidationResult
from storefront.utils.number_format import money_to_float, round_money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartView:
    """Cart snapshot with totals, detached from the stored cart."""

    user_id: str
    items: List[CartItem]
    total_items: int
    subtotal: Decimal

    def to_dict(self):
        return {
            'userId': self.user_id,
            'items': [item.to_dict() for item in self.items],
            'totalItems': self.total_items,
            'subtotal': money_to_float(self.subtotal),
        }


def _require_ids(user_id, product_id) -> None:
    if not user_id or not product_id:
        raise InvalidArgumentError('userId and productId are required')


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def add_item(store: DataStore, user_id: str, product_id: str, quantity: int) -> CartView:
    """
    Add ``quantity`` units of a product to the user's cart.

    Merges into an existing line for the same product. The merged quantity
    must fit in current stock; on any failure the cart is left unchanged.
    """
    _require_ids(user_id, product_id)
    if not _is_int(quantity) or quantity <= 0:
        raise InvalidArgumentError('Quantity must be a positive integer')

    with store.lock:
        product = store.get_product(product_id)
        if not product:
            raise NotFoundError('Product not found', status_code=400)

        cart = store.get_cart(user_id)
        item = cart.find_item(product_id)
        new_qty = (item.quantity if item else 0) + quantity
        if new_qty > product.stock:
            raise InsufficientStockError(product.stock)

        if item:
            item.quantity = new_qty
        else:
            cart.items.append(CartItem(
                product_id=product.id,
                name=product.name,
                price=product.price,
                quantity=quantity,
            ))

        logger.debug(f"[cart] user={user_id} add product={product_id} qty={quantity} -> {new_qty}")
        return get_cart(store, user_id)


def update_item(store: DataStore, user_id: str, product_id: str, quantity: int) -> CartView:
    """Set a line's quantity. Zero removes the line."""
    _require_ids(user_id, product_id)
    if not _is_int(quantity) or quantity < 0:
        raise InvalidArgumentError('Quantity must be a non-negative integer')

    with store.lock:
        cart = store.get_cart(user_id)
        item = cart.find_item(product_id)
        if not item:
            raise NotFoundError('Product not found in cart', status_code=400)

        if quantity == 0:
            cart.remove_item(product_id)
        else:
            product = store.get_product(product_id)
            available = product.stock if product else 0
            if quantity > available:
                raise InsufficientStockError(available)
            item.quantity = quantity

        logger.debug(f"[cart] user={user_id} set product={product_id} qty={quantity}")
        return get_cart(store, user_id)


def remove_item(store: DataStore, user_id: str, product_id: str) -> CartView:
    return update_item(store, user_id, product_id, 0)


def get_cart(store: DataStore, user_id: str) -> CartView:
    """Get the user's cart with totals. Subtotal is rounded only here."""
    with store.lock:
        cart = store.get_cart(user_id)
        return CartView(
            user_id=cart.user_id,
            items=[item.copy() for item in cart.items],
            total_items=cart.total_items,
            subtotal=round_money(cart.subtotal),
        )


def clear_cart(store: DataStore, user_id: str) -> None:
    with store.lock:
        store.clear_cart(user_id)


def validate_cart(store: DataStore, user_id: str) -> ValidationResult:
    """
    Re-check a cart against live stock before checkout.

    Stock may have moved since the items were added, so every line is
    compared with the product's current stock. Returns an invalid result
    rather than raising.
    """
    cart = store.get_cart(user_id)
    if not cart.items:
        return ValidationResult.fail('Cart is empty')

    for item in cart.items:
        product = store.get_product(item.product_id)
        available = product.stock if product else 0
        if item.quantity > available:
            return ValidationResult.fail(
                f'Insufficient stock for {item.name}. '
                f'Only {available} items left in stock, {item.quantity} requested.',
                product_id=item.product_id,
                available=available,
            )

    return ValidationResult.ok(cart=get_cart(store, user_id))
