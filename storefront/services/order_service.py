"""
Order service - checkout orchestration and order queries.

Checkout validates everything before touching any store, then commits the
order, consumes the discount code, decrements stock, clears the cart and
finally checks whether the new order count earns a reward code.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

from storefront.database import DataStore
from storefront.exceptions import CheckoutError, InvalidArgumentError, NotFoundError
from storefront.models import DiscountCode, Order, OrderLine, ORDER_STATUS_COMPLETED
from storefront.services import cart_service, discount_service

logger = logging.getLogger(__name__)

ORDER_PLACED_MESSAGE = 'Order placed successfully'


@dataclass(frozen=True)
class CheckoutResult:
    order: Order
    message: str
    new_discount_code: Optional[DiscountCode] = None

    def reward_dict(self):
        if not self.new_discount_code:
            return None
        percentage = self.new_discount_code.discount_percentage
        return {
            'code': self.new_discount_code.code,
            'discountPercentage': float(percentage),
            'message': (
                f"Congratulations! You've earned a {percentage.normalize():f}% "
                f"discount code for your next purchase!"
            ),
        }

    def to_dict(self):
        return {
            'order': self.order.to_dict(),
            'message': self.message,
            'newDiscountCode': self.reward_dict(),
        }


def checkout(store: DataStore, user_id: str, discount_code: Optional[str] = None) -> CheckoutResult:
    """
    Turn the user's cart into an order.

    Raises:
        InvalidArgumentError: if ``user_id`` is missing.
        CheckoutError: if the cart or the discount code fails validation.
            Nothing has been mutated in that case.
    """
    if not user_id:
        raise InvalidArgumentError('userId is required')

    with store.lock:
        # 1. Cart against live stock
        cart_validation = cart_service.validate_cart(store, user_id)
        if not cart_validation.is_valid:
            raise CheckoutError(cart_validation.message)
        cart = cart_validation.data['cart']

        # 2. Optional discount code
        applied = None
        if discount_code:
            code_validation = discount_service.validate_code(store, discount_code)
            if not code_validation.is_valid:
                used_at = code_validation.data.get('used_at')
                payload = {'usedAt': used_at.isoformat()} if used_at else None
                raise CheckoutError(code_validation.message, payload=payload)
            applied = discount_service.apply_discount(
                cart.subtotal,
                code_validation.data['discount_percentage'],
            )

        # 3. Build the order
        order = Order(
            id=store.id_factory(),
            user_id=user_id,
            items=tuple(OrderLine.from_cart_item(item) for item in cart.items),
            subtotal=cart.subtotal,
            discount=applied.discount if applied else Decimal('0.00'),
            final_amount=applied.final_amount if applied else cart.subtotal,
            discount_code=discount_code if applied else None,
            discount_percentage=applied.discount_percentage if applied else Decimal('0'),
            created_at=store.clock(),
            status=ORDER_STATUS_COMPLETED,
        )

        # 4. Commit point
        store.create_order(order)

        # 5-7. Side effects that follow the commit
        if applied:
            discount_service.mark_used(store, discount_code)
        _update_product_stock(store, order.items)
        cart_service.clear_cart(store, user_id)

        # 8. Reward check against the post-increment counter
        order_number = store.order_count
        new_code = discount_service.generate_code(store, order_number)

    logger.info(
        f"[checkout] order={order.id} user={user_id} #{order_number} "
        f"subtotal={order.subtotal} discount={order.discount} final={order.final_amount}"
    )
    return CheckoutResult(order=order, message=ORDER_PLACED_MESSAGE, new_discount_code=new_code)


def _update_product_stock(store: DataStore, items: Tuple[OrderLine, ...]) -> None:
    for item in items:
        product = store.get_product(item.product_id)
        if product:
            product.decrement_stock(item.quantity)


def get_order(store: DataStore, order_id: str) -> Order:
    with store.lock:
        order = store.get_order(order_id)
    if not order:
        raise NotFoundError('Order not found')
    return order


def get_user_orders(store: DataStore, user_id: str) -> List[Order]:
    with store.lock:
        return [order for order in store.get_all_orders() if order.user_id == user_id]


def get_all_orders(store: DataStore) -> List[Order]:
    with store.lock:
        return store.get_all_orders()
