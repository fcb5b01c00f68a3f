"""In-memory data store and its wiring into the Flask app."""
import threading
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Dict, List, Optional

from flask import current_app

from storefront.models import Cart, DiscountCode, DiscountConfig, Order, Product

DEFAULT_PRODUCTS = (
    ('1', 'Laptop', Decimal('1000.00'), 10),
    ('2', 'Mouse', Decimal('25.00'), 50),
    ('3', 'Keyboard', Decimal('75.00'), 30),
    ('4', 'Monitor', Decimal('300.00'), 15),
    ('5', 'Headphones', Decimal('150.00'), 25),
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _uuid4_str() -> str:
    return str(uuid.uuid4())


class DataStore:
    """
    Process-wide in-memory store.

    Holds the catalog, per-user carts, the order ledger with its counter and
    the discount registry. Services take the store as an argument and use
    ``lock`` around every multi-step mutation.
    """

    def __init__(
        self,
        config: Optional[DiscountConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self.config = config or DiscountConfig()
        self.clock = clock or _utcnow
        self.id_factory = id_factory or _uuid4_str
        self.lock = threading.RLock()

        self.products: Dict[str, Product] = {}
        self.carts: Dict[str, Cart] = {}
        self.orders: Dict[str, Order] = {}
        self.discount_codes: Dict[str, DiscountCode] = {}
        self.order_counter = 0

    # Catalog
    def add_product(self, product_id: str, name: str, price: Decimal, stock: int) -> Product:
        product = Product(id=product_id, name=name, price=price, stock=stock)
        self.products[product_id] = product
        return product

    def seed_default_catalog(self) -> None:
        for product_id, name, price, stock in DEFAULT_PRODUCTS:
            self.add_product(product_id, name, price, stock)

    def get_product(self, product_id: str) -> Optional[Product]:
        return self.products.get(product_id)

    def get_all_products(self) -> List[Product]:
        return list(self.products.values())

    # Carts
    def get_cart(self, user_id: str) -> Cart:
        """Get-or-insert: a user's first access creates an empty cart."""
        cart = self.carts.get(user_id)
        if cart is None:
            cart = Cart(user_id=user_id)
            self.carts[user_id] = cart
        return cart

    def clear_cart(self, user_id: str) -> None:
        self.carts[user_id] = Cart(user_id=user_id)

    # Orders
    def create_order(self, order: Order) -> Order:
        """Append to the ledger. This is the commit point: the counter advances here."""
        self.orders[order.id] = order
        self.order_counter += 1
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        return self.orders.get(order_id)

    def get_all_orders(self) -> List[Order]:
        return list(self.orders.values())

    @property
    def order_count(self) -> int:
        return self.order_counter

    # Discount codes
    def create_discount_code(self, discount: DiscountCode) -> DiscountCode:
        self.discount_codes[discount.code] = discount
        return discount

    def get_discount_code(self, code: str) -> Optional[DiscountCode]:
        return self.discount_codes.get(code)

    def get_all_discount_codes(self) -> List[DiscountCode]:
        return list(self.discount_codes.values())

    def reset(self, seed: bool = False) -> None:
        """Drop all state. Used between tests and by the CLI."""
        with self.lock:
            self.products.clear()
            self.carts.clear()
            self.orders.clear()
            self.discount_codes.clear()
            self.order_counter = 0
            if seed:
                self.seed_default_catalog()


def build_store(config: dict) -> DataStore:
    """Create a store from Flask config values."""
    discount_config = DiscountConfig(
        nth_order=int(config.get('NTH_ORDER', 3)),
        discount_percentage=Decimal(str(config.get('DISCOUNT_PERCENTAGE', '10'))),
        code_prefix=config.get('DISCOUNT_CODE_PREFIX', 'DISC'),
    )
    store = DataStore(config=discount_config)
    if config.get('SEED_CATALOG', True):
        store.seed_default_catalog()
    return store


def init_store(app):
    """Attach a fresh store to the application."""
    store = build_store(app.config)
    app.extensions['store'] = store
    app.logger.info(
        f"Store initialised: {len(store.products)} products, "
        f"reward every {store.config.nth_order} orders at {store.config.discount_percentage}%"
    )
    return store


def get_store() -> DataStore:
    """Get the store of the current application."""
    return current_app.extensions['store']
