"""Storefront domain models."""
from storefront.models.product import Product
from storefront.models.cart import Cart, CartItem
from storefront.models.discount_code import DiscountCode, DiscountConfig
from storefront.models.order import Order, OrderLine, ORDER_STATUS_COMPLETED

__all__ = [
    'Product',
    'Cart',
    'CartItem',
    'DiscountCode',
    'DiscountConfig',
    'Order',
    'OrderLine',
    'ORDER_STATUS_COMPLETED',
]
