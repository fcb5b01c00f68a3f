"""Catalog service - product lookups.

Lookups return copies taken under the store lock, so a reader never sees
stock from the middle of a checkout.
"""
from dataclasses import replace
from typing import List

from storefront.database import DataStore
from storefront.exceptions import NotFoundError
from storefront.models import Product


def list_products(store: DataStore) -> List[Product]:
    with store.lock:
        return [replace(product) for product in store.get_all_products()]


def get_product(store: DataStore, product_id: str) -> Product:
    with store.lock:
        product = store.get_product(product_id)
        if not product:
            raise NotFoundError('Product not found')
        return replace(product)
