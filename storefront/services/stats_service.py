"""Statistics service - aggregates computed on demand from the ledger and registry."""

from decimal import Decimal
from typing import Any, Dict

from storefront.database import DataStore
from storefront.utils.number_format import money_to_float


def get_stats(store: DataStore) -> Dict[str, Any]:
    """
    Get store-wide statistics.

    Returns dict with:
    - totalOrders: number of committed orders
    - totalItemsPurchased: sum of line quantities over all orders
    - totalRevenue: sum of final amounts
    - totalDiscountGiven: sum of discounts
    - discountCodes: {total, used, unused}
    """
    with store.lock:
        orders = store.get_all_orders()
        codes = store.get_all_discount_codes()
        used_codes = sum(1 for code in codes if code.used)

    total_items = sum(order.total_quantity for order in orders)
    total_revenue = sum((order.final_amount for order in orders), Decimal('0'))
    total_discount = sum((order.discount for order in orders), Decimal('0'))

    return {
        'totalOrders': len(orders),
        'totalItemsPurchased': total_items,
        'totalRevenue': money_to_float(total_revenue),
        'totalDiscountGiven': money_to_float(total_discount),
        'discountCodes': {
            'total': len(codes),
            'used': used_codes,
            'unused': len(codes) - used_codes,
        },
    }
