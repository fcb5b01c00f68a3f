"""
Unit tests for the statistics service.
"""

from storefront.services import cart_service, discount_service, order_service, stats_service


class TestStats:

    def test_empty_store(self, store):
        assert stats_service.get_stats(store) == {
            'totalOrders': 0,
            'totalItemsPurchased': 0,
            'totalRevenue': 0.0,
            'totalDiscountGiven': 0.0,
            'discountCodes': {'total': 0, 'used': 0, 'unused': 0},
        }

    def test_aggregates_orders_and_codes(self, make_store):
        store = make_store(nth_order=2)
        discount = discount_service.generate_code(store, 2)

        cart_service.add_item(store, 'u1', '1', 1)
        cart_service.add_item(store, 'u1', '2', 2)
        order_service.checkout(store, 'u1', discount.code)   # 1050 - 105

        cart_service.add_item(store, 'u2', '3', 1)
        order_service.checkout(store, 'u2')                   # 75, earns a code

        stats = stats_service.get_stats(store)
        assert stats['totalOrders'] == 2
        assert stats['totalItemsPurchased'] == 4
        assert stats['totalRevenue'] == 1020.0
        assert stats['totalDiscountGiven'] == 105.0
        assert stats['discountCodes'] == {'total': 2, 'used': 1, 'unused': 1}
