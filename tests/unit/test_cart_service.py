"""
Unit tests for the cart service.
"""

import pytest
from decimal import Decimal

from storefront.exceptions import InsufficientStockError, InvalidArgumentError, NotFoundError
from storefront.services import cart_service


class TestAddItem:
    """Tests for adding items to a cart."""

    def test_add_new_item(self, store):
        """Test adding a product creates a snapshot line."""
        cart = cart_service.add_item(store, 'u1', '1', 2)

        assert len(cart.items) == 1
        item = cart.items[0]
        assert item.product_id == '1'
        assert item.name == 'Laptop'
        assert item.price == Decimal('1000.00')
        assert item.quantity == 2
        assert cart.total_items == 2
        assert cart.subtotal == Decimal('2000.00')

    def test_adding_twice_merges_quantities(self, store):
        """Test that two adds equal one add with the summed quantity."""
        cart_service.add_item(store, 'u1', '2', 3)
        cart = cart_service.add_item(store, 'u1', '2', 4)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 7
        assert cart.subtotal == Decimal('175.00')

    def test_merge_over_stock_leaves_cart_unchanged(self, store):
        """Test that a merge exceeding stock fails and keeps the previous quantity."""
        cart_service.add_item(store, 'u1', '1', 8)

        with pytest.raises(InsufficientStockError) as exc_info:
            cart_service.add_item(store, 'u1', '1', 3)

        assert exc_info.value.available == 10
        assert 'Only 10 items left' in exc_info.value.message
        assert cart_service.get_cart(store, 'u1').items[0].quantity == 8

    def test_add_more_than_stock(self, store):
        with pytest.raises(InsufficientStockError):
            cart_service.add_item(store, 'u1', '4', 16)
        assert cart_service.get_cart(store, 'u1').items == []

    @pytest.mark.parametrize('quantity', [0, -1, 1.5, '2', None, True])
    def test_invalid_quantity(self, store, quantity):
        with pytest.raises(InvalidArgumentError):
            cart_service.add_item(store, 'u1', '1', quantity)

    def test_unknown_product(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            cart_service.add_item(store, 'u1', '999', 1)
        assert exc_info.value.message == 'Product not found'
        assert exc_info.value.status_code == 400

    def test_missing_ids(self, store):
        with pytest.raises(InvalidArgumentError):
            cart_service.add_item(store, '', '1', 1)
        with pytest.raises(InvalidArgumentError):
            cart_service.add_item(store, 'u1', None, 1)

    def test_snapshot_ignores_later_price_change(self, store):
        """Test that cart lines keep the price seen at add time."""
        cart_service.add_item(store, 'u1', '3', 1)
        store.get_product('3').price = Decimal('99.00')

        cart = cart_service.get_cart(store, 'u1')
        assert cart.items[0].price == Decimal('75.00')

    def test_carts_are_per_user(self, store):
        cart_service.add_item(store, 'u1', '1', 1)
        assert cart_service.get_cart(store, 'u2').items == []


class TestUpdateAndRemove:
    """Tests for updating and removing cart lines."""

    def test_update_quantity(self, store):
        cart_service.add_item(store, 'u1', '2', 1)
        cart = cart_service.update_item(store, 'u1', '2', 5)
        assert cart.items[0].quantity == 5
        assert cart.total_items == 5

    def test_update_zero_equals_remove(self, store):
        """Test that update to zero and remove both drop exactly one line."""
        for user_id in ('a', 'b'):
            cart_service.add_item(store, user_id, '1', 1)
            cart_service.add_item(store, user_id, '2', 2)

        by_update = cart_service.update_item(store, 'a', '1', 0)
        by_remove = cart_service.remove_item(store, 'b', '1')

        assert len(by_update.items) == len(by_remove.items) == 1
        assert by_update.items[0].product_id == by_remove.items[0].product_id == '2'

    def test_update_over_stock(self, store):
        cart_service.add_item(store, 'u1', '1', 1)
        with pytest.raises(InsufficientStockError):
            cart_service.update_item(store, 'u1', '1', 11)
        assert cart_service.get_cart(store, 'u1').items[0].quantity == 1

    def test_update_negative(self, store):
        cart_service.add_item(store, 'u1', '1', 1)
        with pytest.raises(InvalidArgumentError):
            cart_service.update_item(store, 'u1', '1', -1)

    @pytest.mark.parametrize('quantity', [2.5, '2', None, True])
    def test_update_non_integer_quantity(self, store, quantity):
        cart_service.add_item(store, 'u1', '1', 1)
        with pytest.raises(InvalidArgumentError) as exc_info:
            cart_service.update_item(store, 'u1', '1', quantity)
        assert exc_info.value.message == 'Quantity must be a non-negative integer'
        assert cart_service.get_cart(store, 'u1').items[0].quantity == 1

    def test_update_item_not_in_cart(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            cart_service.update_item(store, 'u1', '1', 1)
        assert exc_info.value.message == 'Product not found in cart'

    def test_remove_item_not_in_cart(self, store):
        with pytest.raises(NotFoundError):
            cart_service.remove_item(store, 'u1', '1')


class TestCartView:
    """Tests for cart totals and clearing."""

    def test_empty_cart_created_lazily(self, store):
        cart = cart_service.get_cart(store, 'new-user')
        assert cart.user_id == 'new-user'
        assert cart.items == []
        assert cart.total_items == 0
        assert cart.subtotal == Decimal('0.00')
        assert 'new-user' in store.carts

    def test_subtotal_rounded_at_reporting(self, store):
        store.add_product('p', 'Pen', Decimal('0.335'), 10)
        cart = cart_service.add_item(store, 'u1', 'p', 3)
        # 1.005 exact, rounded half-up once
        assert cart.subtotal == Decimal('1.01')

    def test_view_is_detached(self, store):
        cart = cart_service.add_item(store, 'u1', '1', 1)
        cart.items[0].quantity = 99
        assert cart_service.get_cart(store, 'u1').items[0].quantity == 1

    def test_to_dict(self, store):
        cart_service.add_item(store, 'u1', '2', 2)
        data = cart_service.get_cart(store, 'u1').to_dict()
        assert data == {
            'userId': 'u1',
            'items': [{'productId': '2', 'name': 'Mouse', 'price': 25.0, 'quantity': 2}],
            'totalItems': 2,
            'subtotal': 50.0,
        }

    def test_clear_cart(self, store):
        cart_service.add_item(store, 'u1', '1', 1)
        cart_service.clear_cart(store, 'u1')
        assert cart_service.get_cart(store, 'u1').items == []


class TestValidateCart:
    """Tests for the pre-checkout cart validation."""

    def test_empty_cart_invalid(self, store):
        result = cart_service.validate_cart(store, 'u1')
        assert result.is_valid is False
        assert result.message == 'Cart is empty'

    def test_valid_cart_returns_snapshot(self, store):
        cart_service.add_item(store, 'u1', '1', 2)
        result = cart_service.validate_cart(store, 'u1')
        assert result.is_valid is True
        assert result.data['cart'].subtotal == Decimal('2000.00')

    def test_stock_dropped_after_add(self, store):
        """Test that validation re-checks live stock."""
        cart_service.add_item(store, 'u1', '1', 5)
        store.get_product('1').stock = 3

        result = cart_service.validate_cart(store, 'u1')
        assert result.is_valid is False
        assert 'insufficient stock' in result.message.lower()
        assert 'Laptop' in result.message
        assert result.data['available'] == 3

    def test_product_removed_from_catalog(self, store):
        cart_service.add_item(store, 'u1', '5', 1)
        del store.products['5']

        result = cart_service.validate_cart(store, 'u1')
        assert result.is_valid is False
        assert 'insufficient stock' in result.message.lower()
