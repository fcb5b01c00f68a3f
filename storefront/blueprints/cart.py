"""Cart blueprint - per-user cart API."""
from flask import Blueprint, jsonify, current_app

from storefront.database import get_store
from storefront.exceptions import InvalidArgumentError
from storefront.services import cart_service
from storefront.utils.request_helpers import get_json_payload, coerce_id, coerce_quantity

cart_bp = Blueprint('cart', __name__, url_prefix='/api/cart')


def _read_line_payload(require_quantity: bool):
    payload = get_json_payload()
    user_id = coerce_id(payload.get('userId'))
    product_id = coerce_id(payload.get('productId'))
    if not user_id or not product_id:
        raise InvalidArgumentError('userId and productId are required')
    if not require_quantity:
        return user_id, product_id, None
    if payload.get('quantity') is None:
        raise InvalidArgumentError('userId, productId and quantity are required')
    return user_id, product_id, coerce_quantity(payload['quantity'])


@cart_bp.route('/<user_id>', methods=['GET'])
def get_cart(user_id):
    cart = cart_service.get_cart(get_store(), user_id)
    return jsonify({'success': True, 'cart': cart.to_dict()})


@cart_bp.route('/add', methods=['POST'])
def cart_add():
    """Add item to cart. Body: {userId, productId, quantity}"""
    user_id, product_id, quantity = _read_line_payload(require_quantity=True)
    cart = cart_service.add_item(get_store(), user_id, product_id, quantity)
    current_app.logger.info(f"[cart_add] user={user_id} product={product_id} qty={quantity}")
    return jsonify({'success': True, 'message': 'Item added successfully', 'cart': cart.to_dict()})


@cart_bp.route('/update', methods=['PUT'])
def cart_update():
    """Set item quantity. Body: {userId, productId, quantity}; 0 removes the line."""
    user_id, product_id, quantity = _read_line_payload(require_quantity=True)
    cart = cart_service.update_item(get_store(), user_id, product_id, quantity)
    current_app.logger.info(f"[cart_update] user={user_id} product={product_id} qty={quantity}")
    return jsonify({'success': True, 'message': 'Cart updated successfully', 'cart': cart.to_dict()})


@cart_bp.route('/remove', methods=['DELETE'])
def cart_remove():
    """Remove item from cart. Body: {userId, productId}"""
    user_id, product_id, _ = _read_line_payload(require_quantity=False)
    cart = cart_service.remove_item(get_store(), user_id, product_id)
    current_app.logger.info(f"[cart_remove] user={user_id} product={product_id}")
    return jsonify({'success': True, 'message': 'Item removed successfully', 'cart': cart.to_dict()})
