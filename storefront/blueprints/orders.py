"""Orders blueprint - order lookups."""
from flask import Blueprint, jsonify

from storefront.database import get_store
from storefront.services import order_service

orders_bp = Blueprint('orders', __name__, url_prefix='/api/orders')


@orders_bp.route('/user/<user_id>', methods=['GET'])
def user_orders(user_id):
    orders = order_service.get_user_orders(get_store(), user_id)
    return jsonify({'success': True, 'orders': [o.to_dict() for o in orders]})


@orders_bp.route('/<order_id>', methods=['GET'])
def get_order(order_id):
    """Get order by id. 404 if absent."""
    order = order_service.get_order(get_store(), order_id)
    return jsonify({'success': True, 'order': order.to_dict()})
