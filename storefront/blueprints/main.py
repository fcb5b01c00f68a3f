"""Main blueprint - health check."""
from flask import Blueprint, jsonify

from storefront.database import get_store

main_bp = Blueprint('main', __name__)


@main_bp.route('/health')
def health():
    store = get_store()
    with store.lock:
        products = len(store.products)
        orders = store.order_count
    return jsonify({
        'success': True,
        'status': 'ok',
        'products': products,
        'orders': orders,
    })
