"""
Admin blueprint - reward code management and store statistics.

No authentication: the demo treats these endpoints as an operator console.
"""
from flask import Blueprint, jsonify, current_app

from storefront.blueprints.metrics import discount_codes_issued_total
from storefront.database import get_store
from storefront.exceptions import InvalidArgumentError
from storefront.services import discount_service, order_service, stats_service
from storefront.utils.request_helpers import get_json_payload, coerce_quantity

admin_bp = Blueprint('admin', __name__, url_prefix='/api/admin')


@admin_bp.route('/generate-discount', methods=['POST'])
def generate_discount():
    """
    Issue a code for an order number if it qualifies. Body: {orderNumber}

    Returns ``discountCode: null`` when the number is not a multiple of the
    configured interval.
    """
    payload = get_json_payload()
    order_number = coerce_quantity(payload.get('orderNumber'))
    if isinstance(order_number, bool) or not isinstance(order_number, int) or order_number <= 0:
        raise InvalidArgumentError('orderNumber must be a positive integer')

    store = get_store()
    discount = discount_service.generate_code(store, order_number)
    if not discount:
        return jsonify({
            'success': True,
            'message': f'Order #{order_number} does not qualify for a discount code '
                       f'(every {store.config.nth_order} orders)',
            'discountCode': None,
        })

    discount_codes_issued_total.labels(source='admin').inc()
    current_app.logger.info(f"[admin] generated {discount.code} for order #{order_number}")
    return jsonify({
        'success': True,
        'message': 'Discount code generated',
        'discountCode': discount.to_dict(),
    })


@admin_bp.route('/stats', methods=['GET'])
def stats():
    return jsonify({'success': True, 'stats': stats_service.get_stats(get_store())})


@admin_bp.route('/discount-codes', methods=['GET'])
def discount_codes():
    codes = discount_service.list_codes(get_store())
    return jsonify({'success': True, 'discountCodes': [c.to_dict() for c in codes]})


@admin_bp.route('/orders', methods=['GET'])
def all_orders():
    orders = order_service.get_all_orders(get_store())
    return jsonify({'success': True, 'orders': [o.to_dict() for o in orders]})
