"""Checkout blueprint."""
from flask import Blueprint, jsonify

from storefront.blueprints.metrics import record_checkout
from storefront.database import get_store
from storefront.exceptions import InvalidArgumentError
from storefront.services import order_service
from storefront.utils.request_helpers import get_json_payload, coerce_id

checkout_bp = Blueprint('checkout', __name__, url_prefix='/api/checkout')


@checkout_bp.route('', methods=['POST'])
def checkout():
    """Place an order from the user's cart. Body: {userId, discountCode?}"""
    payload = get_json_payload()
    user_id = coerce_id(payload.get('userId'))
    if not user_id:
        raise InvalidArgumentError('userId is required')

    discount_code = payload.get('discountCode')
    if discount_code is not None and not isinstance(discount_code, str):
        raise InvalidArgumentError('discountCode must be a string')
    discount_code = (discount_code or '').strip() or None

    result = order_service.checkout(get_store(), user_id, discount_code)
    record_checkout(result)

    body = {'success': True}
    body.update(result.to_dict())
    return jsonify(body)
