"""Products blueprint - read-only catalog API."""
from flask import Blueprint, jsonify

from storefront.database import get_store
from storefront.services import catalog_service

products_bp = Blueprint('products', __name__, url_prefix='/api/products')


@products_bp.route('', methods=['GET'])
def list_products():
    """List all products with live price and stock."""
    products = catalog_service.list_products(get_store())
    return jsonify({'success': True, 'products': [p.to_dict() for p in products]})


@products_bp.route('/<product_id>', methods=['GET'])
def get_product(product_id):
    """Get a single product. 404 if absent."""
    product = catalog_service.get_product(get_store(), product_id)
    return jsonify({'success': True, 'product': product.to_dict()})
