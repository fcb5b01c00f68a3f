"""
Flask CLI commands for the storefront.

Commands:
- flask list-products: Print the catalog
- flask simulate-checkouts: Run one-item checkouts and show reward codes
"""

import click

from storefront.database import get_store
from storefront.exceptions import ShopError
from storefront.services import cart_service, catalog_service, order_service


def init_cli_commands(app):
    """Register CLI commands with Flask app."""

    @app.cli.command('list-products')
    def list_products():
        """Print the catalog with price and stock."""
        for product in catalog_service.list_products(get_store()):
            click.echo(f'{product.id:>4}  {product.name:<14} {product.price:>10}  stock={product.stock}')

    @app.cli.command('simulate-checkouts')
    @click.option('--count', default=3, show_default=True, type=click.IntRange(min=1), help='Number of checkouts')
    @click.option('--product-id', default='2', show_default=True, help='Product bought by each simulated user')
    def simulate_checkouts(count, product_id):
        """Place COUNT one-item orders for distinct users and report reward codes."""
        store = get_store()
        for i in range(1, count + 1):
            user_id = f'sim-user-{i}'
            try:
                cart_service.add_item(store, user_id, product_id, 1)
                result = order_service.checkout(store, user_id)
            except ShopError as e:
                click.echo(click.style(f'Checkout {i} failed: {e.message}', fg='red'))
                return

            line = f'#{store.order_count} order={result.order.id} total={result.order.final_amount}'
            if result.new_discount_code:
                line += click.style(f'  reward={result.new_discount_code.code}', fg='green', bold=True)
            click.echo(line)
