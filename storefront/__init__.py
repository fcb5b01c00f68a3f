"""Flask application factory."""
import logging
import os

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from storefront.database import init_store


def create_app(config_object='config.Config'):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Sentry error tracking in production
    if app.config.get('SENTRY_DSN') and app.config.get('ENV') == 'production':
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration

        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[FlaskIntegration()],
            traces_sample_rate=0.1,
            environment=app.config.get('ENV'),
            release=os.getenv('GIT_COMMIT', 'unknown')
        )

    # Prometheus metrics instrumentation
    from storefront.blueprints.metrics import setup_metrics_instrumentation
    setup_metrics_instrumentation(app)

    from storefront.middleware import init_middleware
    init_middleware(app)

    # In-memory stores
    init_store(app)

    # Error Handlers
    from storefront.exceptions import ShopError

    @app.errorhandler(ShopError)
    def handle_shop_error(error):
        """Handle custom application exceptions."""
        app.logger.warning(f"ShopError [{error.status_code}]: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'success': False, 'message': error.description or error.name}), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        app.logger.error(f"Unhandled Exception: {error}", exc_info=error)
        return jsonify({'success': False, 'message': 'Internal Server Error'}), 500

    # Register blueprints
    from storefront.blueprints.main import main_bp
    from storefront.blueprints.products import products_bp
    from storefront.blueprints.cart import cart_bp
    from storefront.blueprints.checkout import checkout_bp
    from storefront.blueprints.orders import orders_bp
    from storefront.blueprints.admin import admin_bp
    from storefront.blueprints.metrics import metrics_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(products_bp)
    app.register_blueprint(cart_bp)
    app.register_blueprint(checkout_bp)
    app.register_blueprint(orders_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(metrics_bp)

    from storefront.cli_commands import init_cli_commands
    init_cli_commands(app)

    return app
