"""
Prometheus metrics blueprint.

Exposes /metrics with HTTP request metrics and shop business counters.
This endpoint should be restricted to internal network or monitoring systems only.
"""
from flask import Blueprint, Response, request, g
from prometheus_client import Counter, Histogram, Gauge, generate_latest, CollectorRegistry, CONTENT_TYPE_LATEST
from prometheus_client import multiprocess, REGISTRY
import time
import os

metrics_bp = Blueprint('metrics', __name__)

# Check if running in multi-process mode (Gunicorn)
MULTIPROCESS_MODE = os.environ.get('PROMETHEUS_MULTIPROC_DIR') is not None

if MULTIPROCESS_MODE:
    registry = CollectorRegistry()
    multiprocess.MultiProcessCollector(registry)
else:
    registry = REGISTRY

_metric_registry = registry if not MULTIPROCESS_MODE else None

# HTTP Request Metrics
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'http_status'],
    registry=_metric_registry
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request latency in seconds',
    ['method', 'endpoint'],
    registry=_metric_registry,
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0)
)

http_requests_in_flight = Gauge(
    'http_requests_in_flight',
    'Number of HTTP requests currently being processed',
    registry=_metric_registry
)

# Business Metrics
orders_total = Counter(
    'shop_orders_total',
    'Orders committed through checkout',
    ['discounted'],
    registry=_metric_registry
)

discount_codes_issued_total = Counter(
    'shop_discount_codes_issued_total',
    'Reward discount codes issued',
    ['source'],
    registry=_metric_registry
)

discount_codes_redeemed_total = Counter(
    'shop_discount_codes_redeemed_total',
    'Discount codes consumed by checkout',
    registry=_metric_registry
)


def record_checkout(result) -> None:
    """Update business counters after a successful checkout."""
    discounted = result.order.discount_code is not None
    orders_total.labels(discounted=str(discounted).lower()).inc()
    if discounted:
        discount_codes_redeemed_total.inc()
    if result.new_discount_code:
        discount_codes_issued_total.labels(source='checkout').inc()


def setup_metrics_instrumentation(app):
    """
    Setup before_request and after_request hooks for automatic metrics collection.

    This should be called from app factory after app creation.
    """

    @app.before_request
    def before_request_metrics():
        g._prometheus_metrics_start_time = time.time()
        http_requests_in_flight.inc()

    @app.after_request
    def after_request_metrics(response):
        if hasattr(g, '_prometheus_metrics_start_time'):
            duration = time.time() - g._prometheus_metrics_start_time
            endpoint = request.endpoint or 'unknown'

            http_request_duration_seconds.labels(
                method=request.method,
                endpoint=endpoint
            ).observe(duration)

            http_requests_total.labels(
                method=request.method,
                endpoint=endpoint,
                http_status=response.status_code
            ).inc()

            http_requests_in_flight.dec()
        return response


@metrics_bp.route('/metrics')
def metrics():
    """
    Prometheus metrics endpoint.

    Not authenticated; restrict by network rules in production.
    """
    return Response(generate_latest(registry), mimetype=CONTENT_TYPE_LATEST)
