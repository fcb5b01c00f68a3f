"""Request logging and CORS hooks."""
import time

from flask import g, request


def init_middleware(app):
    """Register before/after request hooks on the app."""

    @app.before_request
    def start_request_timer():
        g._request_started_at = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.pop('_request_started_at', None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        app.logger.info(f"{request.method} {request.full_path.rstrip('?')} -> {response.status_code} ({elapsed_ms:.1f}ms)")
        return response

    @app.after_request
    def add_cors_headers(response):
        """Allow the browser client to call the API from another origin."""
        origins = app.config.get('CORS_ORIGINS', '*')
        if origins:
            response.headers['Access-Control-Allow-Origin'] = origins
            response.headers['Access-Control-Allow-Methods'] = 'GET, POST, PUT, DELETE, OPTIONS'
            response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
        return response
