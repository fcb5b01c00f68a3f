import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from storefront import create_app
from storefront.database import DataStore, get_store
from storefront.models import DiscountConfig


@pytest.fixture(scope='session')
def app():
    """Create application instance for testing."""
    app = create_app('config.TestingConfig')
    return app


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def store(app):
    """The application's store, reset to the seeded catalog for every test."""
    with app.app_context():
        store = get_store()
    store.reset(seed=True)
    yield store
    store.reset(seed=True)


class FakeClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self, start=None):
        self.current = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        now = self.current
        self.current += timedelta(seconds=1)
        return now


@pytest.fixture(scope='function')
def make_store():
    """Factory for standalone stores with a custom reward interval."""
    def _make(nth_order=3, discount_percentage='10', seed=True):
        store = DataStore(
            config=DiscountConfig(nth_order=nth_order, discount_percentage=Decimal(discount_percentage)),
            clock=FakeClock(),
        )
        if seed:
            store.seed_default_catalog()
        return store
    return _make
