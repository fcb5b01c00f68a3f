"""Configuration module for Flask application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_bool(name, default):
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


class Config:
    """Base configuration class."""

    # Flask
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('FLASK_DEBUG', '1') == '1'
    ENV = os.getenv('FLASK_ENV', 'development')

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Error tracking (production only)
    SENTRY_DSN = os.getenv('SENTRY_DSN')

    # Browser client on another origin; empty disables the CORS headers
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    # Catalog
    SEED_CATALOG = _env_bool('SEED_CATALOG', 'true')

    # Loyalty rewards: every NTH_ORDER-th order earns a DISCOUNT_PERCENTAGE% code
    NTH_ORDER = int(os.getenv('NTH_ORDER', '3'))
    DISCOUNT_PERCENTAGE = os.getenv('DISCOUNT_PERCENTAGE', '10')
    DISCOUNT_CODE_PREFIX = os.getenv('DISCOUNT_CODE_PREFIX', 'DISC')


class TestingConfig(Config):
    """Configuration used by the test suite."""

    TESTING = True
    DEBUG = False
    ENV = 'testing'
    LOG_LEVEL = 'WARNING'
    SEED_CATALOG = True
    NTH_ORDER = 3
    DISCOUNT_PERCENTAGE = '10'
    DISCOUNT_CODE_PREFIX = 'DISC'
