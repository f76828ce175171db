"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

DEFAULT_ORIGINS = ['http://localhost:3000']
PRODUCTION_ORIGINS = ['https://number-guess-client.onrender.com', 'http://localhost:3000']


def _origins_from_env(default):
    """Parse the comma-separated CORS_ORIGINS override, if set."""
    raw = os.getenv('CORS_ORIGINS')
    if not raw:
        return list(default)
    return [origin.strip() for origin in raw.split(',') if origin.strip()]


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    APP_ENV = os.getenv('APP_ENV', os.getenv('NODE_ENV', 'development'))
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', 3001))

    # Cross-origin Settings
    CORS_ORIGINS = _origins_from_env(
        PRODUCTION_ORIGINS if APP_ENV == 'production' else DEFAULT_ORIGINS
    )
    CORS_METHODS = ['GET', 'POST']

    # Game Settings
    STRICT_NUMBERS = os.getenv('STRICT_NUMBERS', 'False').lower() == 'true'

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    CORS_ORIGINS = _origins_from_env(PRODUCTION_ORIGINS)


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    CORS_ORIGINS = list(DEFAULT_ORIGINS)


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Return the config class for an environment name (defaults to APP_ENV)."""
    return config.get(env or Config.APP_ENV, config['default'])
