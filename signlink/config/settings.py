"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


class Config:
    ENV = os.getenv("SIGNLINK_ENV", "development")
    TESTING = os.getenv("TESTING", "false").lower() in _TRUTHY
    DEBUG = os.getenv("DEBUG", "false").lower() in _TRUTHY

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Registries
    TOP_RESULTS_LIMIT: int = int(os.getenv("TOP_RESULTS_LIMIT", "10"))
    SEED_DEMO_DATA: bool = os.getenv("SEED_DEMO_DATA", "false").lower() in _TRUTHY


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
    SEED_DEMO_DATA = os.getenv("SEED_DEMO_DATA", "true").lower() in _TRUTHY


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    SEED_DEMO_DATA = False


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("SIGNLINK_ENV", "development")
    return config.get(env, config["default"])
