"""
Host application entry point: configure logging and build the registries.

    from signlink.bootstrap import bootstrap
    container = bootstrap()          # reads SIGNLINK_ENV
    users = container.get(UserRegistry)
"""

from typing import Optional

from dishka import Container

from signlink.config.logging_config import setup_logging
from signlink.config.settings import get_config
from signlink.setup.ioc import create_container


def bootstrap(env: Optional[str] = None, configure_logging: bool = True) -> Container:
    settings = get_config(env)
    if configure_logging:
        setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)
    return create_container(seed_demo=settings.SEED_DEMO_DATA)
