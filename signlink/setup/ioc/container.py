"""
Dishka DI Container Setup.

- Registers every registry as an APP-scoped dependency: the container builds
  it once and hands the same instance to every caller
- Each registry gets its own InMemoryRepository, no storage is shared
- A new container means new, empty registries (one per test, one per host
  application)

Flow:
  Container → provides → UserRegistry(InMemoryRepository()) → to → host code

Usage:
    container = create_container()
    users = container.get(UserRegistry)
    assert container.get(UserRegistry) is users
    ...
    container.close()
"""

import logging
from dishka import Container, Provider, Scope, make_container, provide

from signlink.application.services import (
    FriendshipRegistry,
    MessageRegistry,
    PostRegistry,
    UserRegistry,
    VideoRegistry,
    seed_demo_data,
)
from signlink.infrastructure.persistence import InMemoryRepository

logger = logging.getLogger(__name__)


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all registries and their storage.
    """

    # ==================== USERS & CONTENT ====================

    @provide(scope=Scope.APP)
    def get_user_registry(self) -> UserRegistry:
        return UserRegistry(InMemoryRepository())

    @provide(scope=Scope.APP)
    def get_post_registry(self) -> PostRegistry:
        return PostRegistry(InMemoryRepository())

    @provide(scope=Scope.APP)
    def get_video_registry(self) -> VideoRegistry:
        """Videos and courses are kept in two separate collections."""
        return VideoRegistry(InMemoryRepository(), InMemoryRepository())

    # ==================== SOCIAL ====================

    @provide(scope=Scope.APP)
    def get_message_registry(self) -> MessageRegistry:
        return MessageRegistry(InMemoryRepository())

    @provide(scope=Scope.APP)
    def get_friendship_registry(self) -> FriendshipRegistry:
        return FriendshipRegistry(InMemoryRepository())


def create_container(seed_demo: bool = False) -> Container:
    """
    Create and configure the DI container.

    - make_container() creates the container with all providers
    - Call this ONCE at host application startup
    - seed_demo fills empty registries with the demo community
    """
    container = make_container(AppProvider())
    if seed_demo:
        seed_demo_data(container.get(UserRegistry), container.get(PostRegistry))
    logger.debug("Container ready (demo seed: %s)", seed_demo)
    return container
