"""Service registries - one per entity family."""

from signlink.application.services.base_registry import EntityRegistry, top_ranked
from signlink.application.services.user_registry import UserRegistry
from signlink.application.services.post_registry import PostRegistry
from signlink.application.services.message_registry import MessageRegistry
from signlink.application.services.video_registry import CourseRegistry, VideoRegistry
from signlink.application.services.friendship_registry import FriendshipRegistry
from signlink.application.services.demo_seed import seed_demo_data

__all__ = [
    "EntityRegistry",
    "top_ranked",
    "UserRegistry",
    "PostRegistry",
    "MessageRegistry",
    "CourseRegistry",
    "VideoRegistry",
    "FriendshipRegistry",
    "seed_demo_data",
]
