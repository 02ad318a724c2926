import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))
os.environ.setdefault("SIGNLINK_ENV", "testing")

from signlink.application.services import (
    FriendshipRegistry,
    MessageRegistry,
    PostRegistry,
    UserRegistry,
    VideoRegistry,
)
from signlink.setup.ioc import create_container


@pytest.fixture()
def container():
    """A fresh DI container (and so fresh registries) for each test."""
    container = create_container()
    yield container
    container.close()


@pytest.fixture()
def users(container) -> UserRegistry:
    return container.get(UserRegistry)


@pytest.fixture()
def posts(container) -> PostRegistry:
    return container.get(PostRegistry)


@pytest.fixture()
def messages(container) -> MessageRegistry:
    return container.get(MessageRegistry)


@pytest.fixture()
def videos(container) -> VideoRegistry:
    return container.get(VideoRegistry)


@pytest.fixture()
def friendships(container) -> FriendshipRegistry:
    return container.get(FriendshipRegistry)


@pytest.fixture()
def sarah(users):
    return users.create_user(
        {
            "name": "Sarah Johnson",
            "handle": "@sarah_signs",
            "email": "sarah@example.com",
            "isOnline": True,
        },
        "deaf",
    )


@pytest.fixture()
def mike(users):
    return users.create_user(
        {"name": "Mike Chen", "handle": "@mikechen", "email": "mike@example.com"},
        "regular",
    )


@pytest.fixture()
def instructor(users):
    return users.create_user(
        {
            "name": "Dana Reyes",
            "handle": "@dana_teaches",
            "email": "dana@example.com",
            "certifications": ["ASLTA"],
            "yearsOfExperience": 8,
        },
        "instructor",
    )
