"""
Demo data for an empty deployment: three community members, the current
user and their first posts.
"""

import logging

from signlink.application.services.post_registry import PostRegistry
from signlink.application.services.user_registry import UserRegistry

logger = logging.getLogger(__name__)

DEMO_USERS = [
    (
        "deaf",
        {
            "name": "Sarah Johnson",
            "handle": "@sarah_signs",
            "email": "sarah@example.com",
            "avatar": "👩",
            "bio": "ASL teacher & advocate",
            "isOnline": True,
        },
    ),
    (
        "deaf",
        {
            "name": "Mike Chen",
            "handle": "@mikechen",
            "email": "mike@example.com",
            "avatar": "👨",
            "bio": "Deaf community organizer",
            "isOnline": True,
        },
    ),
    (
        "regular",
        {
            "name": "Emma Williams",
            "handle": "@emmawill",
            "email": "emma@example.com",
            "avatar": "👩‍🦰",
            "bio": "Sign language enthusiast",
        },
    ),
]

CURRENT_USER = {
    "name": "You",
    "handle": "@you",
    "email": "you@example.com",
    "avatar": "😊",
    "bio": "Learning sign language",
}

# (author index into DEMO_USERS, record)
DEMO_POSTS = [
    (
        0,
        {
            "content": 'Just learned a new sign for "coffee" today! ☕ '
            "The sign language community is amazing!",
            "likes": 24,
            "comments": 5,
        },
    ),
    (
        1,
        {
            "content": "Excited to announce our local deaf community meetup "
            "this Saturday at Central Park! 🤟",
            "likes": 42,
            "comments": 12,
        },
    ),
    (
        2,
        {
            "content": "Teaching my hearing friends sign language. They love it! "
            "Communication is for everyone 💚",
            "likes": 68,
            "comments": 15,
        },
    ),
]


def seed_demo_data(users: UserRegistry, posts: PostRegistry) -> bool:
    """Populate empty registries. Returns False when users already exist."""
    if users.list_users():
        logger.debug("Skipping demo seed, users already registered")
        return False

    members = [users.create_user(record, kind) for kind, record in DEMO_USERS]
    users.set_current_user(users.create_user(CURRENT_USER, "deaf"))

    if not posts.list_posts():
        for author_index, record in DEMO_POSTS:
            posts.create_post({**record, "author": members[author_index]})

    logger.info(
        "Seeded %d demo users and %d posts",
        len(users.list_users()),
        len(posts.list_posts()),
    )
    return True
