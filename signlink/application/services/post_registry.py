"""
Post registry - factory for regular and video posts, engagement mutations and
feed ranking.
"""

from typing import Any, Mapping, Optional

from signlink.application.mappers import build_post
from signlink.application.services.base_registry import EntityRegistry, top_ranked
from signlink.domain.entities.post import Post


class PostRegistry(EntityRegistry[Post]):
    entity_label = "Post"

    def create_post(
        self, record: Mapping[str, Any], post_type: Optional[str] = None
    ) -> Post:
        """
        Build, validate and register a post.

        Args:
            record: Plain post record (author, content, counters, ...)
            post_type: "regular" | "video"; unknown values fall back to a
                regular post

        Raises:
            DomainValidationError: record is malformed or the post is invalid
                (no author, empty or oversized content, video without URL)
        """
        return self._register(build_post(record, post_type))

    def find_post(self, post_id: str) -> Optional[Post]:
        return self._find(post_id)

    def get_post(self, post_id: str) -> Post:
        return self._require(post_id)

    def list_posts(self) -> list[Post]:
        return self._snapshot()

    def posts_by_user(self, user_id: str) -> list[Post]:
        return [post for post in self._snapshot() if post.is_authored_by(user_id)]

    def delete_post(self, post_id: str) -> bool:
        return self._delete(post_id)

    def like_post(self, post_id: str) -> Post:
        post = self._require(post_id)
        post.like()
        return post

    def unlike_post(self, post_id: str) -> Post:
        post = self._require(post_id)
        post.unlike()
        return post

    def comment_on_post(self, post_id: str) -> Post:
        post = self._require(post_id)
        post.add_comment()
        return post

    def share_post(self, post_id: str) -> Post:
        post = self._require(post_id)
        post.share()
        return post

    def view_post(self, post_id: str) -> Post:
        post = self._require(post_id)
        post.add_view()
        return post

    def top_posts(self, limit: Optional[int] = None) -> list[Post]:
        """Highest engagement first; equal scores keep insertion order."""
        return top_ranked(self._snapshot(), Post.engagement_score, limit)
