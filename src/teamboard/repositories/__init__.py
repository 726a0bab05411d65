"""Storage access for posts and the entities they belong to."""

from .discussion_repo import DiscussionRepository
from .post_repo import PostRepository
from .team_repo import TeamRepository

__all__ = ["DiscussionRepository", "PostRepository", "TeamRepository"]
