# src/teamboard/models/__init__.py
"""SQLAlchemy models for the Teamboard application."""

from .discussion import Discussion, DiscussionMember
from .post import Post
from .team import Team, TeamMember

__all__ = [
    "Discussion", "DiscussionMember",
    "Post",
    "Team", "TeamMember",
]
